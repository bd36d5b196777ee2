"""Price scans over product records."""

from typing import Iterable, Optional

from ..logging import get_logger
from .models import PricedItem

logger = get_logger(__name__)


def get_most_expensive_product(products: Iterable[PricedItem]) -> Optional[PricedItem]:
    """
    Return the product with the highest price.

    A single left-to-right pass with a strict comparison, so the first
    product holding the maximum price wins ties.

    Args:
        products: Priced records to scan

    Returns:
        The most expensive product, or None when there are no products
    """
    max_product: Optional[PricedItem] = None

    for product in products:
        if max_product is None or product.price > max_product.price:
            max_product = product

    if max_product is None:
        logger.debug("No products to scan")
    return max_product
