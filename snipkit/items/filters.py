"""Rating-based filtering."""

from typing import Iterable, Optional

from ..config.defaults import get_default_config
from ..logging import get_logger
from .models import RatedItem

logger = get_logger(__name__)


def filter_by_rating(
    items: Iterable[RatedItem],
    threshold: Optional[float] = None
) -> list[RatedItem]:
    """
    Keep the items rated at or above the threshold.

    Args:
        items: Rated records, in any order
        threshold: Inclusive minimum rating, defaults to the configured
            ``ratings.min_rating`` (4)

    Returns:
        New list of matching items in their original order
    """
    if threshold is None:
        threshold = get_default_config().ratings.min_rating

    result = [item for item in items if item.rating >= threshold]

    logger.debug("Filtered items by rating", threshold=threshold, kept=len(result))
    return result
