"""
Parsers turning raw JSON payloads into item records.

Functions in this module accept either a raw JSON document (str or
bytes) or an already-decoded list of mappings, and raise
MalformedDataError for anything that cannot become a record.
"""

from typing import Any, Callable, TypeVar, Union

import orjson

from ..errors import MalformedDataError
from ..logging import get_logger
from .models import PricedItem, RatedItem

logger = get_logger(__name__)

R = TypeVar("R")

RawPayload = Union[str, bytes, list]


def _preview(raw_data: Union[str, bytes]) -> str:
    if isinstance(raw_data, str):
        return raw_data[:200]
    return bytes(raw_data[:200]).decode("utf-8", errors="replace")


def parse_json_payload(raw_data: Union[str, bytes]) -> Any:
    """
    Parse a raw JSON document.

    Args:
        raw_data: JSON text

    Returns:
        Decoded Python value

    Raises:
        MalformedDataError: If the document is not valid JSON
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedDataError(
            f"Invalid JSON: {e}",
            raw_data=_preview(raw_data),
            expected_format="json",
        ) from e


def _parse_records(raw: RawPayload, build: Callable[[Any], R], record: str) -> tuple[R, ...]:
    payload = parse_json_payload(raw) if isinstance(raw, (str, bytes)) else raw

    if not isinstance(payload, list):
        raise MalformedDataError(
            f"{record} payload must be a JSON array",
            raw_data=repr(payload)[:200],
            expected_format="array",
        )

    records = []
    for index, entry in enumerate(payload):
        try:
            records.append(build(entry))
        except MalformedDataError as e:
            e.context["index"] = index
            logger.warning("Rejected malformed record", record=record, index=index, error=str(e))
            raise

    logger.debug("Parsed records", record=record, count=len(records))
    return tuple(records)


def parse_rated_items(raw: RawPayload) -> tuple[RatedItem, ...]:
    """Parse a JSON array of ``{"title", "rating"}`` objects."""
    return _parse_records(raw, RatedItem.from_dict, "RatedItem")


def parse_priced_items(raw: RawPayload) -> tuple[PricedItem, ...]:
    """Parse a JSON array of ``{"name", "price"}`` objects."""
    return _parse_records(raw, PricedItem.from_dict, "PricedItem")
