"""Decoding of the index-trader JSON document into quotes."""

import json
import logging
from typing import List

from pydantic import ValidationError

from ..models.quote import Quote, QuoteRecord
from .base import DecodeError

logger = logging.getLogger(__name__)


def decode_quotes(data: str) -> List[Quote]:
    """Parse the quote document into Quote objects.

    The document is expected to look like ``{"data": [{"quote_date": ...,
    "paper": ..., "exch": ..., "open": ..., "high": ..., "low": ...,
    "close": ...}, ...]}``. Quotes are returned in document order.

    Args:
        data: Raw JSON text

    Returns:
        List of quotes

    Raises:
        DecodeError: If the text is not valid JSON or does not match the schema
    """
    try:
        document = json.loads(data)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON in quote document: {e}") from e

    if not isinstance(document, dict):
        raise DecodeError(
            f"Quote document must be a JSON object, got {type(document).__name__}"
        )
    if "data" not in document:
        raise DecodeError("Missing 'data' field in quote document")

    records = document["data"]
    if not isinstance(records, list):
        raise DecodeError(f"'data' must be a list, got {type(records).__name__}")

    quotes = []
    for index, record in enumerate(records):
        try:
            quotes.append(QuoteRecord.model_validate(record).to_quote())
        except ValidationError as e:
            raise DecodeError(
                f"Invalid quote at index {index}: {_summarize(e)}"
            ) from e

    logger.info(f"Decoded {len(quotes)} quotes")
    return quotes


def _summarize(error: ValidationError) -> str:
    """Single-line description of a pydantic validation error."""
    return "; ".join(
        f"{'.'.join(map(str, err['loc'])) or 'record'}: {err['msg']}"
        for err in error.errors()
    )
