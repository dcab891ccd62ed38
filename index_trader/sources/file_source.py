"""Quote source reading a saved JSON document from disk."""

import logging
from pathlib import Path

from .base import QuoteSource, TransportError

logger = logging.getLogger(__name__)


class FileQuoteSource(QuoteSource):
    """Reads a previously downloaded quote document."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch_raw(self) -> str:
        logger.info(f"Reading quotes from {self.path}")
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to read quote file {self.path}: {e}")
            raise TransportError(f"Failed to read quotes from {self.path}: {e}") from e

    def describe(self) -> str:
        return str(self.path)
