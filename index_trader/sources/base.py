"""Base classes for quote sources."""

from abc import ABC, abstractmethod


class QuoteSourceError(Exception):
    """Base exception for quote retrieval and decoding errors."""

    pass


class TransportError(QuoteSourceError):
    """Raised when raw quote data cannot be retrieved."""

    pass


class DecodeError(QuoteSourceError):
    """Raised when raw quote data cannot be turned into quotes."""

    pass


class QuoteSource(ABC):
    """Base class for sources of raw quote documents."""

    @abstractmethod
    def fetch_raw(self) -> str:
        """Retrieve the raw JSON quote document.

        Returns:
            Document text

        Raises:
            TransportError: If the document cannot be retrieved
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable description of where quotes come from."""
        pass
