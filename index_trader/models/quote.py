"""Canonical quote models."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnorderedSeriesError(ValueError):
    """Raised when quotes are not ordered newest-first by date."""

    pass


@dataclass(frozen=True)
class Quote:
    """Daily OHLC quote for a single instrument."""

    date: str
    symbol: str
    exchange: str
    open: float
    high: float
    low: float
    close: float


class QuoteRecord(BaseModel):
    """Validated quote record as delivered by the index-trader API."""

    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., alias="quote_date", description="Trading day")
    symbol: str = Field(..., alias="paper", description="Instrument name")
    exchange: str = Field(..., alias="exch", description="Exchange name")
    open: float = Field(..., description="Open price")
    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    close: float = Field(..., description="Close price")

    @field_validator("open", "high", "low", "close", mode="before")
    @classmethod
    def price_must_not_be_boolean(cls, v):
        """Reject JSON booleans, which lax float parsing would turn into 0.0 or 1.0."""
        if isinstance(v, bool):
            raise ValueError(f"Price must be a number, got {str(v).lower()}")
        return v

    def to_quote(self) -> Quote:
        """Convert the wire record into a Quote."""
        return Quote(
            date=self.date,
            symbol=self.symbol,
            exchange=self.exchange,
            open=self.open,
            high=self.high,
            low=self.low,
            close=self.close,
        )


class QuoteSeries(Sequence):
    """Immutable sequence of quotes ordered by date, newest first.

    Build instances with ``QuoteSeries.newest_first`` so the ordering is
    checked once, up front. Dates are compared as opaque strings, which is
    correct for ISO formatted dates.
    """

    def __init__(self, quotes: Iterable[Quote]):
        self._quotes = tuple(quotes)

    @classmethod
    def newest_first(cls, quotes: Iterable[Quote]) -> "QuoteSeries":
        """Create a series, verifying the newest-first ordering.

        Args:
            quotes: Quotes ordered by date descending. Equal dates are allowed.

        Returns:
            QuoteSeries wrapping the quotes

        Raises:
            UnorderedSeriesError: If a quote is newer than the one before it
        """
        quotes = tuple(quotes)
        for index in range(1, len(quotes)):
            previous, current = quotes[index - 1], quotes[index]
            if current.date > previous.date:
                raise UnorderedSeriesError(
                    f"Quotes must be ordered newest first: {current.date} at index "
                    f"{index} follows {previous.date}"
                )
        return cls(quotes)

    def __getitem__(self, index):
        return self._quotes[index]

    def __len__(self) -> int:
        return len(self._quotes)

    def __iter__(self) -> Iterator[Quote]:
        return iter(self._quotes)

    def __repr__(self) -> str:
        return f"QuoteSeries({len(self._quotes)} quotes)"
