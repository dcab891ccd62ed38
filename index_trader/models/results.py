"""Result models for trading analysis."""

from dataclasses import dataclass
from typing import Any, Optional

from .quote import Quote


@dataclass(frozen=True)
class BuySellPair:
    """Best buy/sell pair found in a quote series."""

    buy: Quote
    sell: Quote

    @property
    def absolute_return(self) -> float:
        """Return realized by buying at the low and selling at the high."""
        return self.sell.high - self.buy.low


@dataclass(frozen=True)
class StageResult:
    """Outcome of a single pipeline stage.

    Exactly one of ``value`` or ``error`` is meaningful, selected by ``ok``.
    """

    ok: bool
    value: Any = None
    error: Optional[Exception] = None
    stage: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "StageResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, stage: str, error: Exception) -> "StageResult":
        return cls(ok=False, error=error, stage=stage)
