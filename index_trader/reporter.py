"""Human-readable reporting of pipeline results."""

import sys
from typing import List, Optional, TextIO

from .models.results import StageResult


def format_report(result: StageResult) -> List[str]:
    """Format a pipeline result as output lines.

    Args:
        result: Final pipeline result

    Returns:
        Three lines describing the trade, or one line describing the failure
    """
    if not result.ok:
        return [f"Got an exception during processing: {result.error}"]

    pair = result.value
    return [
        f"Buy at date: {pair.buy.date} for: {pair.buy.low}",
        f"Sell at date: {pair.sell.date} for: {pair.sell.high}",
        f"Absolute return: {pair.absolute_return}",
    ]


def report(result: StageResult, stream: Optional[TextIO] = None) -> None:
    """Write the formatted result, one line at a time."""
    stream = stream or sys.stdout
    for line in format_report(result):
        print(line, file=stream)
