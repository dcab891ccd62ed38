"""Single buy/sell return optimization over a quote series."""

from typing import Sequence

from .models.quote import Quote
from .models.results import BuySellPair


class EmptyInputError(ValueError):
    """Raised when the optimizer receives no quotes."""

    pass


def calculate_highest_return(quotes: Sequence[Quote]) -> BuySellPair:
    """Find the buy/sell pair with the highest ``sell.high - buy.low``.

    The quotes must be ordered by date descending (newest first), which is
    what ``QuoteSeries.newest_first`` guarantees. Walking the list therefore
    moves backward in time, so the highest high seen so far is always a
    valid sell for the current quote.

    Among pairs with equal return the first one found wins, i.e. the one
    with the most recent buy date.

    Args:
        quotes: Non-empty quotes ordered newest first

    Returns:
        BuySellPair with the maximal return; ``(q, q)`` for a single quote

    Raises:
        EmptyInputError: If no quotes are given
    """
    if len(quotes) == 0:
        raise EmptyInputError("Cannot calculate a return from an empty quote series")

    first = quotes[0]
    highest_sell = first
    best_pair = BuySellPair(buy=first, sell=first)
    highest_return = 0.0

    for index in range(1, len(quotes)):
        current = quotes[index]

        # keep track of the quote with the highest high so far
        if current.high > highest_sell.high:
            highest_sell = current

        current_return = highest_sell.high - current.low
        if current_return > highest_return:
            best_pair = BuySellPair(buy=current, sell=highest_sell)
            highest_return = current_return

    return best_pair
