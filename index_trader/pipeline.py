"""Fetch, decode and analyze pipeline."""

import logging
from typing import List

from .models.quote import Quote, QuoteSeries, UnorderedSeriesError
from .models.results import StageResult
from .optimizer import EmptyInputError, calculate_highest_return
from .sources.base import DecodeError, QuoteSource, TransportError
from .sources.decoder import decode_quotes

logger = logging.getLogger(__name__)


class IndexTraderPipeline:
    """Runs quote retrieval through to the best buy/sell pair.

    Every stage returns a StageResult; ``run`` stops at the first failure.
    """

    def __init__(self, source: QuoteSource):
        """Initialize pipeline.

        Args:
            source: Where the raw quote document comes from
        """
        self.source = source

    def fetch(self) -> StageResult:
        try:
            return StageResult.success(self.source.fetch_raw())
        except TransportError as e:
            return self._fail("fetch", e)

    def decode(self, text: str) -> StageResult:
        try:
            return StageResult.success(decode_quotes(text))
        except DecodeError as e:
            return self._fail("decode", e)

    def order(self, quotes: List[Quote]) -> StageResult:
        try:
            return StageResult.success(QuoteSeries.newest_first(quotes))
        except UnorderedSeriesError as e:
            return self._fail("order", e)

    def optimize(self, series: QuoteSeries) -> StageResult:
        try:
            pair = calculate_highest_return(series)
        except EmptyInputError as e:
            return self._fail("optimize", e)

        logger.info(
            f"Best pair: buy {pair.buy.date} at {pair.buy.low}, "
            f"sell {pair.sell.date} at {pair.sell.high}"
        )
        return StageResult.success(pair)

    def run(self) -> StageResult:
        """Run all stages in order.

        Returns:
            Successful result holding a BuySellPair, or the first failure
        """
        logger.info(f"Running index trader against {self.source.describe()}")

        fetched = self.fetch()
        if not fetched.ok:
            return fetched

        decoded = self.decode(fetched.value)
        if not decoded.ok:
            return decoded

        ordered = self.order(decoded.value)
        if not ordered.ok:
            return ordered

        return self.optimize(ordered.value)

    def _fail(self, stage: str, error: Exception) -> StageResult:
        logger.error(f"Stage '{stage}' failed: {error}")
        return StageResult.failure(stage, error)
