"""HTTP quote source for the index-trader API."""

import logging

import requests

from .base import QuoteSource, TransportError

logger = logging.getLogger(__name__)


class HttpQuoteSource(QuoteSource):
    """Fetches the quote document with a single HTTP GET."""

    def __init__(self, url: str, user_agent: str, timeout: float = 30):
        """Initialize HTTP quote source.

        Args:
            url: Endpoint returning the JSON quote document
            user_agent: User-Agent header value; the API answers 403 without one
            timeout: Request timeout in seconds
        """
        if not user_agent:
            raise ValueError("A User-Agent is required by the quote API")
        self.url = url
        self.timeout = timeout
        self.headers = {
            "User-Agent": user_agent,
        }

    def fetch_raw(self) -> str:
        logger.info(f"Fetching quotes from {self.url}")
        try:
            response = requests.get(self.url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Quote request failed: {e}")
            raise TransportError(f"Failed to fetch quotes from {self.url}: {e}") from e

        logger.debug(f"Received {len(response.text)} characters from {self.url}")
        return response.text

    def describe(self) -> str:
        return self.url
