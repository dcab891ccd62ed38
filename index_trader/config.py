"""Configuration management."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_URL = "http://www.modularfinance.se/api/puzzles/index-trader.json"
DEFAULT_USER_AGENT = "mf_puzzle/1.0"


@dataclass
class TraderConfig:
    """Index trader configuration from environment variables."""

    url: str = DEFAULT_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 30.0
    quotes_file: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "TraderConfig":
        """Load configuration from environment variables.

        Reads:
        - INDEX_TRADER_URL (default: the public index-trader endpoint)
        - INDEX_TRADER_USER_AGENT (default: mf_puzzle/1.0)
        - INDEX_TRADER_TIMEOUT_SECONDS (default: 30)
        - INDEX_TRADER_QUOTES_FILE (optional, read quotes from disk instead)
        - LOG_LEVEL (default: WARNING)
        """
        timeout_str = os.getenv("INDEX_TRADER_TIMEOUT_SECONDS", "30")
        try:
            timeout_seconds = float(timeout_str)
        except ValueError as e:
            raise ValueError(
                f"INDEX_TRADER_TIMEOUT_SECONDS must be a number, got {timeout_str!r}"
            ) from e

        return cls(
            url=os.getenv("INDEX_TRADER_URL", DEFAULT_URL),
            user_agent=os.getenv("INDEX_TRADER_USER_AGENT", DEFAULT_USER_AGENT),
            timeout_seconds=timeout_seconds,
            quotes_file=os.getenv("INDEX_TRADER_QUOTES_FILE") or None,
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> None:
        """Validate configuration."""
        if not self.quotes_file:
            if not self.url:
                raise ValueError("INDEX_TRADER_URL is required")
            if not self.user_agent:
                raise ValueError("INDEX_TRADER_USER_AGENT is required")
        if self.timeout_seconds <= 0:
            raise ValueError("INDEX_TRADER_TIMEOUT_SECONDS must be positive")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.log_level}")
