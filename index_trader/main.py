"""Index trader entry point.

Fetches the daily quote series and prints the single best buy/sell pair.
"""

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import TraderConfig
from .models.results import StageResult
from .pipeline import IndexTraderPipeline
from .reporter import report
from .sources.base import QuoteSource
from .sources.file_source import FileQuoteSource
from .sources.http_source import HttpQuoteSource

logger = logging.getLogger(__name__)


def build_source(config: TraderConfig) -> QuoteSource:
    """Create the quote source selected by the configuration."""
    if config.quotes_file:
        return FileQuoteSource(config.quotes_file)
    return HttpQuoteSource(
        url=config.url,
        user_agent=config.user_agent,
        timeout=config.timeout_seconds,
    )


def setup_logging(level: str) -> None:
    # stdout is reserved for the report
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main() -> None:
    """Main entry point for the index trader."""
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    try:
        config = TraderConfig.from_env()
        config.validate()
    except ValueError as e:
        setup_logging("WARNING")
        logger.error(f"Invalid configuration: {e}")
        report(StageResult.failure("config", e))
        sys.exit(1)

    setup_logging(config.log_level)

    result = IndexTraderPipeline(build_source(config)).run()
    report(result)
    sys.exit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
