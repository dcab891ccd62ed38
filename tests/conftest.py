"""Shared test fixtures and utilities."""

import json

import pytest

from index_trader.models.quote import Quote


def make_quote(date: str, high: float, low: float, open_price=None, close=None) -> Quote:
    """Helper to create a quote where only date, high and low matter.

    Args:
        date: Quote date (ISO format)
        high: High price
        low: Low price
        open_price: Open price (defaults to low)
        close: Close price (defaults to high)

    Returns:
        Quote object
    """
    return Quote(
        date=date,
        symbol="OMXS30",
        exchange="Stockholm",
        open=low if open_price is None else open_price,
        high=high,
        low=low,
        close=high if close is None else close,
    )


def make_record(date: str, high: float, low: float) -> dict:
    """Helper to create one element of the API 'data' array."""
    return {
        "quote_date": date,
        "paper": "OMXS30",
        "exch": "Stockholm",
        "open": low,
        "high": high,
        "low": low,
        "close": high,
    }


def make_document(records: list[dict]) -> str:
    """Helper to create a JSON quote document from records."""
    return json.dumps({"data": records})


@pytest.fixture
def scenario_quotes():
    """Three quotes ordered newest first, best pair is buy and sell on D2."""
    return [
        make_quote("2018-01-03", high=9.0, low=4.0),
        make_quote("2018-01-02", high=12.0, low=5.0),
        make_quote("2018-01-01", high=10.0, low=8.0),
    ]


@pytest.fixture
def sample_records():
    """API records ordered newest first."""
    return [
        make_record("2018-03-16", high=1620.5, low=1601.25),
        make_record("2018-03-15", high=1615.0, low=1598.0),
        make_record("2018-03-14", high=1612.75, low=1590.5),
        make_record("2018-03-13", high=1630.0, low=1605.0),
    ]


@pytest.fixture
def sample_document(sample_records):
    """Valid JSON quote document."""
    return make_document(sample_records)
