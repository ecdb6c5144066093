"""Shared test fixtures for the case_converter test suite.

WHY: Several test modules need the same strict/tolerant option records
and an isolated comment store.

HOW: Pytest fixtures provide option records and the API's comment store.

RULES:
- The comment store fixture clears the singleton before and after each test
"""

import pytest

from case_converter.core.options import ConversionOptions


@pytest.fixture
def strict_options():
    """Options record that raises on invalid input."""
    return ConversionOptions(throw_on_invalid=True)


@pytest.fixture
def default_options():
    return ConversionOptions()


@pytest.fixture
def comment_store():
    """The API's singleton store, emptied around each test."""
    from case_converter.server.app import comment_store as store

    store.clear()
    yield store
    store.clear()
