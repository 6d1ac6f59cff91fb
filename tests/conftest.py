"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from table2katex.schema import StyleConfig
from table2katex.session import ConversionSession

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def session() -> ConversionSession:
    return ConversionSession(StyleConfig())
