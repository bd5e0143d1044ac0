"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path

import pytest

from tagconf import Configuration

SAMPLE_TEXT = """\
[ahoi]
    [bhoi]
        [choi]
            bla = yes
        [!choi]
        [choi]
            bla = no
        [!choi]
    [!bhoi]
    [bhoi]
        [choi]
            bla = 1
        [!choi]
        [choi]
            bla = ok
        [!choi]
    [!bhoi]
[!ahoi]
"""


@pytest.fixture
def sample_text() -> str:
    """Nested sample with repeated sibling sections."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_config(sample_text: str) -> Configuration:
    """Configuration parsed from the sample text."""
    return Configuration("sample.conf", sample_text)


@pytest.fixture
def config_file(tmp_path: Path, sample_text: str) -> Path:
    """Sample text written to a temporary config file."""
    path = tmp_path / "sample.conf"
    path.write_text(sample_text)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    logger = logging.getLogger("tagconf")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
