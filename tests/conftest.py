"""Pytest configuration and fixtures."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from basics.services.dictionary import Dictionary


@pytest.fixture
def dictionary() -> Dictionary:
    """Dictionary seeded with a single word."""
    return Dictionary({"test": "this is just a test"})


@pytest.fixture
def runner():
    """CLI runner with startup logging setup disabled."""
    with patch("basics.cli.main.setup_logging"):
        yield CliRunner()
