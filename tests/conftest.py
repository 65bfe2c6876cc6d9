"""Shared fixtures for the Parsley test suite."""

from collections.abc import Iterator

import pytest

from parsley import Markdown, reset_options


@pytest.fixture(autouse=True)
def _default_options() -> Iterator[None]:
    """Every test starts and ends with the default process-wide options."""
    reset_options()
    yield
    reset_options()


@pytest.fixture
def md() -> Markdown:
    return Markdown()
