"""Shared fixtures for the wengert test suite."""

import pytest

from wengert import Tape, TapeConfig


@pytest.fixture
def tape() -> Tape:
    """A fresh tape with the default recording options."""
    return Tape()


@pytest.fixture
def signed_tape() -> Tape:
    """A fresh tape that records d(x - y)/dy = -1."""
    return Tape(config=TapeConfig.signed())
