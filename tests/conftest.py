"""
Shared pytest fixtures for the exactreal test suite.

This module provides:
- Sample values of every Real variant
- Settings isolation for tests that change configuration through the environment
"""

import logging

import pytest

from exactreal.core.config import get_settings
from exactreal.math import Fraction, Integer, Irrational, Rational, Unset


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear the cached settings so environment changes made by the test take effect."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def reset_package_logger():
    """Restore the exactreal logger after a test configures it."""
    package_logger = logging.getLogger("exactreal")
    handlers, level = list(package_logger.handlers), package_logger.level
    yield package_logger
    package_logger.handlers = handlers
    package_logger.setLevel(level)


@pytest.fixture
def unset():
    """Fixture providing a Real that was never given a value."""
    return Unset()


@pytest.fixture
def one_half():
    """Fixture providing Rational 1/2."""
    return Rational(Fraction.of(1, 2))


@pytest.fixture
def sample_reals():
    """One value of each live variant, with both signs."""
    return [
        Integer(3),
        Integer(-4),
        Rational(Fraction.of(1, 2)),
        Rational(Fraction.of(-7, 3)),
        Irrational(0.25),
        Irrational(-2.5),
    ]


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
