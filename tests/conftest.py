"""Pytest fixtures for luach tests."""

import pytest

import luach
from luach.api import clear_cache
from luach.config import Config
from luach.core.time import MoladTime


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Every test starts from the built-in configuration and an empty environment."""
    monkeypatch.delenv("LUACH_CURRENT_YEAR", raising=False)
    monkeypatch.delenv("LUACH_LOG_LEVEL", raising=False)
    luach.set_config(Config())
    yield
    luach.set_config(Config())
    clear_cache()


@pytest.fixture
def tishrei_5784() -> MoladTime:
    """Molad of Tishrei 5784 in weekday form: Friday, 11h 882ch past nightfall."""
    return MoladTime(6, 11, 882)
