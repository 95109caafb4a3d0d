from __future__ import annotations

import pytest

from zephyr.config import ZephyrConfig
from zephyr.emit.emitter import RuleEmitter
from zephyr.engine import Engine
from zephyr.parser.variants import VariantTable
from zephyr.theme import default_theme
from zephyr.utilities import create_default_registry


@pytest.fixture
def theme():
    """The stock theme."""
    return default_theme()


@pytest.fixture
def variants(theme):
    return VariantTable.from_theme(theme)


@pytest.fixture
def registry(theme):
    """A registry with every built-in utility family."""
    return create_default_registry(theme)


@pytest.fixture
def emitter(theme):
    return RuleEmitter(theme, ZephyrConfig())


@pytest.fixture
def engine():
    """A fresh engine with the stock theme and config."""
    return Engine()

