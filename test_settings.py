import logging

import pytest

import settings
from pizza import NyPizzaBuilder, Size, Topping


@pytest.fixture
def root_level():
    root = logging.getLogger()
    previous = root.level
    yield root
    root.setLevel(previous)


def test_configure_logging_uses_setting(root_level, monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "error")
    settings.configure_logging()
    assert root_level.level == logging.ERROR


def test_unknown_level_falls_back_to_warning(root_level):
    settings.configure_logging("chatty")
    assert root_level.level == logging.WARNING


@pytest.mark.parametrize("name", ["basic_format", "Logger", "raiseExceptions"])
def test_non_level_attribute_falls_back_to_warning(root_level, name):
    root_level.setLevel(logging.DEBUG)
    settings.configure_logging(name)
    assert root_level.level == logging.WARNING


def test_build_is_logged(root_level, caplog):
    settings.configure_logging("debug")
    with caplog.at_level(logging.DEBUG, logger="pizza"):
        NyPizzaBuilder(Size.SMALL).add_topping(Topping.HAM).build()
    assert "Built Small NY pizza" in caplog.text
