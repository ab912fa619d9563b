from __future__ import annotations

import logging

import pytest

from aquadex.core.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    configure_logging()


def test_app_logger_follows_settings_and_third_party_stays_quiet():
    level = configure_logging()

    assert level == logging.INFO
    assert logging.getLogger("aquadex").level == logging.INFO
    assert logging.getLogger().level == logging.WARNING


def test_explicit_level_overrides_settings():
    level = configure_logging("debug")

    assert level == logging.DEBUG
    assert logging.getLogger("aquadex.search.geosearch").isEnabledFor(logging.DEBUG)
    assert not logging.getLogger("some_dependency").isEnabledFor(logging.INFO)


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty")
