import logging

import pytest

from app import config
from app.core import configure_logging


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_level_name_is_accepted() -> None:
    configure_logging("debug")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_level_defaults_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")

    configure_logging()

    assert logging.getLogger().level == logging.WARNING


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging("chatty")

    assert logging.getLogger().level == logging.INFO


def test_handler_installed_once() -> None:
    configure_logging()
    count = len(logging.getLogger().handlers)

    configure_logging()

    assert len(logging.getLogger().handlers) == count
