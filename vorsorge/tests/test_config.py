import logging

import pytest

from vorsorge.app import create_app


@pytest.fixture(autouse=True)
def restore_logger_level():
    logger = logging.getLogger("vorsorge")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("VORSORGE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("VORSORGE_API_PREFIX", "/v1")
    app = create_app()

    assert app.config["LOG_LEVEL"] == "DEBUG"
    assert logging.getLogger("vorsorge").level == logging.DEBUG
    with app.test_client() as client:
        assert client.get("/v1/health").status_code == 200


def test_test_config_wins_over_defaults():
    app = create_app({"LOG_LEVEL": "WARNING", "TESTING": True})
    assert app.testing
    assert logging.getLogger("vorsorge").level == logging.WARNING


def test_logger_level_is_restored_between_tests(restore_logger_level):
    original = restore_logger_level.level
    create_app({"LOG_LEVEL": "ERROR"})
    assert restore_logger_level.level == logging.ERROR
    restore_logger_level.setLevel(original)
    assert restore_logger_level.level == original
