"""Unit tests for loguru configuration and stdlib interception."""

import logging

import pytest
from loguru import logger

from src.app.api.utils.app_startup import configure_logging


@pytest.fixture
def captured():
    configure_logging()
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        yield records
    finally:
        logger.remove(handler_id)


def test_stdlib_records_are_forwarded(captured):
    logging.getLogger("products.test").warning("hello %s", "world")

    forwarded = [r for r in captured if r["message"] == "hello world"]
    assert forwarded
    assert forwarded[0]["level"].name == "WARNING"
    assert forwarded[0]["extra"]["logger_name"] == "products.test"


def test_uvicorn_access_logs_are_dropped(captured):
    logging.getLogger("uvicorn.access").critical("GET /products 200")

    assert not [r for r in captured if r["message"] == "GET /products 200"]


def test_request_id_defaults_to_dash(captured):
    logger.info("no request in flight")

    record = next(r for r in captured if r["message"] == "no request in flight")
    assert record["extra"]["request_id"] == "-"


def test_sqlalchemy_engine_noise_is_reduced(captured):
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_records_carry_service_name(captured):
    logger.info("tagged")

    record = next(r for r in captured if r["message"] == "tagged")
    assert record["extra"]["service"] == "products-api"


def test_library_levels_come_from_config(monkeypatch):
    from src.app.api.utils import app_startup
    from src.app.runtime.config.config_data import ConfigData, LoggingConfig

    config = ConfigData(
        logging=LoggingConfig(file=None, library_levels={"sqlalchemy.engine": "info"})
    )
    monkeypatch.setattr(app_startup, "get_config", lambda: config)

    app_startup.configure_logging()

    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
