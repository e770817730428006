"""Unit tests for the production CORS guard."""

import pytest

from src.app.api.http.app import check_cors_policy
from src.app.runtime.config.config_data import AppConfig, ConfigData, CORSConfig


def _config(environment: str, origins: list[str], allow_credentials: bool) -> ConfigData:
    return ConfigData(
        app=AppConfig(
            environment=environment,
            cors=CORSConfig(origins=origins, allow_credentials=allow_credentials),
        )
    )


def test_wildcard_with_credentials_in_production_is_refused():
    with pytest.raises(RuntimeError, match="allow_credentials=True"):
        check_cors_policy(_config("production", ["*"], allow_credentials=True))


def test_wildcard_without_credentials_in_production_is_allowed():
    check_cors_policy(_config("production", ["*"], allow_credentials=False))


def test_wildcard_with_credentials_outside_production_is_allowed():
    check_cors_policy(_config("development", ["*"], allow_credentials=True))


def test_explicit_origins_in_production_are_allowed():
    check_cors_policy(_config("production", ["https://shop.example.com"], allow_credentials=True))
