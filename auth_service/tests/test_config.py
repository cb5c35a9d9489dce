from __future__ import annotations

import pytest
from pydantic import ValidationError

from auth_service.application.service import StatusCode
from auth_service.infrastructure.container import Container, build_authentication_service
from auth_service.infrastructure.repositories.memory import InMemorySessionStore
from auth_service.shared.config import AppConfig, StorageBackend, load_config
from auth_service.shared.config.settings import HashingConfig, ObservabilityConfig, SessionConfig


@pytest.fixture(autouse=True)
def _reset_config_cache():
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.mark.parametrize("value", ["in_memory", "in-memory", "InMemory", "IN_MEMORY"])
def test_storage_backend_spellings(value: str) -> None:
    assert StorageBackend.parse(value) is StorageBackend.IN_MEMORY


def test_unknown_storage_backend_rejected() -> None:
    with pytest.raises(ValueError):
        StorageBackend.parse("postgres")

    with pytest.raises(ValidationError):
        AppConfig(storage_backend="postgres")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_STORAGE", "in-memory")
    monkeypatch.setenv("AUTH_PORT", "6000")
    monkeypatch.setenv("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")
    monkeypatch.setenv("SESSION_CAPACITY", "3")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("METRICS_ENABLED", "false")

    config = load_config()

    assert config.storage_backend is StorageBackend.IN_MEMORY
    assert config.server.port == 6000
    assert config.hashing.method == "pbkdf2:sha256:1000"
    assert config.sessions.capacity == 3
    assert config.log_level == "DEBUG"
    assert config.observability.metrics_enabled is False


def test_load_config_is_cached() -> None:
    assert load_config() is load_config()


def test_container_wires_configured_stores(app_config: AppConfig) -> None:
    app_config.sessions = SessionConfig(capacity=2)
    container = Container(app_config)

    assert container.credential_store is container.stores[0]
    assert isinstance(container.session_store, InMemorySessionStore)
    assert container.password_hasher.method == app_config.hashing.method
    assert container.authentication_service is container.authentication_service


def test_build_authentication_service_end_to_end(app_config: AppConfig) -> None:
    service = build_authentication_service(app_config)

    assert service.sign_up("alice", "secret").status_code is StatusCode.SUCCESS
    signed_in = service.sign_in("alice", "secret")
    assert signed_in.status_code is StatusCode.SUCCESS
    assert service.sign_out(signed_in.session_token).status_code is StatusCode.SUCCESS


def test_separate_services_do_not_share_state(app_config: AppConfig) -> None:
    first = build_authentication_service(app_config)
    second = build_authentication_service(app_config)

    first.sign_up("alice", "secret")

    assert second.sign_in("alice", "secret").status_code is StatusCode.FAILURE


def test_hashing_config_validates_salt_length() -> None:
    with pytest.raises(ValidationError):
        HashingConfig(salt_length=4)


def test_observability_config_only_toggles_metrics(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("METRICS_ENABLED", "yes")

    config = ObservabilityConfig()

    assert set(ObservabilityConfig.model_fields) == {"metrics_enabled"}
    assert config.metrics_enabled is True
    assert not hasattr(AppConfig, "is_production")
