# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackend(str, Enum):
    IN_MEMORY = "in_memory"

    @classmethod
    def parse(cls, value: "str | StorageBackend") -> "StorageBackend":
        if isinstance(value, StorageBackend):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unsupported storage backend: {value!r}")
        normalized = value.strip().replace("-", "_").lower()
        if normalized == "inmemory":
            normalized = cls.IN_MEMORY.value
        return cls(normalized)


class ServerConfig(BaseSettings):
    host: str = Field("0.0.0.0", alias="AUTH_HOST")
    port: int = Field(50051, ge=1, le=65535, alias="AUTH_PORT")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


class HashingConfig(BaseSettings):
    method: str = Field("pbkdf2:sha256:600000", alias="PASSWORD_HASH_METHOD")
    salt_length: int = Field(16, ge=8, alias="PASSWORD_SALT_LENGTH")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


class SessionConfig(BaseSettings):
    capacity: int | None = Field(None, ge=1, alias="SESSION_CAPACITY")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


class ClientConfig(BaseSettings):
    service_url: str = Field("http://127.0.0.1:50051", alias="AUTH_SERVICE_URL")
    timeout: float = Field(10.0, ge=0.1, alias="AUTH_CLIENT_TIMEOUT")
    health_check_interval: float = Field(1.0, ge=0.0, alias="HEALTH_CHECK_INTERVAL")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


class ResilienceConfig(BaseSettings):
    default_timeout: float = Field(15.0, ge=0.1, alias="RESILIENCE_TIMEOUT")
    max_retries: int = Field(3, ge=0, alias="RESILIENCE_RETRIES")
    backoff_base: float = Field(0.5, ge=0.0, alias="RESILIENCE_BACKOFF_BASE")
    backoff_cap: float = Field(8.0, ge=0.0, alias="RESILIENCE_BACKOFF_CAP")
    circuit_fail_threshold: int = Field(5, ge=1, alias="RESILIENCE_CIRCUIT_THRESHOLD")
    circuit_reset_timeout: float = Field(60.0, ge=0.0, alias="RESILIENCE_CIRCUIT_RESET")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


class ObservabilityConfig(BaseSettings):
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")

    @field_validator("metrics_enabled", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _server_config_factory() -> ServerConfig:
    return ServerConfig()  # type: ignore[call-arg]


def _hashing_config_factory() -> HashingConfig:
    return HashingConfig()  # type: ignore[call-arg]


def _session_config_factory() -> SessionConfig:
    return SessionConfig()  # type: ignore[call-arg]


def _client_config_factory() -> ClientConfig:
    return ClientConfig()  # type: ignore[call-arg]


def _resilience_config_factory() -> ResilienceConfig:
    return ResilienceConfig()  # type: ignore[call-arg]


def _observability_config_factory() -> ObservabilityConfig:
    return ObservabilityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    storage_backend: StorageBackend = Field(StorageBackend.IN_MEMORY, alias="AUTH_STORAGE")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    server: ServerConfig = Field(default_factory=_server_config_factory)
    hashing: HashingConfig = Field(default_factory=_hashing_config_factory)
    sessions: SessionConfig = Field(default_factory=_session_config_factory)
    client: ClientConfig = Field(default_factory=_client_config_factory)
    resilience: ResilienceConfig = Field(default_factory=_resilience_config_factory)
    observability: ObservabilityConfig = Field(default_factory=_observability_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("storage_backend", mode="before")
    @classmethod
    def _parse_storage_backend(cls, value: str | StorageBackend) -> StorageBackend:
        return StorageBackend.parse(value)

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "ClientConfig",
    "HashingConfig",
    "ObservabilityConfig",
    "ResilienceConfig",
    "ServerConfig",
    "SessionConfig",
    "StorageBackend",
    "load_config",
]
