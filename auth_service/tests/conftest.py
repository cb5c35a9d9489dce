from __future__ import annotations

import pytest

from auth_service.application.authenticator import Authenticator
from auth_service.application.service import AuthenticationService
from auth_service.application.services.password_hashing import WerkzeugPasswordHasher
from auth_service.infrastructure.repositories.memory import (
    InMemoryCredentialStore,
    InMemorySessionStore,
)
from auth_service.shared.config import AppConfig
from auth_service.shared.config.settings import HashingConfig, ObservabilityConfig

# Low iteration count keeps the KDF fast in tests.
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def password_hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=FAST_HASH_METHOD)


@pytest.fixture()
def credential_store(password_hasher: WerkzeugPasswordHasher) -> InMemoryCredentialStore:
    return InMemoryCredentialStore(password_hasher)


@pytest.fixture()
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture()
def authenticator(
    credential_store: InMemoryCredentialStore, session_store: InMemorySessionStore
) -> Authenticator:
    return Authenticator(credentials=credential_store, sessions=session_store)


@pytest.fixture()
def service(authenticator: Authenticator) -> AuthenticationService:
    return AuthenticationService(authenticator, metrics_enabled=False)


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        hashing=HashingConfig(method=FAST_HASH_METHOD),
        observability=ObservabilityConfig(metrics_enabled=False),
    )
