# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from collections.abc import Callable
from functools import cached_property

from auth_service.application.authenticator import Authenticator
from auth_service.application.service import AuthenticationService
from auth_service.application.services.password_hashing import WerkzeugPasswordHasher
from auth_service.domain.users.repositories import CredentialStore, SessionStore
from auth_service.infrastructure.repositories.memory import (
    InMemoryCredentialStore,
    InMemorySessionStore,
)
from auth_service.interfaces.http.controllers.auth_controller import AuthController
from auth_service.interfaces.http.controllers.misc_controller import MiscController
from auth_service.shared.config import AppConfig, StorageBackend, load_config
from auth_service.shared.errors.base import InfrastructureError
from auth_service.shared.logging import logger

Stores = tuple[CredentialStore, SessionStore]


def _build_in_memory_stores(container: Container) -> Stores:
    credentials = InMemoryCredentialStore(container.password_hasher)
    sessions = InMemorySessionStore(capacity=container.config.sessions.capacity)
    return credentials, sessions


_STORE_BUILDERS: dict[StorageBackend, Callable[[Container], Stores]] = {
    StorageBackend.IN_MEMORY: _build_in_memory_stores,
}


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self.config.hashing.method,
            salt_length=self.config.hashing.salt_length,
        )

    @cached_property
    def stores(self) -> Stores:
        backend = self.config.storage_backend
        builder = _STORE_BUILDERS.get(backend)
        if builder is None:
            raise InfrastructureError(
                "unsupported_storage_backend", context={"backend": str(backend)}
            )
        logger.info(f"container: building stores backend={backend.value}")
        return builder(self)

    @cached_property
    def credential_store(self) -> CredentialStore:
        return self.stores[0]

    @cached_property
    def session_store(self) -> SessionStore:
        return self.stores[1]

    @cached_property
    def authenticator(self) -> Authenticator:
        return Authenticator(credentials=self.credential_store, sessions=self.session_store)

    @cached_property
    def authentication_service(self) -> AuthenticationService:
        return AuthenticationService(
            self.authenticator,
            metrics_enabled=self.config.observability.metrics_enabled,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(service=self.authentication_service)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(storage_backend=self.config.storage_backend)


def build_authentication_service(config: AppConfig | None = None) -> AuthenticationService:
    return Container(config).authentication_service


__all__ = ["Container", "build_authentication_service"]
