# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Volatile stores backing the ``in_memory`` storage configuration.

Neither store locks: callers serialise access through
:class:`auth_service.application.service.AuthenticationService`.
"""

from __future__ import annotations

import secrets
import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from auth_service.domain.users.entities import Session, User
from auth_service.domain.users.exceptions import (
    DuplicateUsernameError,
    HashingFailureError,
    SessionNotFoundError,
    SessionStoreExhaustedError,
    UserNotFoundError,
)
from auth_service.domain.users.repositories import CredentialStore, PasswordHasher, SessionStore
from auth_service.shared.logging import logger

_TOKEN_BYTES = 32
_MAX_TOKEN_ATTEMPTS = 8


def new_session_token() -> str:
    return secrets.token_urlsafe(_TOKEN_BYTES)


class InMemoryCredentialStore(CredentialStore):
    def __init__(self, password_hasher: PasswordHasher) -> None:
        self._password_hasher = password_hasher
        self._users: dict[str, User] = {}
        # Hashed eagerly; lookups of unknown names must not pay for it.
        self._dummy_hash = password_hasher.hash(secrets.token_urlsafe(16))

    def __len__(self) -> int:
        return len(self._users)

    def create_user(self, username: str, password: str) -> User:
        if username in self._users:
            raise DuplicateUsernameError()

        user = User(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=self._password_hasher.hash(password),
            created_at=datetime.now(UTC),
        )
        self._users[username] = user
        logger.info(f"credentials: created user_id={user.id}")
        return user

    def find_user_id(self, username: str, password: str) -> str | None:
        user = self._users.get(username)
        if user is None:
            # Same KDF cost as a real mismatch.
            self._verify(password, self._dummy_hash)
            return None

        if self._verify(password, user.password_hash):
            return user.id
        return None

    def delete_user(self, username: str) -> None:
        user = self._users.pop(username, None)
        if user is None:
            raise UserNotFoundError()
        logger.info(f"credentials: deleted user_id={user.id}")

    def _verify(self, password: str, hashed: str) -> bool:
        try:
            return self._password_hasher.verify(password, hashed)
        except HashingFailureError as exc:
            logger.warning(f"credentials: stored hash rejected context={exc.context}")
            return False


class InMemorySessionStore(SessionStore):
    def __init__(
        self,
        *,
        capacity: int | None = None,
        token_factory: Callable[[], str] = new_session_token,
    ) -> None:
        self._capacity = capacity
        self._token_factory = token_factory
        self._sessions: dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(self, user_id: str) -> str:
        if self._capacity is not None and len(self._sessions) >= self._capacity:
            raise SessionStoreExhaustedError(context={"capacity": self._capacity})

        for _ in range(_MAX_TOKEN_ATTEMPTS):
            token = self._token_factory()
            if token not in self._sessions:
                break
        else:
            raise SessionStoreExhaustedError(context={"reason": "token_collision"})

        self._sessions[token] = Session(
            token=token, user_id=user_id, created_at=datetime.now(UTC)
        )
        logger.debug(f"sessions: created user_id={user_id} active={len(self._sessions)}")
        return token

    def delete_session(self, token: str) -> None:
        session = self._sessions.pop(token, None)
        if session is None:
            raise SessionNotFoundError()
        logger.debug(f"sessions: revoked user_id={session.user_id}")

    def find_user_id(self, token: str) -> str | None:
        session = self._sessions.get(token)
        return session.user_id if session else None


__all__ = ["InMemoryCredentialStore", "InMemorySessionStore", "new_session_token"]
