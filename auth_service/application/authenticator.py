# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from auth_service.domain.users.exceptions import InvalidCredentialsError, SessionNotFoundError
from auth_service.domain.users.repositories import CredentialStore, SessionStore
from auth_service.shared.logging import logger


class Authenticator:
    """Sign-up, sign-in and sign-out over a credential store and a session store.

    Store errors propagate unchanged. Not thread-safe on its own; share it
    through :class:`~auth_service.application.service.AuthenticationService`.
    """

    def __init__(self, *, credentials: CredentialStore, sessions: SessionStore) -> None:
        self._credentials = credentials
        self._sessions = sessions

    def sign_up(self, username: str, password: str) -> None:
        user = self._credentials.create_user(username, password)
        logger.info(f"auth.sign_up: ok user_id={user.id}")

    def sign_in(self, username: str, password: str) -> tuple[str, str]:
        user_id = self._credentials.find_user_id(username, password)
        if user_id is None:
            raise InvalidCredentialsError()

        token = self._sessions.create_session(user_id)
        logger.info(f"auth.sign_in: ok user_id={user_id}")
        return token, user_id

    def sign_out(self, token: str) -> None:
        self._sessions.delete_session(token)
        logger.info("auth.sign_out: ok")

    def resolve_session(self, token: str) -> str:
        user_id = self._sessions.find_user_id(token)
        if user_id is None:
            raise SessionNotFoundError()
        return user_id

    def delete_user(self, username: str) -> None:
        # Sessions already issued to the user stay valid.
        self._credentials.delete_user(username)
        logger.info("auth.delete_user: ok")


__all__ = ["Authenticator"]
