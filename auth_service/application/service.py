# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Concurrency-safe facade over a single :class:`Authenticator`.

Every operation runs as one critical section under a process-wide lock, so
calls against the same instance are linearised: two concurrent sign-ups for
the same username can never both succeed. Results are translated into
response values carrying a :class:`StatusCode`; every error kind collapses
to ``FAILURE`` with an empty payload so the error taxonomy never reaches
the transport.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from auth_service.application.authenticator import Authenticator
from auth_service.infrastructure.observability import track_operation
from auth_service.shared.errors.base import AppError
from auth_service.shared.logging import logger

T = TypeVar("T")


class StatusCode(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass(slots=True, frozen=True)
class SignUpResponse:
    status_code: StatusCode


@dataclass(slots=True, frozen=True)
class SignInResponse:
    status_code: StatusCode
    session_token: str = ""
    user_id: str = ""


@dataclass(slots=True, frozen=True)
class SignOutResponse:
    status_code: StatusCode


@dataclass(slots=True, frozen=True)
class ValidateSessionResponse:
    status_code: StatusCode
    user_id: str = ""


@dataclass(slots=True, frozen=True)
class DeleteUserResponse:
    status_code: StatusCode


class AuthenticationService:
    def __init__(
        self,
        authenticator: Authenticator,
        *,
        metrics_enabled: bool | None = None,
    ) -> None:
        self._authenticator = authenticator
        self._lock = threading.Lock()
        self._metrics_enabled = metrics_enabled

    def sign_up(self, username: str, password: str) -> SignUpResponse:
        ok, _ = self._run("sign_up", lambda: self._authenticator.sign_up(username, password))
        return SignUpResponse(status_code=_status(ok))

    def sign_in(self, username: str, password: str) -> SignInResponse:
        ok, result = self._run(
            "sign_in", lambda: self._authenticator.sign_in(username, password)
        )
        if not ok or result is None:
            return SignInResponse(status_code=StatusCode.FAILURE)
        session_token, user_id = result
        return SignInResponse(
            status_code=StatusCode.SUCCESS,
            session_token=session_token,
            user_id=user_id,
        )

    def sign_out(self, session_token: str) -> SignOutResponse:
        ok, _ = self._run("sign_out", lambda: self._authenticator.sign_out(session_token))
        return SignOutResponse(status_code=_status(ok))

    def validate_session(self, session_token: str) -> ValidateSessionResponse:
        ok, user_id = self._run(
            "validate_session", lambda: self._authenticator.resolve_session(session_token)
        )
        if not ok or user_id is None:
            return ValidateSessionResponse(status_code=StatusCode.FAILURE)
        return ValidateSessionResponse(status_code=StatusCode.SUCCESS, user_id=user_id)

    def delete_user(self, username: str) -> DeleteUserResponse:
        ok, _ = self._run("delete_user", lambda: self._authenticator.delete_user(username))
        return DeleteUserResponse(status_code=_status(ok))

    def _run(self, operation: str, call: Callable[[], T]) -> tuple[bool, T | None]:
        status = StatusCode.FAILURE
        with track_operation(
            operation, lambda: status.value, enabled=self._metrics_enabled
        ):
            try:
                with self._lock:
                    result = call()
            except AppError as exc:
                logger.info(f"auth.{operation}: failed code={exc.code}")
                return False, None
            except Exception:
                logger.exception(f"auth.{operation}: unexpected error")
                return False, None
            status = StatusCode.SUCCESS
            return True, result


def _status(ok: bool) -> StatusCode:
    return StatusCode.SUCCESS if ok else StatusCode.FAILURE


__all__ = [
    "AuthenticationService",
    "DeleteUserResponse",
    "SignInResponse",
    "SignOutResponse",
    "SignUpResponse",
    "StatusCode",
    "ValidateSessionResponse",
]
