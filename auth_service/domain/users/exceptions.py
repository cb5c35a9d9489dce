# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from auth_service.shared.errors.base import DomainError, InfrastructureError


class DuplicateUsernameError(DomainError):
    code = "duplicate_username"
    status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class SessionNotFoundError(DomainError):
    code = "session_not_found"
    status = HTTPStatus.NOT_FOUND


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND


class HashingFailureError(InfrastructureError):
    code = "hashing_failure"


class SessionStoreExhaustedError(InfrastructureError):
    code = "session_store_exhausted"
    status = HTTPStatus.SERVICE_UNAVAILABLE
