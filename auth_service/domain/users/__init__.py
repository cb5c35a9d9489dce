# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Session, User
from .exceptions import (
    DuplicateUsernameError,
    HashingFailureError,
    InvalidCredentialsError,
    SessionNotFoundError,
    SessionStoreExhaustedError,
    UserNotFoundError,
)
from .repositories import CredentialStore, PasswordHasher, SessionStore

__all__ = [
    "CredentialStore",
    "DuplicateUsernameError",
    "HashingFailureError",
    "InvalidCredentialsError",
    "PasswordHasher",
    "Session",
    "SessionNotFoundError",
    "SessionStore",
    "SessionStoreExhaustedError",
    "User",
    "UserNotFoundError",
]
