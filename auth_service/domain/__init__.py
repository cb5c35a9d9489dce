# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users import (
    CredentialStore,
    DuplicateUsernameError,
    HashingFailureError,
    InvalidCredentialsError,
    PasswordHasher,
    Session,
    SessionNotFoundError,
    SessionStore,
    SessionStoreExhaustedError,
    User,
    UserNotFoundError,
)

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
