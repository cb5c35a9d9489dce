# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import User


class CredentialStore(Protocol):
    def create_user(self, username: str, password: str) -> User: ...
    def find_user_id(self, username: str, password: str) -> str | None: ...
    def delete_user(self, username: str) -> None: ...


class SessionStore(Protocol):
    def create_session(self, user_id: str) -> str: ...
    def delete_session(self, token: str) -> None: ...
    def find_user_id(self, token: str) -> str | None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
