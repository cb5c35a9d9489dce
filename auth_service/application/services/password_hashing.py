"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from auth_service.domain.users.exceptions import HashingFailureError
from auth_service.domain.users.repositories import PasswordHasher

DEFAULT_METHOD = "pbkdf2:sha256:600000"
DEFAULT_SALT_LENGTH = 16


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted KDF hashing through werkzeug.

    Hashes are stored as ``method$salt$hash`` so verification needs nothing
    but the stored string. A wrong password verifies as ``False``; a stored
    value that is not a hash at all raises :class:`HashingFailureError`.
    """

    def __init__(
        self,
        *,
        method: str = DEFAULT_METHOD,
        salt_length: int = DEFAULT_SALT_LENGTH,
    ) -> None:
        self._method = method
        self._salt_length = salt_length

    @property
    def method(self) -> str:
        return self._method

    def hash(self, password: str) -> str:
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except (TypeError, ValueError) as exc:
            raise HashingFailureError(context={"stage": "hash"}) from exc

    def verify(self, password: str, hashed: str) -> bool:
        method, salt, digest = _split_hash(hashed)
        if not method or not salt or not digest:
            raise HashingFailureError(context={"stage": "verify", "reason": "malformed_hash"})
        try:
            return bool(check_password_hash(hashed, password))
        except (TypeError, ValueError) as exc:
            raise HashingFailureError(
                context={"stage": "verify", "reason": "unsupported_method"}
            ) from exc


def _split_hash(hashed: str) -> tuple[str, str, str]:
    parts = hashed.split("$", 2) if isinstance(hashed, str) else []
    if len(parts) != 3:
        return "", "", ""
    return parts[0], parts[1], parts[2]


__all__ = ["DEFAULT_METHOD", "DEFAULT_SALT_LENGTH", "WerkzeugPasswordHasher"]
