# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .authenticator import Authenticator
from .service import (
    AuthenticationService,
    DeleteUserResponse,
    SignInResponse,
    SignOutResponse,
    SignUpResponse,
    StatusCode,
    ValidateSessionResponse,
)

__all__ = [
    "AuthenticationService",
    "Authenticator",
    "DeleteUserResponse",
    "SignInResponse",
    "SignOutResponse",
    "SignUpResponse",
    "StatusCode",
    "ValidateSessionResponse",
]
