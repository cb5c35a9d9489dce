from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from auth_service.application.service import StatusCode

MAX_USERNAME_LENGTH = 256
# Bounds the work a single request can push into the KDF.
MAX_PASSWORD_LENGTH = 1024


class CredentialsRequestDTO(BaseModel):
    username: str = Field(max_length=MAX_USERNAME_LENGTH)
    password: str = Field(max_length=MAX_PASSWORD_LENGTH)

    model_config = ConfigDict(strict=True, extra="ignore")


class SignUpRequestDTO(CredentialsRequestDTO):
    pass


class SignInRequestDTO(CredentialsRequestDTO):
    pass


class SessionRequestDTO(BaseModel):
    session_token: str = Field(max_length=512)

    model_config = ConfigDict(strict=True, extra="ignore")


class StatusResponseDTO(BaseModel):
    status_code: StatusCode


class SignInResponseDTO(StatusResponseDTO):
    session_token: str = ""
    user_id: str = ""


class ValidateSessionResponseDTO(StatusResponseDTO):
    user_id: str = ""
