# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, ValidationError

from auth_service.application.service import AuthenticationService
from auth_service.interfaces.http.dto.auth import (
    SessionRequestDTO,
    SignInRequestDTO,
    SignInResponseDTO,
    SignUpRequestDTO,
    StatusResponseDTO,
    ValidateSessionResponseDTO,
)
from auth_service.shared.errors.validation import raise_validation_error
from auth_service.shared.logging import logger

DTO = TypeVar("DTO", bound=BaseModel)


def _parse(dto_type: type[DTO]) -> DTO:
    try:
        return dto_type.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


def _reply(dto: BaseModel) -> tuple[Response, int]:
    return jsonify(dto.model_dump(mode="json")), 200


class AuthController:
    def __init__(self, *, service: AuthenticationService) -> None:
        self._service = service

    def sign_up(self) -> tuple[Response, int]:
        dto = _parse(SignUpRequestDTO)
        result = self._service.sign_up(dto.username, dto.password)
        logger.info(f"auth.http.sign_up: status={result.status_code.value}")
        return _reply(StatusResponseDTO(status_code=result.status_code))

    def sign_in(self) -> tuple[Response, int]:
        dto = _parse(SignInRequestDTO)
        result = self._service.sign_in(dto.username, dto.password)
        logger.info(f"auth.http.sign_in: status={result.status_code.value}")
        return _reply(
            SignInResponseDTO(
                status_code=result.status_code,
                session_token=result.session_token,
                user_id=result.user_id,
            )
        )

    def sign_out(self) -> tuple[Response, int]:
        dto = _parse(SessionRequestDTO)
        result = self._service.sign_out(dto.session_token)
        logger.info(f"auth.http.sign_out: status={result.status_code.value}")
        return _reply(StatusResponseDTO(status_code=result.status_code))

    def validate(self) -> tuple[Response, int]:
        dto = _parse(SessionRequestDTO)
        result = self._service.validate_session(dto.session_token)
        return _reply(
            ValidateSessionResponseDTO(status_code=result.status_code, user_id=result.user_id)
        )

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/sign-up", view_func=self.sign_up, methods=["POST"])
        bp.add_url_rule("/sign-in", view_func=self.sign_in, methods=["POST"])
        bp.add_url_rule("/sign-out", view_func=self.sign_out, methods=["POST"])
        bp.add_url_rule("/validate", view_func=self.validate, methods=["POST"])
        return bp
