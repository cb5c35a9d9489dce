# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from auth_service.shared.config import StorageBackend


class MiscController:
    def __init__(self, *, storage_backend: StorageBackend) -> None:
        self._storage_backend = storage_backend

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        return jsonify({"ok": True, "storage": self._storage_backend.value})
