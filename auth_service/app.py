# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from auth_service.application.service import AuthenticationService
from auth_service.infrastructure.container import Container
from auth_service.shared.config import AppConfig, load_config
from auth_service.shared.logging import logger, setup_logging
from auth_service.shared.middleware import configure_error_handling, configure_request_logging


def create_app(
    config: AppConfig | None = None,
    *,
    service: AuthenticationService | None = None,
) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, log_file=config.log_file)

    container = Container(config)
    if service is not None:
        container.authentication_service = service

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")
        return resp

    app.extensions["auth_service"] = container.authentication_service

    logger.info(
        f"Auth service initialized env={config.app_env} storage={config.storage_backend.value}"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host=config.server.host, port=config.server.port, threaded=True)


if __name__ == "__main__":
    main()
