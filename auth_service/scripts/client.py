# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Command-line client for the authentication service."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any

import httpx

from auth_service.shared.config import load_config


class AuthClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> AuthClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def sign_up(self, username: str, password: str) -> dict[str, Any]:
        return self._post("/api/auth/sign-up", {"username": username, "password": password})

    def sign_in(self, username: str, password: str) -> dict[str, Any]:
        return self._post("/api/auth/sign-in", {"username": username, "password": password})

    def sign_out(self, session_token: str) -> dict[str, Any]:
        return self._post("/api/auth/sign-out", {"session_token": session_token})

    def _post(self, path: str, payload: dict[str, str]) -> dict[str, Any]:
        response = self._http.post(path, json=payload)
        response.raise_for_status()
        return response.json()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auth-client", description="Talk to the authentication service"
    )
    parser.add_argument("--url", help="Service base URL (defaults to AUTH_SERVICE_URL)")
    commands = parser.add_subparsers(dest="command")

    for name in ("sign-up", "sign-in"):
        sub = commands.add_parser(name)
        sub.add_argument("-u", "--username", required=True)
        sub.add_argument("-p", "--password", required=True)

    sign_out = commands.add_parser("sign-out")
    sign_out.add_argument("-s", "--session-token", required=True)
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    if args.command is None:
        print("No command provided")
        return 0

    config = load_config()
    base_url = args.url or config.client.service_url

    try:
        with AuthClient(base_url, timeout=config.client.timeout, transport=transport) as client:
            if args.command == "sign-up":
                result = client.sign_up(args.username, args.password)
            elif args.command == "sign-in":
                result = client.sign_in(args.username, args.password)
            else:
                result = client.sign_out(args.session_token)
    except httpx.HTTPError as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
