# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Health-check driver.

Repeatedly signs up a throw-away user, signs in and signs out again, and
logs the status code of every step. Transport errors are retried behind a
circuit breaker; a ``FAILURE`` status is reported as is.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from auth_service.infrastructure.resilience import CircuitBreaker, CircuitOpenError, resilient_call
from auth_service.shared.config import load_config
from auth_service.shared.config.settings import ResilienceConfig
from auth_service.shared.logging import logger, setup_logging

_RETRYABLE = (httpx.TransportError, TimeoutError)
_SUCCESS = "SUCCESS"


@dataclass(slots=True, frozen=True)
class CycleResult:
    sign_up: str
    sign_in: str
    sign_out: str

    @property
    def healthy(self) -> bool:
        return self.sign_up == self.sign_in == self.sign_out == _SUCCESS


class HealthCheckDriver:
    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        resilience: ResilienceConfig,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        self._client = client
        self._resilience = resilience
        self._breaker = breaker or CircuitBreaker.from_config(resilience)

    async def run_cycle(self) -> CycleResult:
        username = str(uuid.uuid4())
        password = str(uuid.uuid4())

        sign_up = await self._call(
            "/api/auth/sign-up", {"username": username, "password": password}
        )
        logger.info(f"health_check: SignUp status_code={sign_up.get('status_code')}")

        sign_in = await self._call(
            "/api/auth/sign-in", {"username": username, "password": password}
        )
        logger.info(f"health_check: SignIn status_code={sign_in.get('status_code')}")

        sign_out = await self._call(
            "/api/auth/sign-out", {"session_token": sign_in.get("session_token", "")}
        )
        logger.info(f"health_check: SignOut status_code={sign_out.get('status_code')}")

        return CycleResult(
            sign_up=str(sign_up.get("status_code")),
            sign_in=str(sign_in.get("status_code")),
            sign_out=str(sign_out.get("status_code")),
        )

    async def _call(self, path: str, payload: dict[str, str]) -> dict[str, Any]:
        return await resilient_call(
            self._post,
            path,
            payload,
            config=self._resilience,
            breaker=self._breaker,
            retry_on=_RETRYABLE,
        )

    async def _post(self, path: str, payload: dict[str, str]) -> dict[str, Any]:
        response = await self._client.post(path, json=payload)
        response.raise_for_status()
        return response.json()


async def run(
    *,
    base_url: str,
    interval: float,
    iterations: int | None = None,
    timeout: float = 10.0,
    resilience: ResilienceConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Run health-check cycles and return how many of them were unhealthy."""

    resilience = resilience or load_config().resilience
    unhealthy = 0
    completed = 0

    async with httpx.AsyncClient(
        base_url=base_url, timeout=timeout, transport=transport
    ) as client:
        driver = HealthCheckDriver(client, resilience=resilience)
        while iterations is None or completed < iterations:
            try:
                result = await driver.run_cycle()
            except (httpx.HTTPError, CircuitOpenError, TimeoutError) as exc:
                logger.error(f"health_check: cycle failed error={type(exc).__name__}: {exc}")
                unhealthy += 1
            else:
                if not result.healthy:
                    unhealthy += 1
            completed += 1

            if iterations is None or completed < iterations:
                await asyncio.sleep(interval)

    return unhealthy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auth-health-check", description="Continuously exercise the authentication service"
    )
    parser.add_argument("--url", help="Service base URL (defaults to AUTH_SERVICE_URL)")
    parser.add_argument("--interval", type=float, help="Seconds between cycles")
    parser.add_argument("--iterations", type=int, help="Stop after N cycles")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    setup_logging(config.log_level, log_file=config.log_file)

    interval = args.interval if args.interval is not None else config.client.health_check_interval
    try:
        unhealthy = asyncio.run(
            run(
                base_url=args.url or config.client.service_url,
                interval=interval,
                iterations=args.iterations,
                timeout=config.client.timeout,
                resilience=config.resilience,
            )
        )
    except KeyboardInterrupt:
        logger.info("health_check: interrupted")
        return 0
    return 1 if unhealthy else 0


if __name__ == "__main__":
    sys.exit(main())
