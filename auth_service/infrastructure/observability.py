# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

from auth_service.shared.config import load_config

OPERATION_LATENCY = Histogram(
    "auth_service_operation_latency_seconds",
    "Latency of authentication operations, lock wait included",
    labelnames=("operation",),
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
OPERATION_COUNTER = Counter(
    "auth_service_operations_total",
    "Number of processed authentication operations",
    labelnames=("operation", "status"),
)


@contextmanager
def track_operation(
    operation: str,
    status_getter: Callable[[], str],
    *,
    enabled: bool | None = None,
) -> Iterator[None]:
    if enabled is None:
        enabled = load_config().observability.metrics_enabled
    if not enabled:
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        OPERATION_LATENCY.labels(operation=operation).observe(duration)
        OPERATION_COUNTER.labels(operation=operation, status=status_getter()).inc()


__all__ = [
    "OPERATION_COUNTER",
    "OPERATION_LATENCY",
    "track_operation",
]
