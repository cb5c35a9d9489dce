from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from prometheus_client import REGISTRY

from auth_service.application.authenticator import Authenticator
from auth_service.application.service import (
    AuthenticationService,
    SignInResponse,
    StatusCode,
)
from auth_service.infrastructure.repositories.memory import InMemorySessionStore


def _operations_total(operation: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "auth_service_operations_total", {"operation": operation, "status": status}
    )
    return value or 0.0


def test_sign_up_succeeds(service: AuthenticationService) -> None:
    response = service.sign_up("username", "password")

    assert response.status_code is StatusCode.SUCCESS


def test_sign_up_fails_if_username_exists(service: AuthenticationService) -> None:
    service.sign_up("username", "password")

    response = service.sign_up("username", "password")

    assert response.status_code is StatusCode.FAILURE


def test_sign_in_succeeds(service: AuthenticationService) -> None:
    service.sign_up("username", "password")

    response = service.sign_in("username", "password")

    assert response.status_code is StatusCode.SUCCESS
    assert response.session_token
    assert response.user_id


def test_sign_in_failure_has_empty_payload(service: AuthenticationService) -> None:
    service.sign_up("alice", "secret")

    wrong_password = service.sign_in("alice", "wrong")
    unknown_user = service.sign_in("bob", "secret")

    assert wrong_password == SignInResponse(status_code=StatusCode.FAILURE)
    assert unknown_user == wrong_password


def test_sign_out_succeeds_once(service: AuthenticationService) -> None:
    service.sign_up("username", "password")
    token = service.sign_in("username", "password").session_token

    assert service.sign_out(token).status_code is StatusCode.SUCCESS
    assert service.sign_out(token).status_code is StatusCode.FAILURE


def test_sign_out_fails_if_session_does_not_exist(service: AuthenticationService) -> None:
    response = service.sign_out("session_token")

    assert response.status_code is StatusCode.FAILURE


def test_validate_session(service: AuthenticationService) -> None:
    service.sign_up("alice", "secret")
    signed_in = service.sign_in("alice", "secret")

    valid = service.validate_session(signed_in.session_token)
    invalid = service.validate_session("nope")

    assert valid.status_code is StatusCode.SUCCESS
    assert valid.user_id == signed_in.user_id
    assert invalid.status_code is StatusCode.FAILURE
    assert invalid.user_id == ""


def test_delete_user(service: AuthenticationService) -> None:
    service.sign_up("alice", "secret")

    assert service.delete_user("alice").status_code is StatusCode.SUCCESS
    assert service.delete_user("alice").status_code is StatusCode.FAILURE
    assert service.sign_in("alice", "secret").status_code is StatusCode.FAILURE


def test_unexpected_error_collapses_to_failure_and_releases_lock(
    authenticator: Authenticator,
) -> None:
    service = AuthenticationService(authenticator, metrics_enabled=False)

    def boom(username: str, password: str) -> None:
        raise RuntimeError("store unavailable")

    authenticator.sign_up = boom  # type: ignore[method-assign]

    assert service.sign_up("alice", "secret").status_code is StatusCode.FAILURE
    assert service.sign_in("alice", "secret").status_code is StatusCode.FAILURE
    assert service._lock.acquire(blocking=False)
    service._lock.release()


def test_exhausted_session_store_collapses_to_failure(
    credential_store,
) -> None:
    authenticator = Authenticator(
        credentials=credential_store, sessions=InMemorySessionStore(capacity=1)
    )
    service = AuthenticationService(authenticator, metrics_enabled=False)
    service.sign_up("alice", "secret")

    assert service.sign_in("alice", "secret").status_code is StatusCode.SUCCESS
    assert service.sign_in("alice", "secret").status_code is StatusCode.FAILURE


def test_concurrent_sign_ups_for_same_username(service: AuthenticationService) -> None:
    workers = 16
    barrier = threading.Barrier(workers)

    def attempt(index: int) -> StatusCode:
        barrier.wait()
        return service.sign_up("alice", f"password-{index}").status_code

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(attempt, range(workers)))

    assert results.count(StatusCode.SUCCESS) == 1
    assert results.count(StatusCode.FAILURE) == workers - 1


def test_concurrent_sign_ins_get_distinct_tokens(service: AuthenticationService) -> None:
    service.sign_up("alice", "secret")

    with ThreadPoolExecutor(max_workers=8) as pool:
        responses = list(pool.map(lambda _: service.sign_in("alice", "secret"), range(32)))

    tokens = {r.session_token for r in responses}
    assert all(r.status_code is StatusCode.SUCCESS for r in responses)
    assert len(tokens) == 32


def test_operations_are_counted(authenticator: Authenticator) -> None:
    service = AuthenticationService(authenticator, metrics_enabled=True)
    ok_before = _operations_total("sign_up", "SUCCESS")
    failed_before = _operations_total("sign_up", "FAILURE")

    service.sign_up("metrics-user", "secret")
    service.sign_up("metrics-user", "secret")

    assert _operations_total("sign_up", "SUCCESS") == ok_before + 1
    assert _operations_total("sign_up", "FAILURE") == failed_before + 1
