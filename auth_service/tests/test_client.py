from __future__ import annotations

import json

import httpx
import pytest

from auth_service.scripts.client import AuthClient, build_parser, main


def _handler(request: httpx.Request) -> httpx.Response:
    body = json.loads(request.content)
    if request.url.path == "/api/auth/sign-in":
        assert body == {"username": "alice", "password": "secret"}
        return httpx.Response(
            200, json={"status_code": "SUCCESS", "session_token": "tok", "user_id": "u1"}
        )
    if request.url.path == "/api/auth/sign-out":
        assert body == {"session_token": "tok"}
        return httpx.Response(200, json={"status_code": "SUCCESS"})
    return httpx.Response(200, json={"status_code": "FAILURE"})


def test_client_posts_to_service() -> None:
    transport = httpx.MockTransport(_handler)

    with AuthClient("http://auth.test", transport=transport) as client:
        signed_in = client.sign_in("alice", "secret")
        signed_out = client.sign_out(signed_in["session_token"])

    assert signed_in["user_id"] == "u1"
    assert signed_out == {"status_code": "SUCCESS"}


def test_main_prints_response(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        ["--url", "http://auth.test", "sign-in", "-u", "alice", "-p", "secret"],
        transport=httpx.MockTransport(_handler),
    )

    assert code == 0
    assert json.loads(capsys.readouterr().out)["session_token"] == "tok"


def test_main_without_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "No command provided" in capsys.readouterr().out


def test_main_reports_http_errors(capsys: pytest.CaptureFixture[str]) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500))

    code = main(["--url", "http://auth.test", "sign-out", "-s", "tok"], transport=transport)

    assert code == 1
    assert "Request failed" in capsys.readouterr().err


def test_sign_up_requires_credentials() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["sign-up", "-u", "alice"])
