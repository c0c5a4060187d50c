# -*- coding: utf-8 -*-
"""Location: ./tests/unit/testbackend/routers/test_utility_router.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Tests for the /util endpoints.
"""

# Standard
import asyncio
import os
import socket
from types import SimpleNamespace

# Third-Party
from fastapi.testclient import TestClient
import pytest

# First-Party
from testbackend.main import create_app
from testbackend.routers.utility import status_allows_body, watch_disconnect
from testbackend.services import system_info_service as sis

# ---------- liveness / info ----------


def test_ping(client):
    body = client.get("/util/ping").json()
    assert body["message"] == "pong"
    assert "timeUtc" in body


def test_health(client):
    body = client.get("/util/health").json()
    assert body["status"] == "Healthy"
    assert "timeUtc" in body


def test_ready(client):
    assert client.get("/util/ready").json() == {"status": "Ready"}


def test_version_shape(client):
    body = client.get("/util/version").json()
    assert isinstance(body["version"], str) and body["version"]
    assert "informational" in body


def test_env_contains_process_variables(client, monkeypatch):
    monkeypatch.setenv("TESTBACKEND_ENV_PROBE", "42")
    body = client.get("/util/env").json()
    assert body["TESTBACKEND_ENV_PROBE"] == "42"


def test_whoami(client, monkeypatch):
    monkeypatch.setattr(sis.socket, "gethostname", lambda: "unit-host")
    monkeypatch.setattr(sis.socket, "getaddrinfo", lambda host, port: [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.1.2.3", 0))])
    assert client.get("/util/whoami").json() == {"host": "unit-host", "addresses": ["10.1.2.3"], "processId": os.getpid()}


def test_whoami_resolution_failure_is_500(app, monkeypatch):
    def fail(host, port):
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr(sis.socket, "getaddrinfo", fail)
    with TestClient(app, raise_server_exceptions=False) as client:
        assert client.get("/util/whoami").status_code == 500


# ---------- echo ----------


@pytest.mark.parametrize("payload", [{"a": 1, "nested": {"b": [1, 2]}}, [1, "two"], "text", 3.5, False])
def test_echo_returns_body(client, payload):
    response = client.post("/util/echo", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["body"] == payload
    assert "receivedAtUtc" in body


def test_echo_rejects_invalid_json(client):
    response = client.post("/util/echo", content=b"{not json", headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be valid JSON"}


def test_echo_rejects_empty_body(client):
    assert client.post("/util/echo", content=b"").status_code == 400


# ---------- delay ----------


def test_delay_zero(client):
    body = client.get("/util/delay/0").json()
    assert body["requestedMs"] == 0
    assert body["elapsedMs"] >= 0


def test_delay_short(client):
    body = client.get("/util/delay/25").json()
    assert set(body) == {"requestedMs", "elapsedMs"}
    assert body["elapsedMs"] >= 25


def test_delay_negative_is_400(client):
    response = client.get("/util/delay/-5")
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_watch_disconnect_sets_event():
    async def disconnected():
        return True

    request = SimpleNamespace(is_disconnected=disconnected, url=SimpleNamespace(path="/util/delay/1000"))
    event = asyncio.Event()
    await asyncio.wait_for(watch_disconnect(request, event), timeout=1)
    assert event.is_set()


@pytest.mark.asyncio
async def test_watch_disconnect_stops_when_event_already_set():
    async def connected():
        return False

    request = SimpleNamespace(is_disconnected=connected, url=SimpleNamespace(path="/"))
    event = asyncio.Event()
    event.set()
    await asyncio.wait_for(watch_disconnect(request, event), timeout=1)


# ---------- error ----------


@pytest.mark.parametrize(("code", "expected"), [(503, 503), (404, 404), (700, 599), (599, 599), (200, 200), (2147483647, 599)])
def test_error_status_and_body(client, code, expected):
    response = client.get(f"/util/error/{code}")
    assert response.status_code == expected
    assert response.json() == {"error": f"Generated error {expected}"}


@pytest.mark.parametrize("code", [-2147483648, -1, 0, 99])
def test_error_below_range_clamps_to_100_without_body(client, code):
    response = client.get(f"/util/error/{code}")
    assert response.status_code == 100
    assert response.content == b""


def test_error_204_has_no_body(client):
    response = client.get("/util/error/204")
    assert response.status_code == 204
    assert response.content == b""


@pytest.mark.parametrize(("code", "allowed"), [(100, False), (199, False), (204, False), (304, False), (200, True), (599, True)])
def test_status_allows_body(code, allowed):
    assert status_allows_body(code) is allowed


# ---------- headers ----------


def test_headers_reflects_request_headers(client):
    body = client.get("/util/headers", headers={"X-Custom": "Value"}).json()
    assert body["x-custom"] == "Value"


def test_headers_joins_repeated_values(client):
    body = client.get("/util/headers", headers=[("X-Multi", "a"), ("X-Multi", "b")]).json()
    assert body["x-multi"] == "a, b"


# ---------- files ----------


def test_files_lists_root(client, data_root):
    body = client.get("/util/files").json()
    assert body["root"] == str(data_root)
    assert [e["name"] for e in body["entries"]] == ["docs", "hello.txt"]
    assert body["entries"][0]["size"] is None


def test_files_reads_file(client):
    body = client.get("/util/files", params={"path": "hello.txt"}).json()
    assert body["content"] == "hello world"
    assert body["size"] == 11


def test_files_truncates_large_file(client, data_root):
    (data_root / "big.txt").write_text("x" * 17_000, encoding="utf-8")
    body = client.get("/util/files", params={"path": "big.txt"}).json()
    assert body["content"] == "x" * 16_000 + "..."
    assert body["size"] == 17_000


@pytest.mark.parametrize("path", ["../", "../../etc/passwd", "/etc/passwd"])
def test_files_rejects_escaping_paths(client, path):
    response = client.get("/util/files", params={"path": path})
    assert response.status_code == 400
    assert response.json() == {"error": "Path is outside of allowed root"}


def test_files_rejects_symlink_escape(client, data_root, tmp_path):
    secret = tmp_path / "secret.txt"
    secret.write_text("outside-secret", encoding="utf-8")
    try:
        (data_root / "link.txt").symlink_to(secret)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")
    response = client.get("/util/files", params={"path": "link.txt"})
    assert response.status_code == 400
    assert "outside-secret" not in response.text


def test_files_rejects_nul(client):
    response = client.get("/util/files", params={"path": "a\x00b"})
    assert response.status_code == 400
    assert response.json() == {"error": "Path contains invalid characters"}


def test_files_missing_path_is_404(client, data_root):
    response = client.get("/util/files", params={"path": "nope.txt"})
    assert response.status_code == 404
    assert response.json() == {"error": "Path not found", "root": str(data_root), "target": str(data_root / "nope.txt")}


# ---------- allocations ----------


def test_allocate_and_clear(client):
    first = client.post("/util/allocate/1").json()
    second = client.post("/util/allocate/2").json()
    assert first == {"allocatedMb": 1, "chunks": 1, "totalMb": 1}
    assert second == {"allocatedMb": 2, "chunks": 2, "totalMb": 3}

    assert client.post("/util/clearallocations").json() == {"cleared": True, "freedMb": 3}
    assert client.post("/util/clearallocations").json() == {"cleared": True, "freedMb": 0}


def test_allocate_clamps_to_minimum(client):
    assert client.post("/util/allocate/0").json()["allocatedMb"] == 1
    client.post("/util/clearallocations")


def test_allocate_requires_post(client):
    assert client.get("/util/allocate/1").status_code == 405


def test_allocations_are_per_app(test_settings):
    with TestClient(create_app(test_settings)) as a, TestClient(create_app(test_settings)) as b:
        a.post("/util/allocate/1")
        assert b.post("/util/clearallocations").json()["freedMb"] == 0
        assert a.post("/util/clearallocations").json()["freedMb"] == 1
