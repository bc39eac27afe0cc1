"""Tests for the Cloudflare TURN issuer."""

from __future__ import annotations

import json
from typing import Any

import httpx

from rendezvous.models.ice import IceServer
from rendezvous.providers.cloudflare import CloudflareTurnConfig, CloudflareTurnIssuer


def _config(**overrides: Any) -> CloudflareTurnConfig:
    defaults: dict[str, Any] = {
        "key_id": "key-123",
        "api_token": "cf-secret-token",
    }
    defaults.update(overrides)
    return CloudflareTurnConfig(**defaults)


_ICE_SERVERS = {
    "urls": [
        "turn:turn.cloudflare.com:3478?transport=udp",
        "turns:turn.cloudflare.com:5349?transport=tcp",
    ],
    "username": "generated-user",
    "credential": "generated-credential",
}


class _JSONTransport(httpx.AsyncBaseTransport):
    """Returns a fixed JSON body and records requests."""

    def __init__(self, body: Any, status_code: int = 201) -> None:
        self._body = body
        self._status_code = status_code
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, json=self._body, request=request)


class _TextTransport(httpx.AsyncBaseTransport):
    def __init__(self, text: str, status_code: int = 200) -> None:
        self._text = text
        self._status_code = status_code

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(self._status_code, text=self._text, request=request)


class _TimeoutTransport(httpx.AsyncBaseTransport):
    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out")


class _ConnectErrorTransport(httpx.AsyncBaseTransport):
    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")


def _issuer(transport: httpx.AsyncBaseTransport, **overrides: Any) -> CloudflareTurnIssuer:
    issuer = CloudflareTurnIssuer(_config(**overrides))
    issuer._client = httpx.AsyncClient(transport=transport)
    return issuer


class TestCloudflareTurnConfig:
    def test_defaults(self) -> None:
        cfg = _config()
        assert cfg.ttl == 86400
        assert cfg.timeout == 10.0
        assert cfg.api_url == (
            "https://rtc.live.cloudflare.com/v1/turn/keys/key-123/credentials/generate"
        )

    def test_token_is_secret(self) -> None:
        assert "cf-secret-token" not in repr(_config())


class TestCloudflareTurnIssuer:
    async def test_issue_success(self) -> None:
        transport = _JSONTransport({"iceServers": _ICE_SERVERS})
        issuer = _issuer(transport)

        result = await issuer.issue()

        assert result.success is True
        assert result.ice_servers == [IceServer(**_ICE_SERVERS)]

    async def test_request_shape(self) -> None:
        transport = _JSONTransport({"iceServers": _ICE_SERVERS})
        issuer = _issuer(transport, ttl=3600)

        await issuer.issue()

        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == _config().api_url
        assert request.headers["authorization"] == "Bearer cf-secret-token"
        assert json.loads(request.content.decode()) == {"ttl": 3600}

    async def test_issue_accepts_list(self) -> None:
        second = {"urls": "stun:stun.cloudflare.com:3478"}
        issuer = _issuer(_JSONTransport({"iceServers": [_ICE_SERVERS, second]}))

        result = await issuer.issue()

        assert result.success is True
        assert len(result.ice_servers) == 2
        assert result.ice_servers[1].to_dict() == second

    async def test_http_error(self) -> None:
        issuer = _issuer(_JSONTransport({"errors": ["bad key"]}, status_code=401))

        result = await issuer.issue()

        assert result.success is False
        assert result.error == "http_401"

    async def test_timeout(self) -> None:
        result = await _issuer(_TimeoutTransport()).issue()
        assert result.success is False
        assert result.error == "timeout"

    async def test_transport_error(self) -> None:
        result = await _issuer(_ConnectErrorTransport()).issue()
        assert result.success is False
        assert result.error == "connection refused"

    async def test_missing_ice_servers(self) -> None:
        result = await _issuer(_JSONTransport({"result": "ok"})).issue()
        assert result.success is False
        assert result.error == "missing_ice_servers"

    async def test_invalid_json(self) -> None:
        result = await _issuer(_TextTransport("<html>oops</html>")).issue()
        assert result.success is False
        assert result.error == "invalid_json"

    async def test_invalid_entries(self) -> None:
        result = await _issuer(_JSONTransport({"iceServers": {"username": "x"}})).issue()
        assert result.success is False
        assert result.error == "invalid_ice_servers"

    async def test_close(self) -> None:
        issuer = _issuer(_JSONTransport({}))
        await issuer.close()
        assert issuer._client.is_closed
