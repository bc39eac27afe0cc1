"""Tests for the Socket.IO gateway."""

from __future__ import annotations

from typing import Any

import pytest
import socketio

from rendezvous.core.server import SignalingServer
from rendezvous.gateway.mock import MockTransport
from rendezvous.gateway.socketio import (
    SocketIOGateway,
    SocketIOTransport,
    create_sio,
    extract_token,
)
from rendezvous.providers.push.mock import MockPushProvider
from tests.conftest import make_offer

API_KEY = "shared-secret"


class _RecordingSio:
    def __init__(self) -> None:
        self.emitted: list[dict[str, Any]] = []

    async def emit(self, event: str, data: Any = None, to: str | None = None) -> None:
        self.emitted.append({"event": event, "data": data, "to": to})


@pytest.fixture
def gateway(server: SignalingServer) -> SocketIOGateway:
    return SocketIOGateway(create_sio(), server, API_KEY)


class TestExtractToken:
    def test_from_auth(self) -> None:
        assert extract_token({}, {"token": "abc"}) == "abc"

    def test_from_asgi_query_string(self) -> None:
        environ = {"asgi.scope": {"query_string": b"EIO=4&token=abc"}}
        assert extract_token(environ, None) == "abc"

    def test_from_wsgi_query_string(self) -> None:
        assert extract_token({"QUERY_STRING": "token=abc"}, None) == "abc"

    def test_auth_wins_over_query(self) -> None:
        environ = {"QUERY_STRING": "token=query"}
        assert extract_token(environ, {"token": "auth"}) == "auth"

    def test_missing(self) -> None:
        assert extract_token({}, None) is None
        assert extract_token({}, {"token": ""}) is None
        assert extract_token({}, "token") is None


class TestConnect:
    async def test_valid_token_admitted(self, gateway: SocketIOGateway) -> None:
        await gateway._on_connect("sid-1", {}, {"token": API_KEY})

    async def test_wrong_token_refused(self, gateway: SocketIOGateway) -> None:
        with pytest.raises(socketio.exceptions.ConnectionRefusedError):
            await gateway._on_connect("sid-1", {}, {"token": "guess"})

    async def test_missing_token_refused(self, gateway: SocketIOGateway) -> None:
        with pytest.raises(socketio.exceptions.ConnectionRefusedError):
            await gateway._on_connect("sid-1", {}, None)

    def test_is_authorized(self, gateway: SocketIOGateway) -> None:
        assert gateway.is_authorized(API_KEY) is True
        assert gateway.is_authorized(API_KEY + "x") is False
        assert gateway.is_authorized(None) is False


class TestHandlers:
    def test_all_events_registered(self, server: SignalingServer) -> None:
        sio = create_sio()
        SocketIOGateway(sio, server, API_KEY)
        handlers = sio.handlers["/"]
        for event in (
            "connect",
            "disconnect",
            "login",
            "store-fcm-token",
            "get-ice-servers",
            "offer",
            "answer",
            "ice-candidate",
            "end-call",
        ):
            assert event in handlers

    async def test_full_call_flow(
        self,
        server: SignalingServer,
        transport: MockTransport,
        push: MockPushProvider,
    ) -> None:
        sio = create_sio()
        SocketIOGateway(sio, server, API_KEY)
        handlers = sio.handlers["/"]

        await handlers["login"]("sid-a", "alice")
        await handlers["login"]("sid-b", "bob")
        await handlers["store-fcm-token"]("sid-b", "tok-b")
        await handlers["offer"]("sid-a", make_offer())
        await handlers["answer"]("sid-b", {"target": "alice", "sdp": "v=0"})
        await handlers["end-call"]("sid-a", {"target": "bob"})
        await handlers["disconnect"]("sid-b", "client disconnect")

        events = [(item["to"], item["event"]) for item in transport.sent]
        assert events == [("sid-b", "offer"), ("sid-a", "answer"), ("sid-b", "end-call")]
        assert len(push.sent) == 1
        assert transport.broadcasts[-1]["data"] == [
            {"username": "alice", "online": True},
            {"username": "bob", "online": False},
        ]

    async def test_get_ice_servers_ack(self, gateway: SocketIOGateway) -> None:
        servers = await gateway._on_get_ice_servers("sid-1")
        assert servers == [{"urls": "stun:stun.l.google.com:19302"}]

    async def test_login_without_payload(
        self, gateway: SocketIOGateway, transport: MockTransport
    ) -> None:
        await gateway._on_login("sid-1")
        assert transport.broadcasts == []


class TestSocketIOTransport:
    async def test_send_targets_sid(self) -> None:
        sio = _RecordingSio()
        transport = SocketIOTransport(sio)  # type: ignore[arg-type]

        await transport.send("sid-1", "offer", {"sender": "alice"})

        assert sio.emitted == [{"event": "offer", "data": {"sender": "alice"}, "to": "sid-1"}]

    async def test_broadcast_has_no_target(self) -> None:
        sio = _RecordingSio()
        transport = SocketIOTransport(sio)  # type: ignore[arg-type]

        await transport.broadcast("update-user-list", [])

        assert sio.emitted == [{"event": "update-user-list", "data": [], "to": None}]
