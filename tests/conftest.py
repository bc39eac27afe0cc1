"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Any

import pytest

from rendezvous.core.credentials import IceServerProvisioner
from rendezvous.core.server import SignalingServer
from rendezvous.gateway.mock import MockTransport
from rendezvous.presence.memory import InMemoryPresenceRegistry
from rendezvous.providers.push.mock import MockPushProvider


@pytest.fixture
def registry() -> InMemoryPresenceRegistry:
    return InMemoryPresenceRegistry()


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def push() -> MockPushProvider:
    return MockPushProvider()


@pytest.fixture
def server(
    transport: MockTransport,
    registry: InMemoryPresenceRegistry,
    push: MockPushProvider,
) -> SignalingServer:
    return SignalingServer(
        transport,
        registry=registry,
        push=push,
        ice=IceServerProvisioner(),
    )


def make_offer(target: str = "bob", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "target": target,
        "type": "offer",
        "sdp": "v=0\r\no=- 46117317 2 IN IP4 127.0.0.1\r\n",
    }
    payload.update(overrides)
    return payload
