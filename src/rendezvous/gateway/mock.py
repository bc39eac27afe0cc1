"""Mock transport for testing."""

from __future__ import annotations

from typing import Any

from rendezvous.gateway.base import SignalTransport


class MockTransport(SignalTransport):
    """Records unicast and broadcast emissions.

    Connection ids listed in ``failing`` raise ``ConnectionError`` on send.
    """

    def __init__(self, failing: set[str] | None = None) -> None:
        self.sent: list[dict[str, Any]] = []
        self.broadcasts: list[dict[str, Any]] = []
        self.failing = failing or set()

    async def send(self, connection_id: str, event: str, data: Any) -> None:
        if connection_id in self.failing:
            raise ConnectionError(f"connection {connection_id} is gone")
        self.sent.append({"to": connection_id, "event": event, "data": data})

    async def broadcast(self, event: str, data: Any) -> None:
        self.broadcasts.append({"event": event, "data": data})

    def sent_to(self, connection_id: str) -> list[dict[str, Any]]:
        return [item for item in self.sent if item["to"] == connection_id]
