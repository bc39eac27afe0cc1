"""Abstract base class for the outbound side of the connection gateway."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SignalTransport(ABC):
    """Delivers named events to one live connection or to all of them."""

    @abstractmethod
    async def send(self, connection_id: str, event: str, data: Any) -> None:
        """Emit ``event`` with ``data`` to a single connection."""
        ...

    @abstractmethod
    async def broadcast(self, event: str, data: Any) -> None:
        """Emit ``event`` with ``data`` to every connected client."""
        ...
