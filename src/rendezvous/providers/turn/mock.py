"""Mock TURN issuer for testing."""

from __future__ import annotations

from rendezvous.models.delivery import IceIssueResult
from rendezvous.models.ice import IceServer
from rendezvous.providers.turn.base import TurnIssuer


class MockTurnIssuer(TurnIssuer):
    """Returns a fixed server list, a fixed error, or raises."""

    def __init__(
        self,
        servers: list[IceServer] | None = None,
        *,
        error: str | None = None,
        raises: Exception | None = None,
    ) -> None:
        self.servers = servers if servers is not None else [
            IceServer(
                urls=["turn:turn.example.com:3478?transport=udp"],
                username="mock-user",
                credential="mock-credential",
            )
        ]
        self.error = error
        self.raises = raises
        self.calls = 0

    async def issue(self) -> IceIssueResult:
        self.calls += 1
        if self.raises is not None:
            raise self.raises
        if self.error is not None:
            return IceIssueResult(success=False, error=self.error)
        return IceIssueResult(success=True, ice_servers=list(self.servers))
