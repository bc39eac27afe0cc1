"""Abstract base class for TURN credential issuers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rendezvous.models.delivery import IceIssueResult


class TurnIssuer(ABC):
    """Issues short-lived TURN server credentials."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    async def issue(self) -> IceIssueResult:
        """Request a fresh credential set.

        Returns:
            The issued servers on success. Failures (rejected request,
            timeout, malformed response) are reported with
            ``success=False`` and an error code.
        """
        ...

    async def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""
