"""Mock push provider for testing."""

from __future__ import annotations

from uuid import uuid4

from rendezvous.models.delivery import ProviderResult
from rendezvous.models.push import WakeNotification
from rendezvous.providers.push.base import PushProvider


class MockPushProvider(PushProvider):
    """Records sent notifications for verification in tests.

    Set ``error`` to make every send report failure, or ``raises`` to make
    every send raise it.
    """

    def __init__(self, error: str | None = None, raises: Exception | None = None) -> None:
        self.sent: list[dict[str, str | WakeNotification]] = []
        self.error = error
        self.raises = raises

    async def send(self, notification: WakeNotification, token: str) -> ProviderResult:
        self.sent.append({"notification": notification, "token": token})
        if self.raises is not None:
            raise self.raises
        if self.error is not None:
            return ProviderResult(success=False, error=self.error)
        return ProviderResult(success=True, provider_message_id=uuid4().hex)
