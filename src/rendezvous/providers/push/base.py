"""Abstract base class for push notification providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rendezvous.models.delivery import ProviderResult
from rendezvous.models.push import WakeNotification


class PushProvider(ABC):
    """Out-of-band wake-up delivery to a device token."""

    @property
    def name(self) -> str:
        """Provider name (e.g. 'FCMPushProvider')."""
        return self.__class__.__name__

    @abstractmethod
    async def send(self, notification: WakeNotification, token: str) -> ProviderResult:
        """Send a silent, high-priority wake notification.

        Args:
            notification: The incoming-call notification to deliver.
            token: Device registration token of the recipient.

        Returns:
            Result with provider-specific delivery metadata. Delivery
            failures are reported here rather than raised.
        """
        ...

    async def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""
