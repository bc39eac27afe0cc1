"""Push notification providers."""

from rendezvous.providers.push.base import PushProvider
from rendezvous.providers.push.mock import MockPushProvider

__all__ = ["MockPushProvider", "PushProvider"]
