"""Firebase Cloud Messaging push provider."""

from rendezvous.providers.fcm.config import FCMConfig
from rendezvous.providers.fcm.credentials import create_push_provider, find_service_account
from rendezvous.providers.fcm.push import FCMPushProvider

__all__ = ["FCMConfig", "FCMPushProvider", "create_push_provider", "find_service_account"]
