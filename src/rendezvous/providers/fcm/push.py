"""FCM provider: sends data-only wake notifications via firebase-admin."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from rendezvous.models.delivery import ProviderResult
from rendezvous.models.push import WakeNotification
from rendezvous.providers.fcm.config import FCMConfig
from rendezvous.providers.push.base import PushProvider

logger = logging.getLogger("rendezvous.providers.fcm")


class FCMPushProvider(PushProvider):
    """Push provider using the Firebase Admin SDK.

    Notifications are silent: Android gets a high-priority data message
    that must not be stored for later delivery, iOS gets a background push
    with ``content-available``. The receiving app presents the call UI.

    Args:
        config: Service account location and APNs settings.
        app: An already initialized ``firebase_admin.App``. When omitted a
            named app is initialized from ``config.credentials_path`` and
            deleted again on :meth:`close`.
    """

    def __init__(self, config: FCMConfig, *, app: Any = None) -> None:
        try:
            import firebase_admin as _firebase_admin
            from firebase_admin import credentials as _credentials
            from firebase_admin import exceptions as _exceptions
            from firebase_admin import messaging as _messaging
        except ImportError as exc:
            raise ImportError(
                "firebase-admin is required for FCMPushProvider. "
                "Install it with: pip install firebase-admin"
            ) from exc
        self._config = config
        self._firebase_admin = _firebase_admin
        self._messaging = _messaging
        self._firebase_error = _exceptions.FirebaseError
        self._owns_app = app is None
        if app is None:
            certificate = _credentials.Certificate(str(config.credentials_path))
            app = _firebase_admin.initialize_app(certificate, name=config.app_name)
        self._app = app

    def build_message(self, notification: WakeNotification, token: str) -> Any:
        """Build the ``firebase_admin.messaging.Message`` for a notification."""
        messaging = self._messaging
        return messaging.Message(
            token=token,
            data=notification.to_data(),
            android=messaging.AndroidConfig(priority="high", ttl=self._config.android_ttl),
            apns=messaging.APNSConfig(
                headers={
                    "apns-push-type": "background",
                    "apns-priority": "5",
                    "apns-topic": self._config.apns_topic,
                },
                payload=messaging.APNSPayload(aps=messaging.Aps(content_available=True)),
            ),
        )

    async def send(self, notification: WakeNotification, token: str) -> ProviderResult:
        message = self.build_message(notification, token)
        try:
            # firebase-admin is blocking; keep it off the event loop
            message_id = await asyncio.to_thread(self._messaging.send, message, app=self._app)
        except self._firebase_error as exc:
            return ProviderResult(success=False, error=str(exc.code or exc))
        except ValueError as exc:
            return ProviderResult(success=False, error=str(exc))

        return ProviderResult(
            success=True,
            provider_message_id=message_id,
            metadata={"call_id": notification.call_id},
        )

    async def close(self) -> None:
        if self._owns_app:
            self._firebase_admin.delete_app(self._app)
            self._owns_app = False
