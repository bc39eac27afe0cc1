"""Session relay: live delivery, wake-up push, or drop."""

from __future__ import annotations

import logging
from typing import Any

from rendezvous.gateway.base import SignalTransport
from rendezvous.models.delivery import ProviderResult, RelayOutcome
from rendezvous.models.enums import DropReason, SignalKind
from rendezvous.models.presence import IdentityRecord
from rendezvous.models.push import WakeNotification
from rendezvous.models.signal import SignalMessage
from rendezvous.presence.base import PresenceRegistry
from rendezvous.providers.push.base import PushProvider

logger = logging.getLogger("rendezvous.relay")


class SessionRelay:
    """Routes negotiation messages between two identities.

    Offers take both paths: live delivery when the callee is online, and a
    wake notification whenever the callee has a push token, because an open
    socket does not bring a backgrounded app's call UI up. Every other kind
    is delivered live or dropped.

    Args:
        registry: Presence registry consulted for the target's state.
        transport: Outbound side of the connection gateway.
        push: Push provider, or ``None`` to disable wake notifications.
        app_name: Application name shown by the callee's call UI.
        avatar_url: Caller avatar reference included in the notification.
    """

    def __init__(
        self,
        registry: PresenceRegistry,
        transport: SignalTransport,
        push: PushProvider | None = None,
        *,
        app_name: str = "AnyTalk",
        avatar_url: str = "https://i.pravatar.cc/100",
    ) -> None:
        self._registry = registry
        self._transport = transport
        self._push = push
        self._app_name = app_name
        self._avatar_url = avatar_url

    @property
    def push_enabled(self) -> bool:
        return self._push is not None

    async def relay(
        self, kind: SignalKind | str, payload: dict[str, Any], sender: str | None
    ) -> RelayOutcome:
        """Relay one negotiation message from ``sender``.

        ``sender`` is the identity bound to the calling connection; a
        ``sender`` field inside ``payload`` is ignored.

        Raises:
            ValueError: If ``kind`` is not a negotiation kind or the payload
                has no target.
        """
        message = SignalMessage.from_payload(kind, payload, sender)
        outcome = RelayOutcome(kind=message.kind, target=message.target)

        record = await self._registry.lookup(message.target)
        if record is None:
            logger.info("Target user %s not found, dropping %s", message.target, message.kind)
            outcome.dropped = DropReason.UNKNOWN_TARGET
            return outcome

        if record.online:
            outcome.delivered_live = await self._deliver_live(record, message)

        if message.kind.wakes_recipient:
            await self._wake(record, message, outcome)

        if not outcome.delivered_live and not outcome.push_attempted:
            outcome.dropped = (
                DropReason.DELIVERY_FAILED if record.online else DropReason.TARGET_OFFLINE
            )
            logger.debug("%s for %s dropped (%s)", message.kind, message.target, outcome.dropped)
        return outcome

    async def _deliver_live(self, record: IdentityRecord, message: SignalMessage) -> bool:
        assert record.connection_id is not None
        try:
            await self._transport.send(
                record.connection_id, str(message.kind), message.outbound_payload()
            )
        except Exception:
            logger.exception(
                "Live delivery of %s to %s (%s) failed",
                message.kind,
                record.username,
                record.connection_id,
            )
            return False
        return True

    async def _wake(
        self, record: IdentityRecord, message: SignalMessage, outcome: RelayOutcome
    ) -> None:
        if self._push is None or not record.push_token:
            return

        notification = WakeNotification.for_offer(
            target=message.target,
            sender=message.sender,
            offer=message.fields,
            app_name=self._app_name,
            avatar_url=self._avatar_url,
        )
        outcome.push_attempted = True
        outcome.call_id = notification.call_id
        logger.info("Sending push notification to %s", message.target)

        try:
            result = await self._push.send(notification, record.push_token)
        except Exception:
            logger.exception("Error sending push to %s", message.target)
            outcome.push_result = ProviderResult(success=False, error="exception")
            return

        outcome.push_result = result
        if result.success:
            logger.info("Push sent successfully (call %s)", notification.call_id)
        else:
            logger.warning("Push to %s failed: %s", message.target, result.error)
