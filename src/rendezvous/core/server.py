"""Event dispatch between the connection gateway and the relay core."""

from __future__ import annotations

import logging
from typing import Any

from rendezvous.core.credentials import IceServerProvisioner
from rendezvous.core.relay import SessionRelay
from rendezvous.gateway.base import SignalTransport
from rendezvous.models.delivery import RelayOutcome
from rendezvous.models.enums import SignalKind
from rendezvous.presence.base import PresenceRegistry
from rendezvous.presence.memory import InMemoryPresenceRegistry
from rendezvous.providers.push.base import PushProvider

logger = logging.getLogger("rendezvous.server")

USER_LIST_EVENT = "update-user-list"


class SignalingServer:
    """Handles every inbound gateway event for every connection.

    The server remembers which username each connection logged in as. That
    binding, not anything inside a payload, is the sender of relayed
    messages. Connections that never logged in have no binding, so their
    token updates and disconnects do nothing.

    Example:
        transport = MockTransport()
        server = SignalingServer(transport)
        await server.handle_login("sid-1", "alice")
        await server.handle_signal("sid-1", "offer", {"target": "bob", "sdp": "..."})
    """

    def __init__(
        self,
        transport: SignalTransport,
        *,
        registry: PresenceRegistry | None = None,
        push: PushProvider | None = None,
        ice: IceServerProvisioner | None = None,
        app_name: str = "AnyTalk",
        avatar_url: str = "https://i.pravatar.cc/100",
    ) -> None:
        self.transport = transport
        self.registry: PresenceRegistry = (
            registry if registry is not None else InMemoryPresenceRegistry()
        )
        self.push = push
        self.ice = ice if ice is not None else IceServerProvisioner()
        self.relay = SessionRelay(
            self.registry,
            transport,
            push,
            app_name=app_name,
            avatar_url=avatar_url,
        )
        self._bindings: dict[str, str] = {}

    def username_for(self, connection_id: str) -> str | None:
        """Return the username a connection logged in as, if any."""
        return self._bindings.get(connection_id)

    # -- Identity lifecycle ---------------------------------------------------

    async def handle_connect(self, connection_id: str) -> None:
        logger.info("User connected: %s", connection_id)

    async def handle_login(self, connection_id: str, username: Any) -> bool:
        """Bind ``connection_id`` to ``username`` and broadcast presence."""
        if not isinstance(username, str) or not username:
            logger.warning("Ignoring login with invalid username from %s", connection_id)
            return False

        self._bindings[connection_id] = username
        await self.registry.register(username, connection_id)
        logger.info("User registered: %s (%s)", username, connection_id)
        await self.broadcast_user_list()
        return True

    async def handle_store_token(self, connection_id: str, token: Any) -> bool:
        """Store a push token for the identity bound to ``connection_id``."""
        username = self._bindings.get(connection_id)
        if username is None:
            logger.debug("Ignoring push token from unbound connection %s", connection_id)
            return False
        if not isinstance(token, str) or not token:
            logger.warning("Ignoring invalid push token from %s", username)
            return False

        stored = await self.registry.store_token(username, token)
        if stored:
            logger.info("Stored push token for %s", username)
        return stored

    async def handle_disconnect(self, connection_id: str) -> None:
        """Mark the bound identity offline and broadcast presence.

        Only the connection currently registered for the identity can take
        it offline; a late disconnect from an older connection is ignored.
        """
        logger.info("User disconnected: %s", connection_id)
        username = self._bindings.pop(connection_id, None)
        if username is None:
            return

        record = await self.registry.lookup(username)
        if record is None or record.connection_id != connection_id:
            # the identity has since logged in on another connection
            logger.debug("Ignoring stale disconnect of %s from %s", username, connection_id)
            return

        await self.registry.disconnect(username)
        await self.broadcast_user_list()

    # -- Negotiation ----------------------------------------------------------

    async def handle_signal(
        self, connection_id: str, kind: SignalKind | str, payload: Any
    ) -> RelayOutcome | None:
        """Relay a negotiation message on behalf of ``connection_id``.

        Returns ``None`` for malformed payloads, which are logged and
        ignored.
        """
        if not isinstance(payload, dict):
            logger.warning("Ignoring %s with non-object payload from %s", kind, connection_id)
            return None

        sender = self._bindings.get(connection_id)
        try:
            return await self.relay.relay(kind, payload, sender)
        except ValueError as exc:
            logger.warning("Ignoring malformed %s from %s: %s", kind, connection_id, exc)
            return None

    async def handle_get_ice_servers(self, connection_id: str) -> list[dict[str, Any]]:
        """Return the ICE server list as plain dicts for the client ack."""
        servers = await self.ice.get_ice_servers()
        logger.debug("Issued %d ICE server(s) to %s", len(servers), connection_id)
        return [server.to_dict() for server in servers]

    # -- Presence broadcast ---------------------------------------------------

    async def broadcast_user_list(self) -> None:
        """Publish the full presence snapshot to every connected client."""
        snapshot = await self.registry.snapshot()
        payload = [entry.model_dump() for entry in snapshot]
        try:
            await self.transport.broadcast(USER_LIST_EVENT, payload)
        except Exception:
            logger.exception("Failed to broadcast user list")

    async def close(self) -> None:
        """Release provider resources."""
        await self.ice.close()
        if self.push is not None:
            await self.push.close()
