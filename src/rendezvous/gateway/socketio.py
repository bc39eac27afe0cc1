"""Socket.IO connection gateway.

Clients use ``socket.io-client`` with:
- default path ``/socket.io``
- ``auth: { token }`` carrying the shared API key (``?token=`` in the query
  string is accepted as a fallback)

Each Socket.IO event is handed to the :class:`SignalingServer`; handlers run
as independent tasks, so a slow push or credential request on one
connection does not hold up the others.
"""

from __future__ import annotations

import hmac
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs

import socketio

from rendezvous.gateway.base import SignalTransport
from rendezvous.models.enums import SignalKind

if TYPE_CHECKING:
    from rendezvous.core.server import SignalingServer

logger = logging.getLogger("rendezvous.gateway")


def create_sio(cors_allowed_origins: str | list[str] = "*") -> socketio.AsyncServer:
    return socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=cors_allowed_origins,
        logger=False,
        engineio_logger=False,
    )


def extract_token(environ: dict[str, Any], auth: Any | None) -> str | None:
    """Extract the handshake token from Socket.IO auth data or the query string."""
    if isinstance(auth, dict):
        auth_token = auth.get("token")
        if isinstance(auth_token, str) and auth_token:
            return auth_token

    scope: Any = environ
    if isinstance(environ, dict) and "asgi.scope" in environ:
        inner = environ.get("asgi.scope")
        if isinstance(inner, dict):
            scope = inner

    query_string: str | bytes = ""
    if isinstance(scope, dict) and "query_string" in scope:
        query_string = scope.get("query_string", b"")
    elif isinstance(scope, dict) and "QUERY_STRING" in scope:
        query_string = scope.get("QUERY_STRING", "")

    if isinstance(query_string, (bytes, bytearray)):
        query_string = query_string.decode(errors="ignore")

    token = parse_qs(str(query_string)).get("token", [None])[0]
    if isinstance(token, str) and token:
        return token
    return None


class SocketIOTransport(SignalTransport):
    """Outbound emission through a python-socketio server."""

    def __init__(self, sio: socketio.AsyncServer) -> None:
        self._sio = sio

    async def send(self, connection_id: str, event: str, data: Any) -> None:
        await self._sio.emit(event, data, to=connection_id)

    async def broadcast(self, event: str, data: Any) -> None:
        await self._sio.emit(event, data)


class SocketIOGateway:
    """Registers the signaling event handlers on a Socket.IO server.

    Args:
        sio: The server to attach handlers to.
        server: Dispatch target for every accepted event.
        api_key: Shared secret every handshake must present.
    """

    def __init__(self, sio: socketio.AsyncServer, server: SignalingServer, api_key: str) -> None:
        self._sio = sio
        self._server = server
        self._api_key = api_key.encode()

        sio.on("connect", self._on_connect)
        sio.on("disconnect", self._on_disconnect)
        sio.on("login", self._on_login)
        sio.on("store-fcm-token", self._on_store_token)
        sio.on("get-ice-servers", self._on_get_ice_servers)
        for kind in SignalKind:
            sio.on(str(kind), self._signal_handler(kind))

    def is_authorized(self, token: str | None) -> bool:
        if token is None:
            return False
        return hmac.compare_digest(token.encode(), self._api_key)

    def asgi_app(self, socketio_path: str = "socket.io", **kwargs: Any) -> socketio.ASGIApp:
        return socketio.ASGIApp(self._sio, socketio_path=socketio_path, **kwargs)

    async def _on_connect(
        self, sid: str, environ: dict[str, Any], auth: Any | None = None
    ) -> None:
        if not self.is_authorized(extract_token(environ, auth)):
            logger.warning("Rejected unauthorized connection %s", sid)
            raise socketio.exceptions.ConnectionRefusedError("unauthorized")
        await self._server.handle_connect(sid)

    async def _on_disconnect(self, sid: str, *args: Any) -> None:
        # newer python-socketio releases pass a disconnect reason
        await self._server.handle_disconnect(sid)

    async def _on_login(self, sid: str, username: Any = None) -> None:
        await self._server.handle_login(sid, username)

    async def _on_store_token(self, sid: str, token: Any = None) -> None:
        await self._server.handle_store_token(sid, token)

    async def _on_get_ice_servers(self, sid: str, *args: Any) -> list[dict[str, Any]]:
        return await self._server.handle_get_ice_servers(sid)

    def _signal_handler(self, kind: SignalKind) -> Any:
        async def handler(sid: str, payload: Any = None) -> None:
            await self._server.handle_signal(sid, kind, payload)

        handler.__name__ = f"on_{kind.name.lower()}"
        return handler
