"""Application wiring: settings to a running Socket.IO server."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import socketio

from rendezvous.config import Settings
from rendezvous.core.credentials import IceServerProvisioner
from rendezvous.core.server import SignalingServer
from rendezvous.gateway.socketio import SocketIOGateway, SocketIOTransport, create_sio
from rendezvous.providers.cloudflare.turn import CloudflareTurnIssuer
from rendezvous.providers.fcm.credentials import create_push_provider
from rendezvous.providers.push.base import PushProvider
from rendezvous.providers.turn.base import TurnIssuer

logger = logging.getLogger("rendezvous.app")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler for the process entry point."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


@dataclass
class Application:
    """Everything :func:`create_app` wires together."""

    settings: Settings
    server: SignalingServer
    gateway: SocketIOGateway
    asgi: socketio.ASGIApp


def create_app(
    settings: Settings | None = None,
    *,
    push: PushProvider | None = None,
    issuer: TurnIssuer | None = None,
) -> Application:
    """Build the signaling application.

    Args:
        settings: Configuration; read from the environment when omitted.
        push: Push provider override. By default FCM is initialized from
            the first service account file found, or push stays disabled.
        issuer: TURN issuer override. By default Cloudflare is used when
            its key id and API token are configured.
    """
    settings = settings or Settings()

    if push is None:
        push = create_push_provider(
            settings.firebase_credential_paths, apns_topic=settings.apns_topic
        )

    if issuer is None:
        cloudflare = settings.cloudflare_config()
        if cloudflare is not None:
            issuer = CloudflareTurnIssuer(cloudflare)

    static = settings.static_turn_config()
    if issuer is not None:
        logger.info("TURN credentials issued by %s", issuer.name)
    elif static is not None:
        logger.info("Using static TURN credentials from %s", static.url)
    else:
        logger.info("No TURN configured, clients get STUN only")

    sio = create_sio(settings.socketio_cors)
    server = SignalingServer(
        SocketIOTransport(sio),
        push=push,
        ice=IceServerProvisioner(issuer, static, stun_url=settings.stun_url),
        app_name=settings.push_app_name,
        avatar_url=settings.push_avatar_url,
    )
    gateway = SocketIOGateway(sio, server, settings.api_key.get_secret_value())
    asgi = gateway.asgi_app(on_shutdown=server.close)
    return Application(settings=settings, server=server, gateway=gateway, asgi=asgi)


def main() -> None:
    """Run the signaling server under uvicorn."""
    import uvicorn

    settings = Settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Signaling server running on port %d", settings.port)

    config = uvicorn.Config(
        app.asgi,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    uvicorn.Server(config).run()
