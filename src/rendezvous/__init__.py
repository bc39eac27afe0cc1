"""rendezvous - signaling relay for peer-to-peer calls between named users."""

from rendezvous._version import __version__
from rendezvous.app import Application, configure_logging, create_app
from rendezvous.config import Settings
from rendezvous.core.credentials import IceServerProvisioner, StaticTurnConfig
from rendezvous.core.relay import SessionRelay
from rendezvous.core.server import USER_LIST_EVENT, SignalingServer
from rendezvous.gateway.base import SignalTransport
from rendezvous.gateway.mock import MockTransport
from rendezvous.gateway.socketio import SocketIOGateway, SocketIOTransport
from rendezvous.models.delivery import IceIssueResult, ProviderResult, RelayOutcome
from rendezvous.models.enums import DropReason, SignalKind
from rendezvous.models.ice import IceServer
from rendezvous.models.presence import IdentityRecord, PresenceEntry
from rendezvous.models.push import WakeNotification
from rendezvous.models.signal import SignalMessage
from rendezvous.presence.base import PresenceRegistry
from rendezvous.presence.memory import InMemoryPresenceRegistry
from rendezvous.providers.cloudflare import CloudflareTurnConfig, CloudflareTurnIssuer
from rendezvous.providers.fcm import FCMConfig, FCMPushProvider, create_push_provider
from rendezvous.providers.push import MockPushProvider, PushProvider
from rendezvous.providers.turn import MockTurnIssuer, TurnIssuer

__all__ = [
    "Application",
    "CloudflareTurnConfig",
    "CloudflareTurnIssuer",
    "DropReason",
    "FCMConfig",
    "FCMPushProvider",
    "IceIssueResult",
    "IceServer",
    "IceServerProvisioner",
    "IdentityRecord",
    "InMemoryPresenceRegistry",
    "MockPushProvider",
    "MockTransport",
    "MockTurnIssuer",
    "PresenceEntry",
    "PresenceRegistry",
    "ProviderResult",
    "PushProvider",
    "RelayOutcome",
    "SessionRelay",
    "Settings",
    "SignalKind",
    "SignalMessage",
    "SignalTransport",
    "SignalingServer",
    "SocketIOGateway",
    "SocketIOTransport",
    "StaticTurnConfig",
    "TurnIssuer",
    "USER_LIST_EVENT",
    "WakeNotification",
    "__version__",
    "configure_logging",
    "create_app",
]
