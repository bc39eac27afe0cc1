"""Data models for rendezvous."""

from rendezvous.models.delivery import IceIssueResult, ProviderResult, RelayOutcome
from rendezvous.models.enums import DropReason, SignalKind
from rendezvous.models.ice import IceServer
from rendezvous.models.presence import IdentityRecord, PresenceEntry
from rendezvous.models.push import WakeNotification
from rendezvous.models.signal import SignalMessage

__all__ = [
    "DropReason",
    "IceIssueResult",
    "IceServer",
    "IdentityRecord",
    "PresenceEntry",
    "ProviderResult",
    "RelayOutcome",
    "SignalKind",
    "SignalMessage",
    "WakeNotification",
]
