"""Presence registry: username to live connection mapping."""

from rendezvous.presence.base import PresenceRegistry
from rendezvous.presence.memory import InMemoryPresenceRegistry

__all__ = ["InMemoryPresenceRegistry", "PresenceRegistry"]
