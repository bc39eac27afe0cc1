"""Cloudflare Realtime TURN provider."""

from rendezvous.providers.cloudflare.config import CloudflareTurnConfig
from rendezvous.providers.cloudflare.turn import CloudflareTurnIssuer

__all__ = ["CloudflareTurnConfig", "CloudflareTurnIssuer"]
