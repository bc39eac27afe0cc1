"""Connection gateway: inbound event handlers and outbound transport."""

from rendezvous.gateway.base import SignalTransport
from rendezvous.gateway.mock import MockTransport

__all__ = ["MockTransport", "SignalTransport"]
