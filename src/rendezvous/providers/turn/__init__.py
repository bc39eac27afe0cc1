"""TURN credential issuers."""

from rendezvous.providers.turn.base import TurnIssuer
from rendezvous.providers.turn.mock import MockTurnIssuer

__all__ = ["MockTurnIssuer", "TurnIssuer"]
