"""Delivery and provider result models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from rendezvous.models.enums import DropReason, SignalKind
from rendezvous.models.ice import IceServer


class ProviderResult(BaseModel):
    """Result from a push provider delivery attempt."""

    success: bool
    provider_message_id: str | None = None
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class IceIssueResult(BaseModel):
    """Result from a TURN credential issuer."""

    success: bool
    ice_servers: list[IceServer] = Field(default_factory=list)
    error: str | None = None


class RelayOutcome(BaseModel):
    """What the relay did with one negotiation message.

    Attributes:
        kind: The relayed message kind.
        target: Username the message was addressed to.
        delivered_live: Whether the message was handed to the target's live
            connection.
        push_attempted: Whether a wake notification was sent to the push
            provider.
        push_result: The provider result, when a push was attempted and
            returned one.
        call_id: Session identifier assigned to the wake notification.
        dropped: Reason the message reached nobody, if it did not.
    """

    kind: SignalKind
    target: str
    delivered_live: bool = False
    push_attempted: bool = False
    push_result: ProviderResult | None = None
    call_id: str | None = None
    dropped: DropReason | None = None
