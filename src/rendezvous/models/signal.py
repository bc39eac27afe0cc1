"""Negotiation messages exchanged between peers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from rendezvous.models.enums import SignalKind


class SignalMessage(BaseModel):
    """A negotiation message addressed to another identity.

    ``fields`` holds every key of the inbound payload except ``target``;
    they are forwarded opaquely. ``sender`` is always assigned by the relay.
    """

    kind: SignalKind
    target: str
    sender: str | None = None
    fields: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_payload(
        cls, kind: SignalKind | str, payload: dict[str, Any], sender: str | None
    ) -> SignalMessage:
        """Build a message from an inbound event payload.

        Raises:
            ValueError: If ``payload`` has no string ``target``.
        """
        target = payload.get("target")
        if not isinstance(target, str) or not target:
            raise ValueError("signal payload requires a non-empty string 'target'")
        fields = {k: v for k, v in payload.items() if k != "target"}
        return cls(kind=SignalKind(kind), target=target, sender=sender, fields=fields)

    def outbound_payload(self) -> dict[str, Any]:
        """Return the body delivered to the target's live connection.

        ICE candidates arrive wrapped as ``{"target", "candidate": {...}}``
        and leave as the flat candidate object (just ``sender`` when the
        candidate is missing or not an object). Every other kind is echoed
        back with ``target`` intact. ``sender`` always overrides whatever the
        caller put in the payload.
        """
        if self.kind is SignalKind.ICE_CANDIDATE:
            candidate = self.fields.get("candidate")
            if isinstance(candidate, dict):
                return {**candidate, "sender": self.sender}
            return {"sender": self.sender}
        return {"target": self.target, **self.fields, "sender": self.sender}
