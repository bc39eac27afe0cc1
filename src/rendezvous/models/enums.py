"""All string enums for rendezvous."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class SignalKind(StrEnum):
    """Negotiation message kinds relayed between two identities."""

    OFFER = "offer"
    ANSWER = "answer"
    ICE_CANDIDATE = "ice-candidate"
    END_CALL = "end-call"

    @property
    def wakes_recipient(self) -> bool:
        """Only session initiation is allowed to trigger a push wake-up."""
        return self is SignalKind.OFFER


@unique
class DropReason(StrEnum):
    UNKNOWN_TARGET = "unknown_target"
    TARGET_OFFLINE = "target_offline"
    DELIVERY_FAILED = "delivery_failed"
