"""Out-of-band wake notification sent when an offer is relayed."""

from __future__ import annotations

import json
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field

UNKNOWN_CALLER = "Unknown"


def _new_call_id() -> str:
    return str(uuid4())


class WakeNotification(BaseModel):
    """Data-only push that wakes the callee's device for an incoming call.

    The receiving app correlates its incoming-call UI through ``call_id``,
    so every offer gets a fresh one.
    """

    target: str
    sender: str = UNKNOWN_CALLER
    sdp: str = ""
    sdp_type: str = "offer"
    call_id: str = Field(default_factory=_new_call_id)
    display_name: str = UNKNOWN_CALLER
    handle: str = UNKNOWN_CALLER
    app_name: str = ""
    avatar_url: str = ""

    @classmethod
    def for_offer(
        cls,
        *,
        target: str,
        sender: str | None,
        offer: dict[str, Any],
        app_name: str,
        avatar_url: str,
    ) -> WakeNotification:
        """Build the notification for an offer payload."""
        caller = sender or UNKNOWN_CALLER
        return cls(
            target=target,
            sender=caller,
            sdp=serialize_description(offer.get("sdp")),
            sdp_type=str(offer.get("type") or "offer"),
            display_name=caller,
            handle=caller,
            app_name=app_name,
            avatar_url=avatar_url,
        )

    def to_data(self) -> dict[str, str]:
        """Return the flat string map carried by the push message."""
        return {
            "type": "offer",
            "target": self.target,
            "sender": self.sender,
            "sdp": self.sdp,
            "type_val": self.sdp_type,
            "uuid": self.call_id,
            "nameCaller": self.display_name,
            "appName": self.app_name,
            "handle": self.handle,
            "avatar": self.avatar_url,
        }


def serialize_description(sdp: Any) -> str:
    """Flatten a session description for a string-only data payload."""
    if sdp is None:
        return ""
    if isinstance(sdp, str):
        return sdp
    return json.dumps(sdp)
