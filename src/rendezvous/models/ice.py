"""ICE server descriptors handed to clients."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class IceServer(BaseModel):
    """A STUN or TURN server entry in ``RTCIceServer`` shape."""

    urls: str | list[str]
    username: str | None = None
    credential: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON object expected by ``RTCPeerConnection``."""
        return self.model_dump(exclude_none=True)
