"""Presence registry models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field


class IdentityRecord(BaseModel):
    """Current connection state of one registered username.

    ``online`` is derived from ``connection_id`` so the two can never be
    updated independently of each other.
    """

    username: str
    connection_id: str | None = None
    push_token: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def online(self) -> bool:
        return self.connection_id is not None


class PresenceEntry(BaseModel):
    """One row of a presence snapshot."""

    model_config = ConfigDict(frozen=True)

    username: str
    online: bool
