"""In-memory implementation of PresenceRegistry."""

from __future__ import annotations

import logging

from rendezvous.models.presence import IdentityRecord, PresenceEntry
from rendezvous.presence.base import PresenceRegistry

logger = logging.getLogger("rendezvous.presence")


class InMemoryPresenceRegistry(PresenceRegistry):
    """Dict-backed registry that lives as long as the process.

    Records are never deleted. Dict insertion order gives the snapshot its
    first-registration ordering.
    """

    def __init__(self) -> None:
        self._records: dict[str, IdentityRecord] = {}

    async def register(self, username: str, connection_id: str) -> IdentityRecord:
        record = self._records.get(username)
        if record is None:
            record = IdentityRecord(username=username)
            self._records[username] = record
        elif record.connection_id is not None and record.connection_id != connection_id:
            logger.info(
                "User %s re-registered from %s, replacing %s",
                username,
                connection_id,
                record.connection_id,
            )
        record.connection_id = connection_id
        return record.model_copy()

    async def store_token(self, username: str, token: str) -> bool:
        record = self._records.get(username)
        if record is None:
            return False
        record.push_token = token
        return True

    async def disconnect(self, username: str) -> bool:
        record = self._records.get(username)
        if record is None:
            return False
        record.connection_id = None
        return True

    async def lookup(self, username: str) -> IdentityRecord | None:
        record = self._records.get(username)
        return record.model_copy() if record is not None else None

    async def snapshot(self) -> list[PresenceEntry]:
        return [
            PresenceEntry(username=record.username, online=record.online)
            for record in self._records.values()
        ]

    def __len__(self) -> int:
        return len(self._records)
