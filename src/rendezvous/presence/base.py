"""Abstract base class for presence registries."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rendezvous.models.presence import IdentityRecord, PresenceEntry


class PresenceRegistry(ABC):
    """Maps a persistent username to its current connection state.

    Implementations must apply each operation without suspending between
    reading and writing a record, so that ``connection_id`` and the derived
    ``online`` flag always change together. The library ships with
    `InMemoryPresenceRegistry`.
    """

    @abstractmethod
    async def register(self, username: str, connection_id: str) -> IdentityRecord:
        """Bind ``username`` to a live connection, creating the record if needed.

        A previous connection for the same username is replaced, not kept.
        Any stored push token is preserved.
        """
        ...

    @abstractmethod
    async def store_token(self, username: str, token: str) -> bool:
        """Overwrite the push token of a known username.

        Returns ``False`` without raising if the username was never
        registered.
        """
        ...

    @abstractmethod
    async def disconnect(self, username: str) -> bool:
        """Mark ``username`` offline, keeping its push token.

        Returns ``False`` if the username is unknown.
        """
        ...

    @abstractmethod
    async def lookup(self, username: str) -> IdentityRecord | None:
        """Get a copy of the record for ``username``, or ``None``."""
        ...

    @abstractmethod
    async def snapshot(self) -> list[PresenceEntry]:
        """Return every known username with its online flag.

        Ordered by first registration.
        """
        ...
