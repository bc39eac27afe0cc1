"""ICE server provisioning with a provider precedence chain."""

from __future__ import annotations

import logging

from pydantic import BaseModel, SecretStr

from rendezvous.models.ice import IceServer
from rendezvous.providers.turn.base import TurnIssuer

logger = logging.getLogger("rendezvous.credentials")

DEFAULT_STUN_URL = "stun:stun.l.google.com:19302"


class StaticTurnConfig(BaseModel):
    """Fixed, non-expiring TURN credentials."""

    url: str
    username: str
    password: SecretStr

    def to_ice_server(self) -> IceServer:
        return IceServer(
            urls=self.url,
            username=self.username,
            credential=self.password.get_secret_value(),
        )


class IceServerProvisioner:
    """Builds the ICE server list handed to clients.

    The public STUN server always comes first. After it, exactly one tier
    is consulted: the dynamic issuer when one is configured (even if it then
    fails), otherwise the static TURN entry when configured.
    """

    def __init__(
        self,
        issuer: TurnIssuer | None = None,
        static: StaticTurnConfig | None = None,
        *,
        stun_url: str = DEFAULT_STUN_URL,
    ) -> None:
        self._issuer = issuer
        self._static = static
        self._stun_url = stun_url

    async def get_ice_servers(self) -> list[IceServer]:
        """Return the server list for one client. Never raises."""
        servers = [IceServer(urls=self._stun_url)]

        if self._issuer is not None:
            servers.extend(await self._issue())
        elif self._static is not None:
            servers.append(self._static.to_ice_server())
            logger.debug("Using static TURN credentials")

        return servers

    async def _issue(self) -> list[IceServer]:
        assert self._issuer is not None
        try:
            result = await self._issuer.issue()
        except Exception:
            logger.exception("Error fetching TURN credentials from %s", self._issuer.name)
            return []

        if not result.success:
            logger.error(
                "Failed to generate TURN credentials via %s: %s",
                self._issuer.name,
                result.error,
            )
            return []

        logger.debug(
            "Generated %d TURN server(s) via %s", len(result.ice_servers), self._issuer.name
        )
        return result.ice_servers

    async def close(self) -> None:
        if self._issuer is not None:
            await self._issuer.close()
