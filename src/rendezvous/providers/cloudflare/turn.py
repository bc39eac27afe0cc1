"""Cloudflare TURN issuer: generates short-lived TURN credentials."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from rendezvous.models.delivery import IceIssueResult
from rendezvous.models.ice import IceServer
from rendezvous.providers.cloudflare.config import CloudflareTurnConfig
from rendezvous.providers.turn.base import TurnIssuer

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger("rendezvous.providers.cloudflare")


class CloudflareTurnIssuer(TurnIssuer):
    """TURN issuer using the Cloudflare Realtime TURN credentials API."""

    def __init__(self, config: CloudflareTurnConfig) -> None:
        try:
            import httpx as _httpx
        except ImportError as exc:
            raise ImportError(
                "httpx is required for CloudflareTurnIssuer. "
                "Install it with: pip install httpx"
            ) from exc
        self._config = config
        self._httpx = _httpx
        self._client: httpx.AsyncClient = _httpx.AsyncClient(timeout=config.timeout)

    async def issue(self) -> IceIssueResult:
        headers = {
            "Authorization": f"Bearer {self._config.api_token.get_secret_value()}",
            "Content-Type": "application/json",
        }
        try:
            resp = await self._client.post(
                self._config.api_url,
                json={"ttl": self._config.ttl},
                headers=headers,
            )
            resp.raise_for_status()
            data: dict[str, Any] = resp.json()
        except self._httpx.TimeoutException:
            return IceIssueResult(success=False, error="timeout")
        except self._httpx.HTTPStatusError as exc:
            logger.debug("Cloudflare rejected credential request: %s", exc.response.text)
            return IceIssueResult(
                success=False,
                error=f"http_{exc.response.status_code}",
            )
        except self._httpx.HTTPError as exc:
            return IceIssueResult(success=False, error=str(exc))
        except ValueError:
            return IceIssueResult(success=False, error="invalid_json")

        return self._parse_response(data)

    @staticmethod
    def _parse_response(data: Any) -> IceIssueResult:
        raw = data.get("iceServers") if isinstance(data, dict) else None
        if not raw:
            return IceIssueResult(success=False, error="missing_ice_servers")

        entries = raw if isinstance(raw, list) else [raw]
        try:
            servers = [IceServer.model_validate(entry) for entry in entries]
        except ValidationError:
            return IceIssueResult(success=False, error="invalid_ice_servers")
        return IceIssueResult(success=True, ice_servers=servers)

    async def close(self) -> None:
        await self._client.aclose()
