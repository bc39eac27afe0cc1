"""Cloudflare TURN issuer configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr


class CloudflareTurnConfig(BaseModel):
    """Cloudflare Realtime TURN key configuration."""

    key_id: str
    api_token: SecretStr
    ttl: int = Field(default=86400, gt=0)
    base_url: str = "https://rtc.live.cloudflare.com/v1/turn/keys"
    timeout: float = 10.0

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/{self.key_id}/credentials/generate"
