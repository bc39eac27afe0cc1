"""Process configuration loaded from the environment.

Every setting maps to an upper-case environment variable of the same name
(``PORT``, ``API_KEY``, ``TURN_URL``...). A ``.env`` file in the working
directory is read as well; real environment variables take precedence.
"""

from __future__ import annotations

import json
from typing import Annotated, Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from rendezvous.core.credentials import DEFAULT_STUN_URL, StaticTurnConfig
from rendezvous.providers.cloudflare.config import CloudflareTurnConfig
from rendezvous.providers.fcm.credentials import DEFAULT_SERVICE_ACCOUNT_PATHS


def _parse_env_list(candidate: Any) -> Any:
    """Accept a JSON list or a comma-separated string."""
    if not isinstance(candidate, str):
        return candidate
    s = candidate.strip()
    if not s:
        return []
    try:
        loaded = json.loads(s)
        if isinstance(loaded, list):
            return [str(item).strip() for item in loaded if str(item).strip()]
    except json.JSONDecodeError:
        pass
    return [item.strip() for item in s.split(",") if item.strip()]


class Settings(BaseSettings):
    """Signaling server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind address")  # noqa: S104  # nosec B104
    port: int = Field(default=3000, ge=1, le=65535, description="Listening port")
    api_key: SecretStr = Field(..., description="Shared secret required on every handshake")
    log_level: str = Field(default="INFO", description="Root log level")
    cors_allowed_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # Dynamic TURN issuer
    cloudflare_turn_key_id: str | None = None
    cloudflare_api_token: SecretStr | None = None
    cloudflare_turn_ttl: int = Field(default=86400, gt=0)

    # Static TURN fallback
    turn_url: str | None = None
    turn_username: str | None = None
    turn_password: SecretStr | None = None

    stun_url: str = DEFAULT_STUN_URL

    # Push notifications
    firebase_credential_paths: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_SERVICE_ACCOUNT_PATHS)
    )
    push_app_name: str = "AnyTalk"
    push_avatar_url: str = "https://i.pravatar.cc/100"
    apns_topic: str = "com.anytalk.client"

    @field_validator("cors_allowed_origins", "firebase_credential_paths", mode="before")
    @classmethod
    def split_list(cls, v: Any) -> Any:
        return _parse_env_list(v)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level {v!r}")
        return level

    @property
    def socketio_cors(self) -> str | list[str]:
        """CORS setting in the shape python-socketio expects."""
        if self.cors_allowed_origins == ["*"]:
            return "*"
        return self.cors_allowed_origins

    def cloudflare_config(self) -> CloudflareTurnConfig | None:
        """Issuer config, only when both the key id and API token are set."""
        token = self.cloudflare_api_token
        if not self.cloudflare_turn_key_id or token is None or not token.get_secret_value():
            return None
        return CloudflareTurnConfig(
            key_id=self.cloudflare_turn_key_id,
            api_token=token,
            ttl=self.cloudflare_turn_ttl,
        )

    def static_turn_config(self) -> StaticTurnConfig | None:
        """Static TURN entry, only when URL, username and password are all set."""
        password = self.turn_password
        if not self.turn_url or not self.turn_username or password is None:
            return None
        if not password.get_secret_value():
            return None
        return StaticTurnConfig(
            url=self.turn_url,
            username=self.turn_username,
            password=password,
        )
