"""FCM provider configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class FCMConfig(BaseModel):
    """Firebase Cloud Messaging configuration.

    ``apns_topic`` is the iOS bundle identifier the background push is
    addressed to.
    """

    credentials_path: Path
    app_name: str = "rendezvous"
    apns_topic: str = "com.anytalk.client"
    android_ttl: int = 0
