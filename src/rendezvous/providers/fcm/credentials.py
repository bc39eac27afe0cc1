"""Service account discovery and push provider bootstrap."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from rendezvous.providers.fcm.config import FCMConfig
from rendezvous.providers.fcm.push import FCMPushProvider

logger = logging.getLogger("rendezvous.providers.fcm")

DEFAULT_SERVICE_ACCOUNT_PATHS: tuple[str, ...] = (
    "/etc/secrets/serviceAccountKey.json",
    "./serviceAccountKey.json",
)


def find_service_account(paths: Iterable[str | Path]) -> Path | None:
    """Return the first existing service account file, or ``None``."""
    for candidate in paths:
        path = Path(candidate)
        if path.is_file():
            return path
    return None


def create_push_provider(
    paths: Iterable[str | Path] = DEFAULT_SERVICE_ACCOUNT_PATHS,
    *,
    apns_topic: str | None = None,
) -> FCMPushProvider | None:
    """Initialize FCM from the first service account found.

    A missing file or a failed initialization disables push for the life of
    the process: the failure is logged and ``None`` is returned.
    """
    candidates = list(paths)
    path = find_service_account(candidates)
    if path is None:
        logger.warning(
            "Service account key not found in %s; push notifications disabled",
            ", ".join(str(p) for p in candidates),
        )
        return None

    config = FCMConfig(credentials_path=path)
    if apns_topic:
        config = config.model_copy(update={"apns_topic": apns_topic})
    try:
        provider = FCMPushProvider(config)
    except Exception as exc:
        logger.warning("Firebase initialization failed (%s); push notifications disabled", exc)
        return None

    logger.info("Firebase initialized using %s", path)
    return provider
