"""Keyed ephemeral store: short ids that resolve back to a summarized URL.

Public API:
    create_reference_store(settings) -> ReferenceStore
        Remote backing when STORE_URL is configured, in-memory otherwise.
"""

import logging

from curabot.config import Settings
from curabot.store.base import ReferenceStore
from curabot.store.memory import InMemoryReferenceStore
from curabot.store.remote import RemoteReferenceStore

logger = logging.getLogger(__name__)


def create_reference_store(settings: Settings) -> ReferenceStore:
    """Build the reference store backing selected by configuration."""
    if settings.store_url:
        logger.info("Using remote reference store (ttl=%ds)", settings.store_ttl_seconds)
        return RemoteReferenceStore(
            settings.store_url,
            settings.store_token,
            ttl_seconds=settings.store_ttl_seconds,
        )
    logger.info("Using in-memory reference store (ttl=%ds)", settings.store_ttl_seconds)
    return InMemoryReferenceStore(ttl_seconds=settings.store_ttl_seconds)


__all__ = [
    "InMemoryReferenceStore",
    "ReferenceStore",
    "RemoteReferenceStore",
    "create_reference_store",
]
