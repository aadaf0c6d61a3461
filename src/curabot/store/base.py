"""Reference store contract.

A reference store maps a short opaque id to the ``{url, tags}`` of one
summarization so that button and modal custom ids stay well under Discord's
100-character limit. Entries are never deleted explicitly: they expire or are
lost when a memory-only backing restarts.
"""

from abc import ABC, abstractmethod

from curabot.models.reference import StoredReference


class ReferenceStore(ABC):
    """Async put/get contract shared by every backing."""

    @abstractmethod
    async def put(self, url: str, tags: str) -> str:
        """Store ``url`` and ``tags`` under a new unique id and return the id."""

    @abstractmethod
    async def get(self, reference_id: str) -> StoredReference | None:
        """Return the stored reference, or None if it is unknown or expired."""
