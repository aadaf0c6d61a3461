"""Reference store backed by an Upstash-style REST key-value service.

Commands are POSTed as JSON arrays (``["SET", key, value, "EX", ttl]``) with a
bearer token; the service answers ``{"result": ...}`` or ``{"error": ...}``.
Ids are random so several processes can share one service.
"""

import json
import logging
import uuid

import httpx

from curabot.errors import StoreError
from curabot.models.reference import StoredReference
from curabot.store.base import ReferenceStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "curabot:ref:"


class RemoteReferenceStore(ReferenceStore):
    """TTL-bound store reached over HTTP."""

    def __init__(
        self,
        url: str,
        token: str,
        ttl_seconds: int = 86_400,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url.rstrip("/")
        self._token = token
        self._ttl = ttl_seconds
        self._timeout = timeout
        self._transport = transport

    async def put(self, url: str, tags: str) -> str:
        reference_id = uuid.uuid4().hex
        value = json.dumps({"url": url, "tags": tags})
        await self._command(["SET", KEY_PREFIX + reference_id, value, "EX", str(self._ttl)])
        return reference_id

    async def get(self, reference_id: str) -> StoredReference | None:
        raw = await self._command(["GET", KEY_PREFIX + reference_id])
        if raw is None:
            return None
        try:
            data = json.loads(raw)
            return StoredReference(id=reference_id, url=data["url"], tags=data["tags"])
        except (TypeError, ValueError, KeyError):
            logger.warning("Discarding malformed store entry %s", reference_id)
            return None

    async def _command(self, command: list[str]) -> object:
        """Send one command and return its ``result`` field.

        Raises StoreError on transport failures, non-2xx responses, or an
        ``error`` reply from the service.
        """
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout), transport=self._transport
            ) as client:
                response = await client.post(
                    self._url,
                    json=command,
                    headers={"Authorization": f"Bearer {self._token}"},
                )
                response.raise_for_status()
                body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Reference store %s failed: %s", command[0], exc)
            raise StoreError() from exc

        if not isinstance(body, dict) or "error" in body:
            logger.warning("Reference store %s rejected: %r", command[0], body)
            raise StoreError()
        return body.get("result")
