"""Discord request signature verification as a FastAPI dependency."""

import logging

from fastapi import HTTPException, Request
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from curabot.config import get_settings

logger = logging.getLogger(__name__)


def is_valid_signature(public_key: str, signature: str, timestamp: str, body: bytes) -> bool:
    """Check an Ed25519 signature over ``timestamp + body``."""
    try:
        verify_key = VerifyKey(bytes.fromhex(public_key))
        verify_key.verify(timestamp.encode() + body, bytes.fromhex(signature))
    except (BadSignatureError, ValueError, TypeError):
        return False
    return True


async def verify_discord_request(request: Request) -> dict:
    """Verify the Discord request signature and return the parsed JSON payload.

    Reads the raw body FIRST so verification runs over the exact bytes Discord
    signed. Raises HTTPException(401) if the signature is missing or invalid,
    and HTTPException(400) if a correctly signed body is not valid JSON.
    """
    settings = get_settings()
    body = await request.body()

    signature = request.headers.get("X-Signature-Ed25519", "")
    timestamp = request.headers.get("X-Signature-Timestamp", "")

    if not signature or not timestamp or not is_valid_signature(
        settings.discord_public_key, signature, timestamp, body
    ):
        logger.warning("Rejected interaction with invalid signature")
        raise HTTPException(status_code=401, detail="Invalid request signature")

    try:
        return await request.json()
    except ValueError:
        logger.warning("Rejected signed interaction with malformed JSON body")
        raise HTTPException(status_code=400, detail="Malformed request body")
