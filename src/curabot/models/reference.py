"""Stored reference model used to recover a URL from a short control id."""

from pydantic import BaseModel


class StoredReference(BaseModel):
    """A short opaque id mapped to the URL and tags of one summarization."""

    id: str
    url: str
    tags: str
