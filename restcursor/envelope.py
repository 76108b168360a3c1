"""Response envelope helpers: pagination metadata and item extraction."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

ATTRIBUTES_KEY = "@attributes"


class PageAttributes(BaseModel):
    """The ``@attributes`` block of a list response.

    ``count`` arrives as a string on some endpoints and as a number on others.
    Each field degrades to ``None`` on its own when it cannot be read, so a
    garbled count never hides a usable cursor.
    """

    model_config = ConfigDict(extra="allow")

    count: int | None = None
    next: str | None = None
    previous: str | None = None

    @field_validator("count", mode="before")
    @classmethod
    def _count_or_none(cls, value: Any) -> int | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().isdecimal():
            return int(value.strip())
        return None

    @field_validator("next", "previous", mode="before")
    @classmethod
    def _cursor_or_none(cls, value: Any) -> str | None:
        if isinstance(value, str) and value:
            return value
        return None


def page_attributes(envelope: Any) -> PageAttributes:
    """Return the envelope's pagination metadata, empty when absent or malformed."""
    if not isinstance(envelope, dict):
        return PageAttributes()
    raw = envelope.get(ATTRIBUTES_KEY)
    if not isinstance(raw, dict):
        return PageAttributes()
    return PageAttributes.model_validate(raw)


def extract_records(envelope: Any, key: str) -> list[dict[str, Any]]:
    """Return the raw records stored under *key* as a list.

    A single bare record becomes a one-element list; an absent key or a
    non-mapping envelope yields an empty list.
    """
    if not isinstance(envelope, dict):
        return []
    raw = envelope.get(key)
    if raw is None:
        return []
    if isinstance(raw, dict):
        return [raw]
    if isinstance(raw, list):
        return [record for record in raw if isinstance(record, dict)]
    return []


def extract_count(envelope: Any) -> int:
    """Return the server-reported count of a ``count=1`` response (0 if missing)."""
    count = page_attributes(envelope).count
    return count if count is not None else 0
