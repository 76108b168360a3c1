"""In-memory fakes standing in for the API in restcursor tests."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlsplit

CURSOR_ROOT = "https://api.test/cursor"


class FakeStore:
    """In-memory stand-in for the API: serves records by offset cursors.

    A full page always advertises a ``next`` cursor, the way the real API
    does, so an exactly full last page is followed by an empty one.
    """

    def __init__(self, key: str, records: list[dict[str, Any]]) -> None:
        self.key = key
        self.records = records
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def fetch(
        self,
        path: str | None = None,
        url: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        self.calls.append(("fetch", {"path": path, "url": url, "params": params}))
        if url:
            query = parse_qs(urlsplit(url).query)
            offset = int(query["offset"][0])
            limit = int(query["limit"][0])
        else:
            params = params or {}
            if params.get("count"):
                return {"@attributes": {"count": str(len(self.records))}}
            offset = 0
            limit = int(params.get("limit", 100))
        chunk = self.records[offset : offset + limit]
        attributes: dict[str, Any] = {"count": str(len(self.records)), "next": ""}
        if len(chunk) == limit:
            attributes["next"] = f"{CURSOR_ROOT}?offset={offset + limit}&limit={limit}"
        return {"@attributes": attributes, self.key: chunk}

    def create(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("create", {"path": path, "body": body}))
        return {self.key: body}

    def replace(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("replace", {"path": path, "body": body}))
        return {self.key: body}

    def remove(self, path: str) -> dict[str, Any]:
        self.calls.append(("remove", {"path": path}))
        return {self.key: {"archived": "true"}}


def make_items(n: int) -> list[dict[str, Any]]:
    return [{"itemID": str(i), "description": f"item {i}"} for i in range(1, n + 1)]


