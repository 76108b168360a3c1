"""Exception hierarchy for restcursor."""

from __future__ import annotations

from typing import Any


class RestCursorError(Exception):
    """Base restcursor exception."""


class NotFoundError(RestCursorError):
    """No resource matched a lookup by identity (-> HTTP 404 semantics)."""

    def __init__(self, resource_name: str, id_field: str, resource_id: Any) -> None:
        self.resource_name = resource_name
        self.id_field = id_field
        self.resource_id = resource_id
        super().__init__(f"could not find a {resource_name} with {id_field}={resource_id}")


class UnknownResourceError(RestCursorError, KeyError):
    """Raised when a collection name has no registered resource type."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"no resource type registered for {self.name!r}"


class ApiError(RestCursorError):
    """The API answered with a non-2xx status or an undecodable body."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code, message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"ApiError ({self.status_code}): {self.message}"

    def __repr__(self) -> str:
        return f"<ApiError ({self.status_code}): {self.message!r}>"
