"""Synchronous JSON REST client used by collections to talk to the API."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

import httpx
import structlog

from restcursor.core.config import Settings
from restcursor.errors import ApiError

log = structlog.get_logger("restcursor.client")

Envelope = Any  # decoded JSON body; collections only trust it if it is a dict


@runtime_checkable
class Client(Protocol):
    """Interface a collection needs from the transport layer.

    ``fetch`` gets exactly one of *path* or *url*. A *url* is an absolute
    cursor returned by the API and is requested verbatim, so *params* are
    ignored whenever it is set.
    """

    def fetch(
        self,
        path: str | None = None,
        url: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> Envelope: ...

    def create(self, path: str, body: dict[str, Any]) -> Envelope: ...

    def replace(self, path: str, body: dict[str, Any]) -> Envelope: ...

    def remove(self, path: str) -> Envelope: ...


class HttpClient:
    """Thin wrapper around :class:`httpx.Client` implementing :class:`Client`."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers: dict[str, str] = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.BaseTransport | None = None
    ) -> HttpClient:
        return cls(
            settings.base_url,
            settings.token,
            timeout=settings.timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── verbs ──────────────────────────────────────────────────────────────

    def fetch(
        self,
        path: str | None = None,
        url: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> Envelope:
        if url:
            return self._request("GET", url)
        if path is None:
            raise ValueError("fetch() requires a path or a cursor url")
        return self._request("GET", path, params=params)

    def create(self, path: str, body: dict[str, Any]) -> Envelope:
        return self._request("POST", path, body=body)

    def replace(self, path: str, body: dict[str, Any]) -> Envelope:
        return self._request("PUT", path, body=body)

    def remove(self, path: str) -> Envelope:
        return self._request("DELETE", path)

    # ── internal ───────────────────────────────────────────────────────────

    def _request(
        self,
        method: str,
        target: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Envelope:
        """Send one request and return the decoded JSON body.

        Raises :class:`ApiError` for non-2xx responses and for bodies that
        are not valid JSON. Transport failures (timeouts, connection errors)
        propagate as ``httpx`` exceptions.
        """
        log.debug("client.request", method=method, target=target, params=params)
        response = self._client.request(method, target, params=params, json=body)

        if not response.is_success:
            message = self._error_message(response)
            log.warning(
                "client.error",
                method=method,
                target=target,
                status=response.status_code,
                message=message,
            )
            raise ApiError(response.status_code, message)

        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ApiError(response.status_code, f"invalid JSON body: {exc}") from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull a human readable message out of an error response."""
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return response.text or response.reason_phrase
        if isinstance(data, dict):
            for key in ("message", "error", "detail"):
                if data.get(key):
                    return str(data[key])
        return response.reason_phrase
