"""Runtime settings read from ``RESTCURSOR_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.lightspeedapp.com"
DEFAULT_TIMEOUT = 30.0

PER_PAGE_MIN = 1
PER_PAGE_MAX = 100
PER_PAGE_DEFAULT = 100


def _clamp_per_page(per_page: int) -> int:
    return max(PER_PAGE_MIN, min(per_page, PER_PAGE_MAX))


@dataclass(frozen=True)
class Settings:
    """Connection and paging settings shared by the client and collections."""

    base_url: str = DEFAULT_BASE_URL
    token: str | None = None
    account_id: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    per_page: int = PER_PAGE_DEFAULT

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment.

        Reads:
            RESTCURSOR_BASE_URL   - API root (default: Lightspeed's public API)
            RESTCURSOR_TOKEN      - bearer token, optional
            RESTCURSOR_ACCOUNT_ID - account to scope requests to, optional
            RESTCURSOR_TIMEOUT    - request timeout in seconds (default: 30)
            RESTCURSOR_PER_PAGE   - page size, clamped to 1..100 (default: 100)

        Raises ``ValueError`` when a numeric variable cannot be parsed.
        """
        timeout_raw = os.environ.get("RESTCURSOR_TIMEOUT")
        per_page_raw = os.environ.get("RESTCURSOR_PER_PAGE")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
            per_page = int(per_page_raw) if per_page_raw else PER_PAGE_DEFAULT
        except ValueError as exc:
            raise ValueError(f"invalid numeric setting: {exc}") from exc
        return cls(
            base_url=os.environ.get("RESTCURSOR_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            token=os.environ.get("RESTCURSOR_TOKEN") or None,
            account_id=os.environ.get("RESTCURSOR_ACCOUNT_ID") or None,
            timeout=timeout,
            per_page=_clamp_per_page(per_page),
        )
