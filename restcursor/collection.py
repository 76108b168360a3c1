"""Collection: cursor pagination, counting, CRUD dispatch and an identity cache."""

from __future__ import annotations

import json
import threading
from collections.abc import Callable, Iterator
from typing import Any, ClassVar

import structlog

from restcursor.client import Client, Envelope
from restcursor.context import Context, scoping_params
from restcursor.core.config import PER_PAGE_MAX
from restcursor.envelope import extract_count, extract_records, page_attributes
from restcursor.errors import NotFoundError
from restcursor.registry import ResourceType, resource_type
from restcursor.resource import Resource

log = structlog.get_logger("restcursor.collection")

PER_PAGE = PER_PAGE_MAX


class Collection:
    """All resources of one type reachable from a context.

    A collection is bound to an owning context (the account, or a parent
    resource for nested collections) and to a registered resource type,
    given either as the ``collection_name`` class attribute of a subclass or
    as the *name* argument. Every resource it instantiates is cached by its
    identity, so previously fetched items are available through
    :meth:`cached` without another request.

    Usage::

        items = account.collection("Items")
        for item in items.iter_resources(params={"categoryID": 3}):
            ...
        items.find(42)
        items.size()
    """

    collection_name: ClassVar[str] = ""
    load_relations_default: str | None = "all"

    def __init__(
        self, context: Context, name: str | None = None, *, per_page: int = PER_PAGE
    ) -> None:
        if per_page < 1:
            raise ValueError(f"per_page must be positive, got {per_page}")
        self.context = context
        self.per_page = per_page
        self.resource_type: ResourceType = resource_type(name or self.collection_name)
        self.resources: dict[Any, Resource] = {}
        self.next_page_url: str | None = None
        self._lock = threading.RLock()

    # ── naming and paths ─────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self.resource_type.name

    @property
    def resource_name(self) -> str:
        return self.resource_type.singular

    @property
    def id_field(self) -> str:
        return self.resource_type.id_field

    @property
    def client(self) -> Client:
        return self.context.client

    @property
    def base_path(self) -> str:
        return f"{self.context.base_path}/{self.name}"

    @property
    def collection_path(self) -> str:
        return f"{self.base_path}.json"

    def resource_path(self, resource_id: Any) -> str:
        return f"{self.base_path}/{resource_id}.json"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} API{self.base_path}>"

    # ── cache ────────────────────────────────────────────────────────────

    def cached(self) -> list[Resource]:
        """Return the resources loaded so far, without a request."""
        with self._lock:
            return list(self.resources.values())

    def cached_count(self) -> int:
        with self._lock:
            return len(self.resources)

    def first_cached(self) -> Resource | None:
        with self._lock:
            return next(iter(self.resources.values()), None)

    def clear_cache(self) -> None:
        """Forget every cached resource. Server state is not touched."""
        with self._lock:
            self.resources = {}

    unload = clear_cache

    def as_dict(self) -> dict[str, list[dict[str, Any]]] | None:
        """Serialise the cached resources, or ``None`` when nothing is loaded."""
        loaded = self.cached()
        if not loaded:
            return None
        return {self.resource_name: [resource.as_dict() for resource in loaded]}

    def to_json(self) -> str:
        return json.dumps(self.as_dict())

    # ── pagination ───────────────────────────────────────────────────────

    def page(
        self,
        url: str | None = None,
        per_page: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> list[Resource]:
        """Fetch a single page and return its resources.

        Without *url* this is a first-page request built from *params*.
        With *url* the cursor is requested verbatim and *params* is ignored,
        since the cursor already carries the filters and page size.
        """
        if url:
            log.debug("collection.page", collection=self.name, cursor=url)
            return self.instantiate(self._get(url=url))
        if per_page is None:
            per_page = self.per_page
        first_page_params = {"limit": per_page, **(params or {})}
        log.debug("collection.page", collection=self.name, params=first_page_params)
        return self.instantiate(self._get(params=first_page_params))

    def iter_pages(
        self, per_page: int | None = None, params: dict[str, Any] | None = None
    ) -> Iterator[list[Resource]]:
        """Lazily yield pages until one comes back shorter than *per_page*.

        Page length is the only stop signal. A full page is always followed
        by one more request, even when the API reported no next cursor, so
        an exactly full last page ends with an empty one.
        """
        if per_page is None:
            per_page = self.per_page
        if per_page < 1:
            raise ValueError(f"per_page must be positive, got {per_page}")
        url: str | None = None
        while True:
            resources = self.page(url=url, per_page=per_page, params=params)
            yield resources
            if len(resources) < per_page:
                return
            url = self.next_page_url

    def iter_resources(
        self, per_page: int | None = None, params: dict[str, Any] | None = None
    ) -> Iterator[Resource]:
        """Lazily yield every resource, one page request at a time."""
        for resources in self.iter_pages(per_page=per_page, params=params):
            yield from resources

    def __iter__(self) -> Iterator[Resource]:
        return self.iter_resources()

    def each_page(
        self,
        callback: Callable[[list[Resource]], Any],
        per_page: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> None:
        for resources in self.iter_pages(per_page=per_page, params=params):
            callback(resources)

    def each(
        self,
        callback: Callable[[Resource], Any],
        per_page: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> None:
        for resource in self.iter_resources(per_page=per_page, params=params):
            callback(resource)

    def all(self, params: dict[str, Any] | None = None, per_page: int | None = None) -> list[Resource]:
        """Fetch every page eagerly and return the resources in order."""
        return list(self.iter_resources(per_page=per_page, params=params))

    # ── lookup and counting ──────────────────────────────────────────────

    def first(self, params: dict[str, Any] | None = None) -> Resource | None:
        params = {**(params or {}), "limit": 1}
        resources = self.instantiate(self._get(params=params))
        return resources[0] if resources else None

    def find(self, resource_id: Any) -> Resource:
        """Return the resource whose identity is *resource_id*.

        Raises :class:`NotFoundError` when the API has no such resource.
        """
        resource = self.first(params={self.id_field: resource_id})
        if resource is None:
            raise NotFoundError(self.resource_name, self.id_field, resource_id)
        return resource

    def size(self, params: dict[str, Any] | None = None) -> int:
        """Return the server-side count of resources matching *params*.

        Sorting is dropped and relations are not loaded; the cache is left
        as it is.
        """
        params = {**(params or {}), "count": 1, "load_relations": None}
        params.pop("sort", None)
        count = extract_count(self._get(params=params))
        log.debug("collection.count", collection=self.name, count=count)
        return count

    length = size

    # ── writes ───────────────────────────────────────────────────────────

    def create(self, attributes: dict[str, Any] | None = None) -> Resource | None:
        envelope = self.client.create(self.collection_path, dict(attributes or {}))
        return self._single(envelope)

    def update(self, resource_id: Any, attributes: dict[str, Any] | None = None) -> Resource | None:
        envelope = self.client.replace(self.resource_path(resource_id), dict(attributes or {}))
        return self._single(envelope)

    def destroy(self, resource_id: Any) -> Resource | None:
        envelope = self.client.remove(self.resource_path(resource_id))
        return self._single(envelope)

    # ── instantiation ────────────────────────────────────────────────────

    def instantiate(self, envelope: Envelope) -> list[Resource]:
        """Turn a decoded response into resources and cache them by identity.

        Returns only the resources of this response. ``next_page_url`` is
        reset and then taken from the response's pagination metadata; a
        response that is not a mapping yields no resources.
        """
        self.next_page_url = None
        if not isinstance(envelope, dict):
            return []

        self.next_page_url = page_attributes(envelope).next

        factory = self.resource_type.factory
        built = [factory(self, record) for record in extract_records(envelope, self.name)]
        with self._lock:
            for resource in built:
                self.resources[resource.id] = resource
        return built

    def _single(self, envelope: Envelope) -> Resource | None:
        resources = self.instantiate(envelope)
        return resources[0] if resources else None

    def _scoping_params(self) -> dict[str, Any]:
        return scoping_params(self.context, self.resource_type.declares)

    def _get(self, *, params: dict[str, Any] | None = None, url: str | None = None) -> Envelope:
        if url:
            return self.client.fetch(url=url)
        merged = {
            "load_relations": self.load_relations_default,
            **self._scoping_params(),
            **(params or {}),
        }
        compact = {key: value for key, value in merged.items() if value is not None}
        return self.client.fetch(path=self.collection_path, params=compact)
