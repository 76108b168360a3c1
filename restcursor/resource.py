"""A single item fetched from, or created through, a collection."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from restcursor.client import Client

if TYPE_CHECKING:
    from restcursor.collection import Collection


class Resource(Mapping[str, Any]):
    """Raw attributes of one API record plus its identity.

    Subclasses declare ``collection_name``, ``id_field`` and the ``fields``
    they expose, and are registered with
    :func:`restcursor.registry.register_resource`. Resources are only built by
    :meth:`Collection.instantiate`; callers never construct them directly.

    A resource is also a context: nested collections obtained through
    :meth:`collection` are scoped to it by its identity field.
    """

    collection_name: ClassVar[str] = ""
    resource_name: ClassVar[str] = ""
    id_field: ClassVar[str] = ""
    fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, context: Collection, attributes: Mapping[str, Any]) -> None:
        self._context = context
        self._attributes = dict(attributes)
        self._id = self._attributes.get(self.id_field)
        self._collections: dict[str, Collection] = {}

    # ── identity ───────────────────────────────────────────────────────────

    @property
    def id(self) -> Any:
        return self._id

    @property
    def identity_field_name(self) -> str:
        return self.id_field

    @property
    def identity_value(self) -> Any:
        return self._id

    # ── context ────────────────────────────────────────────────────────────

    @property
    def context(self) -> Collection:
        return self._context

    @property
    def base_path(self) -> str:
        # Nested collections live beside their parent, scoped by params.
        return self._context.context.base_path

    @property
    def client(self) -> Client:
        return self._context.client

    def collection(self, name: str) -> Collection:
        """Return the nested collection *name* owned by this resource."""
        from restcursor.collection import Collection

        if name not in self._collections:
            self._collections[name] = Collection(self, name, per_page=self._context.per_page)
        return self._collections[name]

    # ── attributes ─────────────────────────────────────────────────────────

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name in type(self).fields or name == type(self).id_field:
            return self._attributes.get(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return type(self) is type(other) and self._attributes == other._attributes

    __hash__ = None  # type: ignore[assignment]

    def as_dict(self) -> dict[str, Any]:
        return dict(self._attributes)

    def to_json(self) -> str:
        return json.dumps(self.as_dict())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id_field}={self._id!r}>"
