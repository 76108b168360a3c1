"""Resource type registry: map collection names to resource classes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from restcursor.errors import UnknownResourceError

if TYPE_CHECKING:
    from restcursor.resource import Resource

ResourceT = TypeVar("ResourceT", bound="type[Resource]")


@dataclass(frozen=True)
class ResourceType:
    """Everything a collection needs to know about the items it holds."""

    name: str  # plural, e.g. "Items"; used for paths and envelope keys
    singular: str
    factory: Callable[..., Resource]
    id_field: str
    fields: frozenset[str]

    def declares(self, field_name: str) -> bool:
        return field_name in self.fields


RESOURCE_REGISTRY: dict[str, ResourceType] = {}


def singularize(name: str) -> str:
    """Derive a singular resource name from a plural collection name.

    Handles the regular English endings used by API collection names::

        Categories -> Category, Addresses -> Address, Items -> Item
    """
    if name.endswith("ies") and len(name) > 3:
        return name[:-3] + "y"
    if name.endswith(("sses", "xes", "ches", "shes")):
        return name[:-2]
    if name.endswith("s") and not name.endswith("ss"):
        return name[:-1]
    return name


def register_resource(cls: ResourceT) -> ResourceT:
    """Class decorator recording a :class:`Resource` subclass by collection name.

    The class must define ``collection_name`` and ``id_field``; ``resource_name``
    defaults to the singular of ``collection_name``. Registering a name twice
    replaces the earlier entry.
    """
    name = cls.collection_name
    if not name:
        raise ValueError(f"{cls.__name__} does not define collection_name")
    if not cls.id_field:
        raise ValueError(f"{cls.__name__} does not define id_field")
    if not cls.resource_name:
        cls.resource_name = singularize(name)

    RESOURCE_REGISTRY[name] = ResourceType(
        name=name,
        singular=cls.resource_name,
        factory=cls,
        id_field=cls.id_field,
        fields=frozenset(cls.fields) | {cls.id_field},
    )
    return cls


def resource_type(name: str) -> ResourceType:
    """Look up a registered resource type by collection name.

    Raises :class:`UnknownResourceError` if nothing is registered under *name*.
    """
    try:
        return RESOURCE_REGISTRY[name]
    except KeyError:
        raise UnknownResourceError(name) from None
