"""Interfaces for objects that can own a collection."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from restcursor.client import Client


@runtime_checkable
class Context(Protocol):
    """Owner of a collection: the account at the root or a parent resource."""

    @property
    def base_path(self) -> str: ...

    @property
    def client(self) -> Client: ...


@runtime_checkable
class IdentifiedContext(Protocol):
    """A context whose identity scopes the collections it owns.

    A collection whose resource type declares ``identity_field_name`` sends
    ``{identity_field_name: identity_value}`` with every first-page request,
    so ``order.collection("OrderLines")`` only lists that order's lines.
    """

    @property
    def identity_field_name(self) -> str: ...

    @property
    def identity_value(self) -> Any: ...


def scoping_params(context: object, declares: Any) -> dict[str, Any]:
    """Return the params that scope a collection to *context*.

    *declares* is a predicate telling whether the target resource type has a
    given field. Empty when the context has no identity or the resource type
    does not know the field.
    """
    if not isinstance(context, IdentifiedContext):
        return {}
    field_name = context.identity_field_name
    if not field_name or not declares(field_name):
        return {}
    return {field_name: context.identity_value}
