"""restcursor: collections over cursor-paginated REST APIs with an identity cache."""

from restcursor import resources
from restcursor.account import Account
from restcursor.client import Client, HttpClient
from restcursor.collection import PER_PAGE, Collection
from restcursor.context import Context, IdentifiedContext
from restcursor.core.config import Settings
from restcursor.errors import ApiError, NotFoundError, RestCursorError, UnknownResourceError
from restcursor.registry import ResourceType, register_resource, resource_type
from restcursor.resource import Resource

__all__ = [
    "PER_PAGE",
    "Account",
    "ApiError",
    "Client",
    "Collection",
    "Context",
    "HttpClient",
    "IdentifiedContext",
    "NotFoundError",
    "Resource",
    "ResourceType",
    "RestCursorError",
    "Settings",
    "UnknownResourceError",
    "register_resource",
    "resource_type",
    "resources",
]
