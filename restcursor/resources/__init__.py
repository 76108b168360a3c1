"""Built-in resource types, registered on import."""

from __future__ import annotations

from restcursor.registry import register_resource
from restcursor.resource import Resource


@register_resource
class Item(Resource):
    collection_name = "Items"
    id_field = "itemID"
    fields = (
        "systemSku",
        "description",
        "categoryID",
        "manufacturerID",
        "defaultCost",
        "archived",
        "timeStamp",
    )


@register_resource
class Category(Resource):
    collection_name = "Categories"
    id_field = "categoryID"
    fields = ("name", "parentID", "fullPathName", "nodeDepth", "timeStamp")


@register_resource
class Customer(Resource):
    collection_name = "Customers"
    id_field = "customerID"
    fields = ("firstName", "lastName", "company", "customerTypeID", "archived", "timeStamp")


@register_resource
class Order(Resource):
    collection_name = "Orders"
    id_field = "orderID"
    fields = ("vendorID", "orderedDate", "receivedDate", "complete", "shopID", "timeStamp")


@register_resource
class OrderLine(Resource):
    """A line of a purchase order; ``order.collection("OrderLines")`` lists them."""

    collection_name = "OrderLines"
    id_field = "orderLineID"
    fields = ("orderID", "itemID", "quantity", "price", "numReceived", "timeStamp")


__all__ = ["Category", "Customer", "Item", "Order", "OrderLine"]
