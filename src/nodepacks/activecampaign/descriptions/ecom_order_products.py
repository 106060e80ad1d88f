"""E-commerce order products resource parameters."""

from .common import get_all_fields, operation_selector, show_for


ECOM_ORDER_PRODUCTS_OPERATIONS = [
    operation_selector(
        "ecommerceOrderProducts",
        [
            {"name": "Get All", "value": "getAll", "description": "Get data of all order products"},
            {"name": "Get by Product ID", "value": "getByProductId", "description": "Get data of a ordered product"},
            {"name": "Get by Order ID", "value": "getByOrderId", "description": "Get data of an order's products"},
        ],
        "getAll",
    ),
]


ECOM_ORDER_PRODUCTS_FIELDS = [
    # ecommerceOrderProducts:getByOrderId
    {
        "displayName": "Order ID",
        "name": "orderId",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("ecommerceOrderProducts", "getByOrderId"),
        "description": "The ID of the order whose products you'd like returned",
    },
    # ecommerceOrderProducts:getByProductId
    # "procuctId" is the parameter name saved workflows already use.
    {
        "displayName": "Product ID",
        "name": "procuctId",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("ecommerceOrderProducts", "getByProductId"),
        "description": "The ID of the product you'd like returned",
    },
    # ecommerceOrderProducts:getAll
    *get_all_fields("ecommerceOrderProducts"),
]
