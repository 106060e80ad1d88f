"""E-commerce order resource parameters."""

from .common import CURRENCIES, get_all_fields, operation_selector, show_for


ORDER_SOURCES = [
    {"name": "Real-time", "value": 1},
    {"name": "Historical", "value": 0},
]


ORDER_PRODUCT_FIELDS = [
    {
        "displayName": "Name",
        "name": "name",
        "type": "string",
        "default": "",
        "description": "The name of the product",
    },
    {
        "displayName": "Price",
        "name": "price",
        "type": "number",
        "default": 0,
        "typeOptions": {"minValue": 0},
        "description": "The price of the product, in cents. (i.e. $456.78 => 45678). Must be greater than or equal to zero.",
    },
    {
        "displayName": "Product Quantity",
        "name": "quantity",
        "type": "number",
        "default": 0,
        "typeOptions": {"minValue": 0},
        "description": "The quantity ordered",
    },
    {
        "displayName": "Product external ID",
        "name": "externalid",
        "type": "string",
        "default": "",
        "description": "The ID of the product in the external service",
    },
    {
        "displayName": "Product Category",
        "name": "category",
        "type": "string",
        "default": "",
        "description": "The category of the product",
    },
    {
        "displayName": "SKU",
        "name": "sku",
        "type": "string",
        "default": "",
        "description": "The SKU for the product",
    },
    {
        "displayName": "Description",
        "name": "description",
        "type": "string",
        "default": "",
        "description": "The description of the product",
    },
    {
        "displayName": "Image URL",
        "name": "imageUrl",
        "type": "string",
        "default": "",
        "description": "An Image URL that displays an image of the product",
    },
    {
        "displayName": "Product URL",
        "name": "productUrl",
        "type": "string",
        "default": "",
        "description": "A URL linking to the product in your store",
    },
]


def _order_products_collection(required: bool):
    return {
        "displayName": "Products",
        "name": "orderProducts",
        "type": "collection",
        "placeholder": "Add product",
        "default": {},
        "required": required,
        "typeOptions": {"multipleValues": True},
        "options": ORDER_PRODUCT_FIELDS,
        "description": "All ordered products",
    }


def _optional_order_fields():
    return [
        {
            "displayName": "Shipping Amount",
            "name": "shippingAmount",
            "type": "number",
            "default": 0,
            "description": "The total shipping amount for the order in cents",
        },
        {
            "displayName": "Tax Amount",
            "name": "taxAmount",
            "type": "number",
            "default": 0,
            "description": "The total tax amount for the order in cents",
        },
        {
            "displayName": "Discount Amount",
            "name": "discountAmount",
            "type": "number",
            "default": 0,
            "description": "The total discount amount for the order in cents",
        },
        {
            "displayName": "Order URL",
            "name": "orderUrl",
            "type": "string",
            "default": "",
            "description": "The URL for the order in the external service",
        },
        {
            "displayName": "External updated date",
            "name": "externalupdatedDate",
            "type": "dateTime",
            "default": "",
            "description": "The date the order was updated",
        },
        {
            "displayName": "Shipping Method",
            "name": "shippingMethod",
            "type": "string",
            "default": "",
            "description": "The shipping method of the order",
        },
        {
            "displayName": "Order Number",
            "name": "orderNumber",
            "type": "string",
            "default": "",
            "description": "The order number. This can be different than the externalid.",
        },
    ]


ECOM_ORDER_OPERATIONS = [
    operation_selector(
        "ecommerceOrder",
        [
            {"name": "Create", "value": "create", "description": "Create a order"},
            {"name": "Delete", "value": "delete", "description": "Delete a order"},
            {"name": "Get", "value": "get", "description": "Get data of a order"},
            {"name": "Get All", "value": "getAll", "description": "Get data of all orders"},
            {"name": "Update", "value": "update", "description": "Update a order"},
        ],
        "create",
    ),
]


ECOM_ORDER_FIELDS = [
    # ecommerceOrder:create
    {
        "displayName": "External ID",
        "name": "externalid",
        "type": "string",
        "default": "",
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The ID of the order in the external service. ONLY REQUIRED IF EXTERNALCHECKOUTID NOT INCLUDED.",
    },
    {
        "displayName": "External checkout ID",
        "name": "externalcheckoutid",
        "type": "string",
        "default": "",
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The ID of the cart in the external service. ONLY REQUIRED IF EXTERNALID IS NOT INCLUDED.",
    },
    {
        "displayName": "Order source",
        "name": "source",
        "type": "options",
        "options": ORDER_SOURCES,
        "default": 1,
        "required": True,
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The order source code (0 - will not trigger automations, 1 - will trigger automations)",
    },
    {
        "displayName": "Customer Email",
        "name": "email",
        "type": "string",
        "default": "",
        "required": True,
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The email address of the customer who placed the order",
    },
    {
        "displayName": "Total price",
        "name": "totalPrice",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The total price of the order in cents, including tax and shipping charges. (i.e. $456.78 => 45678). Must be greater than or equal to zero.",
    },
    {
        "displayName": "Order currency",
        "name": "currency",
        "type": "options",
        "options": CURRENCIES,
        "default": "eur",
        "required": True,
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The currency of the order (3-digit ISO code, e.g., \"USD\")",
    },
    {
        "displayName": "Connection ID",
        "name": "connectionid",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The ID of the connection from which this order originated",
    },
    {
        "displayName": "Customer ID",
        "name": "customerid",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The ID of the customer associated with this order",
    },
    {
        "displayName": "Creation Date",
        "name": "externalCreatedDate",
        "type": "dateTime",
        "default": "",
        "required": True,
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The date the order was placed",
    },
    {
        "displayName": "Abandoning Date",
        "name": "abandonedDate",
        "type": "dateTime",
        "default": "",
        "displayOptions": show_for("ecommerceOrder", "create"),
        "description": "The date the cart was abandoned. REQUIRED ONLY IF INCLUDING EXTERNALCHECKOUTID.",
    },
    {
        **_order_products_collection(required=True),
        "displayOptions": show_for("ecommerceOrder", "create"),
    },
    {
        "displayName": "Additional Fields",
        "name": "additionalFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("ecommerceOrder", "create"),
        "options": _optional_order_fields(),
    },
    # ecommerceOrder:delete, ecommerceOrder:get, ecommerceOrder:update
    {
        "displayName": "Order ID",
        "name": "orderId",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("ecommerceOrder", "delete", "get", "update"),
        "description": "The ID of the e-commerce order",
    },
    # ecommerceOrder:update
    {
        "displayName": "Update Fields",
        "name": "updateFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("ecommerceOrder", "update"),
        "options": [
            {
                "displayName": "External ID",
                "name": "externalid",
                "type": "string",
                "default": "",
                "description": "The ID of the order in the external service",
            },
            {
                "displayName": "External checkout ID",
                "name": "externalcheckoutid",
                "type": "string",
                "default": "",
                "description": "The ID of the cart in the external service",
            },
            {
                "displayName": "Order source",
                "name": "source",
                "type": "options",
                "options": ORDER_SOURCES,
                "default": 1,
                "description": "The order source code (0 - will not trigger automations, 1 - will trigger automations)",
            },
            {
                "displayName": "Customer Email",
                "name": "email",
                "type": "string",
                "default": "",
                "description": "The email address of the customer who placed the order",
            },
            {
                "displayName": "Total price",
                "name": "totalPrice",
                "type": "number",
                "default": 0,
                "description": "The total price of the order in cents, including tax and shipping charges",
            },
            {
                "displayName": "Order currency",
                "name": "currency",
                "type": "options",
                "options": CURRENCIES,
                "default": "eur",
                "description": "The currency of the order (3-digit ISO code, e.g., \"USD\")",
            },
            {
                "displayName": "Connection ID",
                "name": "connectionid",
                "type": "number",
                "default": 0,
                "description": "The ID of the connection from which this order originated",
            },
            {
                "displayName": "Customer ID",
                "name": "customerid",
                "type": "number",
                "default": 0,
                "description": "The ID of the customer associated with this order",
            },
            {
                "displayName": "Abandoning Date",
                "name": "abandonedDate",
                "type": "dateTime",
                "default": "",
                "description": "The date the cart was abandoned",
            },
            _order_products_collection(required=False),
            *_optional_order_fields(),
        ],
    },
    # ecommerceOrder:getAll
    *get_all_fields("ecommerceOrder"),
]
