"""E-commerce customer resource parameters."""

from .common import get_all_fields, operation_selector, show_for


ACCEPTS_MARKETING = {
    "displayName": "Customer accepts marketing",
    "name": "acceptsMarketing",
    "type": "boolean",
    "default": False,
    "description": "Whether the customer has opted in to marketing communications",
}


ECOM_CUSTOMER_OPERATIONS = [
    operation_selector(
        "ecommerceCustomer",
        [
            {"name": "Create", "value": "create", "description": "Create a ecommerce customer"},
            {"name": "Delete", "value": "delete", "description": "Delete a ecommerce customer"},
            {"name": "Get", "value": "get", "description": "Get data of a ecommerce customer"},
            {"name": "Get All", "value": "getAll", "description": "Get data of all ecommerce customer"},
            {"name": "Update", "value": "update", "description": "Update a ecommerce customer"},
        ],
        "create",
    ),
]


ECOM_CUSTOMER_FIELDS = [
    # ecommerceCustomer:create
    {
        "displayName": "Service ID",
        "name": "connectionid",
        "type": "string",
        "default": "",
        "required": True,
        "displayOptions": show_for("ecommerceCustomer", "create"),
        "description": "The id of the connection object for the service where the customer originates",
    },
    {
        "displayName": "Customer ID",
        "name": "externalid",
        "type": "string",
        "default": "",
        "required": True,
        "displayOptions": show_for("ecommerceCustomer", "create"),
        "description": "The id of the customer in the external service",
    },
    {
        "displayName": "Customer Email",
        "name": "email",
        "type": "string",
        "default": "",
        "required": True,
        "displayOptions": show_for("ecommerceCustomer", "create"),
        "description": "The email address of the customer",
    },
    {
        "displayName": "Additional Fields",
        "name": "additionalFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("ecommerceCustomer", "create"),
        "options": [ACCEPTS_MARKETING],
    },
    # ecommerceCustomer:delete, ecommerceCustomer:get, ecommerceCustomer:update
    {
        "displayName": "Customer ID",
        "name": "ecommerceCustomerId",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("ecommerceCustomer", "delete", "get", "update"),
        "description": "ID of the e-commerce customer",
    },
    # ecommerceCustomer:update
    {
        "displayName": "Update Fields",
        "name": "updateFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("ecommerceCustomer", "update"),
        "options": [
            {
                "displayName": "Service ID",
                "name": "connectionid",
                "type": "string",
                "default": "",
                "description": "The id of the connection object for the service where the customer originates",
            },
            {
                "displayName": "Customer ID",
                "name": "externalid",
                "type": "string",
                "default": "",
                "description": "The id of the customer in the external service",
            },
            {
                "displayName": "Customer Email",
                "name": "email",
                "type": "string",
                "default": "",
                "description": "The email address of the customer",
            },
            ACCEPTS_MARKETING,
        ],
    },
    # ecommerceCustomer:getAll
    *get_all_fields("ecommerceCustomer"),
]
