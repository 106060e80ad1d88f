"""
Parameter descriptions for every ActiveCampaign resource.
"""

from .connection import CONNECTION_FIELDS, CONNECTION_OPERATIONS
from .contact import CONTACT_FIELDS, CONTACT_OPERATIONS
from .deal import DEAL_FIELDS, DEAL_OPERATIONS
from .ecom_customer import ECOM_CUSTOMER_FIELDS, ECOM_CUSTOMER_OPERATIONS
from .ecom_order import ECOM_ORDER_FIELDS, ECOM_ORDER_OPERATIONS
from .ecom_order_products import ECOM_ORDER_PRODUCTS_FIELDS, ECOM_ORDER_PRODUCTS_OPERATIONS

RESOURCE_OPTIONS = [
    {"name": "Connection", "value": "connection"},
    {"name": "Contact", "value": "contact"},
    {"name": "Deal", "value": "deal"},
    {"name": "E-commerce Customer", "value": "ecommerceCustomer"},
    {"name": "E-commerce Order", "value": "ecommerceOrder"},
    {"name": "E-commerce Order Products", "value": "ecommerceOrderProducts"},
]

RESOURCE_PARAMETER = {
    "displayName": "Resource",
    "name": "resource",
    "type": "options",
    "options": RESOURCE_OPTIONS,
    "default": "contact",
    "description": "The resource to operate on",
}

ALL_PARAMETERS = [
    RESOURCE_PARAMETER,
    *CONTACT_OPERATIONS,
    *CONTACT_FIELDS,
    *DEAL_OPERATIONS,
    *DEAL_FIELDS,
    *CONNECTION_OPERATIONS,
    *CONNECTION_FIELDS,
    *ECOM_ORDER_OPERATIONS,
    *ECOM_ORDER_FIELDS,
    *ECOM_CUSTOMER_OPERATIONS,
    *ECOM_CUSTOMER_FIELDS,
    *ECOM_ORDER_PRODUCTS_OPERATIONS,
    *ECOM_ORDER_PRODUCTS_FIELDS,
]

__all__ = ["ALL_PARAMETERS", "RESOURCE_OPTIONS", "RESOURCE_PARAMETER"]
