"""
Translate a (resource, operation) pair and its form parameters into the
request the ActiveCampaign API expects.

Nothing in this module performs I/O: ``build_request`` only reads node
parameters and returns an ``ApiRequestSpec`` for the node to send.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from node_sdk.basenode import BaseNode, NodeOperationError

from .fields import add_additional_fields, add_if_not_empty, coerce_accepts_marketing


@dataclass
class ApiRequestSpec:
    """A single ActiveCampaign call, ready for one of the transport helpers."""

    method: str
    endpoint: str
    body: Dict[str, Any] = field(default_factory=dict)
    qs: Dict[str, Any] = field(default_factory=dict)
    data_key: Optional[str] = None
    return_all: bool = False


def build_request(node: BaseNode, resource: str, operation: str, item_index: int) -> ApiRequestSpec:
    """
    Build the request for one input item.

    Args:
        node: Node whose parameters describe the request
        resource: Selected resource, e.g. "contact"
        operation: Selected operation, e.g. "getAll"
        item_index: Index of the input item the parameters are read for

    Raises:
        NodeOperationError: If the resource or operation is not known
    """
    if resource == "contact":
        return _build_contact(node, operation, item_index)
    elif resource == "deal":
        return _build_deal(node, operation, item_index)
    elif resource == "connection":
        return _build_connection(node, operation, item_index)
    elif resource == "ecommerceOrder":
        return _build_ecommerce_order(node, operation, item_index)
    elif resource == "ecommerceCustomer":
        return _build_ecommerce_customer(node, operation, item_index)
    elif resource == "ecommerceOrderProducts":
        return _build_ecommerce_order_products(node, operation, item_index)
    else:
        raise NodeOperationError(
            f'The resource "{resource}" is not known!', node=node, item_index=item_index
        )


def _unknown_operation(node: BaseNode, operation: str, item_index: int) -> NodeOperationError:
    return NodeOperationError(
        f'The operation "{operation}" is not known', node=node, item_index=item_index
    )


def _get_all(node: BaseNode, endpoint: str, data_key: str, item_index: int) -> ApiRequestSpec:
    """GET a collection, either every page or a single page of ``limit`` items."""
    return_all = bool(node.get_node_parameter("returnAll", item_index))
    qs: Dict[str, Any] = {}
    if not return_all:
        qs["limit"] = node.get_node_parameter("limit", item_index)
    return ApiRequestSpec("GET", endpoint, qs=qs, data_key=data_key, return_all=return_all)


def _build_contact(node: BaseNode, operation: str, i: int) -> ApiRequestSpec:
    if operation == "create":
        update_if_exists = node.get_node_parameter("updateIfExists", i)
        contact = {"email": node.get_node_parameter("email", i)}
        add_additional_fields(contact, node.get_node_parameter("additionalFields", i))
        return ApiRequestSpec(
            "POST",
            "/api/3/contact/sync" if update_if_exists else "/api/3/contacts",
            body={"contact": contact},
            data_key="contact",
        )

    elif operation == "delete":
        contact_id = node.get_node_parameter("contactId", i)
        return ApiRequestSpec("DELETE", f"/api/3/contacts/{contact_id}")

    elif operation == "get":
        contact_id = node.get_node_parameter("contactId", i)
        return ApiRequestSpec("GET", f"/api/3/contacts/{contact_id}")

    elif operation == "getAll":
        return _get_all(node, "/api/3/contacts", "contacts", i)

    elif operation == "update":
        contact_id = node.get_node_parameter("contactId", i)
        contact = add_additional_fields({}, node.get_node_parameter("updateFields", i))
        return ApiRequestSpec(
            "PUT", f"/api/3/contacts/{contact_id}", body={"contact": contact}, data_key="contact"
        )

    raise _unknown_operation(node, operation, i)


def _build_deal(node: BaseNode, operation: str, i: int) -> ApiRequestSpec:
    if operation == "create":
        deal = {
            "title": node.get_node_parameter("title", i),
            "contact": node.get_node_parameter("contact", i),
            "value": node.get_node_parameter("value", i),
            "currency": node.get_node_parameter("currency", i),
        }
        add_if_not_empty(
            deal,
            group=node.get_node_parameter("group", i),
            owner=node.get_node_parameter("owner", i),
            stage=node.get_node_parameter("stage", i),
        )
        add_additional_fields(deal, node.get_node_parameter("additionalFields", i))
        return ApiRequestSpec("POST", "/api/3/deals", body={"deal": deal})

    elif operation == "update":
        deal_id = node.get_node_parameter("dealId", i)
        deal = add_additional_fields({}, node.get_node_parameter("updateFields", i))
        return ApiRequestSpec("PUT", f"/api/3/deals/{deal_id}", body={"deal": deal})

    elif operation == "delete":
        deal_id = node.get_node_parameter("dealId", i)
        return ApiRequestSpec("DELETE", f"/api/3/deals/{deal_id}")

    elif operation == "get":
        deal_id = node.get_node_parameter("dealId", i)
        return ApiRequestSpec("GET", f"/api/3/deals/{deal_id}")

    elif operation == "getAll":
        return _get_all(node, "/api/3/deals", "deals", i)

    elif operation == "createNote":
        deal_id = node.get_node_parameter("dealId", i)
        note = {"note": node.get_node_parameter("dealNote", i)}
        return ApiRequestSpec("POST", f"/api/3/deals/{deal_id}/notes", body={"note": note})

    elif operation == "updateNote":
        deal_id = node.get_node_parameter("dealId", i)
        note_id = node.get_node_parameter("dealNoteId", i)
        note = {"note": node.get_node_parameter("dealNote", i)}
        return ApiRequestSpec(
            "PUT", f"/api/3/deals/{deal_id}/notes/{note_id}", body={"note": note}
        )

    raise _unknown_operation(node, operation, i)


def _build_connection(node: BaseNode, operation: str, i: int) -> ApiRequestSpec:
    if operation == "create":
        connection = {
            name: node.get_node_parameter(name, i)
            for name in ("service", "externalid", "name", "logoUrl", "linkUrl")
        }
        return ApiRequestSpec("POST", "/api/3/connections", body={"connection": connection})

    elif operation == "update":
        connection_id = node.get_node_parameter("connectionId", i)
        connection = add_additional_fields({}, node.get_node_parameter("updateFields", i))
        return ApiRequestSpec(
            "PUT", f"/api/3/connections/{connection_id}", body={"connection": connection}
        )

    elif operation == "delete":
        connection_id = node.get_node_parameter("connectionId", i)
        return ApiRequestSpec("DELETE", f"/api/3/connections/{connection_id}")

    elif operation == "get":
        connection_id = node.get_node_parameter("connectionId", i)
        return ApiRequestSpec("GET", f"/api/3/connections/{connection_id}")

    elif operation == "getAll":
        return _get_all(node, "/api/3/connections", "connections", i)

    raise _unknown_operation(node, operation, i)


def _build_ecommerce_order(node: BaseNode, operation: str, i: int) -> ApiRequestSpec:
    if operation == "create":
        order = {
            "source": node.get_node_parameter("source", i),
            "email": node.get_node_parameter("email", i),
            "totalPrice": node.get_node_parameter("totalPrice", i),
            "currency": str(node.get_node_parameter("currency", i)).upper(),
            "externalCreatedDate": node.get_node_parameter("externalCreatedDate", i),
            "connectionid": node.get_node_parameter("connectionid", i),
            "customerid": node.get_node_parameter("customerid", i),
        }
        add_if_not_empty(
            order,
            externalid=node.get_node_parameter("externalid", i),
            externalcheckoutid=node.get_node_parameter("externalcheckoutid", i),
            abandonedDate=node.get_node_parameter("abandonedDate", i),
        )
        order["orderProducts"] = node.get_node_parameter("orderProducts", i)
        add_additional_fields(order, node.get_node_parameter("additionalFields", i))
        return ApiRequestSpec("POST", "/api/3/ecomOrders", body={"ecomOrder": order})

    elif operation == "update":
        order_id = node.get_node_parameter("orderId", i)
        order = add_additional_fields({}, node.get_node_parameter("updateFields", i))
        return ApiRequestSpec("PUT", f"/api/3/ecomOrders/{order_id}", body={"ecomOrder": order})

    elif operation == "delete":
        order_id = node.get_node_parameter("orderId", i)
        return ApiRequestSpec("DELETE", f"/api/3/ecomOrders/{order_id}")

    elif operation == "get":
        order_id = node.get_node_parameter("orderId", i)
        return ApiRequestSpec("GET", f"/api/3/ecomOrders/{order_id}")

    elif operation == "getAll":
        return _get_all(node, "/api/3/ecomOrders", "ecomOrders", i)

    raise _unknown_operation(node, operation, i)


def _build_ecommerce_customer(node: BaseNode, operation: str, i: int) -> ApiRequestSpec:
    if operation == "create":
        customer = {
            "connectionid": node.get_node_parameter("connectionid", i),
            "externalid": node.get_node_parameter("externalid", i),
            "email": node.get_node_parameter("email", i),
        }
        additional_fields = coerce_accepts_marketing(node.get_node_parameter("additionalFields", i))
        add_additional_fields(customer, additional_fields)
        return ApiRequestSpec("POST", "/api/3/ecomCustomers", body={"ecomCustomer": customer})

    elif operation == "update":
        customer_id = node.get_node_parameter("ecommerceCustomerId", i)
        update_fields = coerce_accepts_marketing(node.get_node_parameter("updateFields", i))
        customer = add_additional_fields({}, update_fields)
        return ApiRequestSpec(
            "PUT", f"/api/3/ecomCustomers/{customer_id}", body={"ecomCustomer": customer}
        )

    elif operation == "delete":
        customer_id = node.get_node_parameter("ecommerceCustomerId", i)
        return ApiRequestSpec("DELETE", f"/api/3/ecomCustomers/{customer_id}")

    elif operation == "get":
        customer_id = node.get_node_parameter("ecommerceCustomerId", i)
        return ApiRequestSpec("GET", f"/api/3/ecomCustomers/{customer_id}")

    elif operation == "getAll":
        return _get_all(node, "/api/3/ecomCustomers", "ecomCustomers", i)

    raise _unknown_operation(node, operation, i)


def _build_ecommerce_order_products(node: BaseNode, operation: str, i: int) -> ApiRequestSpec:
    if operation == "getByProductId":
        product_id = node.get_node_parameter("procuctId", i)
        return ApiRequestSpec("GET", f"/api/3/ecomOrderProducts/{product_id}")

    elif operation == "getByOrderId":
        order_id = node.get_node_parameter("orderId", i)
        return ApiRequestSpec("GET", f"/api/3/ecomOrders/{order_id}/orderProducts")

    elif operation == "getAll":
        return _get_all(node, "/api/3/ecomOrderProducts", "ecomOrderProducts", i)

    raise _unknown_operation(node, operation, i)
