"""Tests for ActiveCampaignNode execution."""
from unittest.mock import patch

import pytest

from node_sdk.basenode import NodeOperationError
from node_sdk.http import HttpApiError
from nodepacks.activecampaign import ActiveCampaignNode


class TestNodeDefinition:
    """Test static node metadata."""

    def test_identity(self):
        assert ActiveCampaignNode.type == "n8n-nodes-base.activeCampaign"
        assert ActiveCampaignNode.description["displayName"] == "ActiveCampaign"
        assert ActiveCampaignNode.properties["credentials"] == [
            {"name": "activeCampaignApi", "required": True}
        ]

    def test_parameters_validate(self):
        """Every declared parameter passes NodeParameter validation."""
        parameters = ActiveCampaignNode.validate_properties()
        names = {p.name for p in parameters}

        assert {"resource", "operation", "returnAll", "limit", "procuctId"} <= names

    def test_resource_selector_lists_all_resources(self):
        resource = next(p for p in ActiveCampaignNode.properties["parameters"] if p["name"] == "resource")
        values = {option["value"] for option in resource["options"]}

        assert values == {
            "contact", "deal", "connection",
            "ecommerceOrder", "ecommerceCustomer", "ecommerceOrderProducts",
        }

    def test_get_definition(self):
        definition = ActiveCampaignNode.get_definition()

        assert definition["type"] == "n8n-nodes-base.activeCampaign"
        assert definition["version"] == 1
        assert definition["properties"] is ActiveCampaignNode.properties

    def test_declared_defaults(self):
        assert ActiveCampaignNode.get_parameter_default("limit") == 100
        assert ActiveCampaignNode.get_parameter_default("returnAll") is False
        assert ActiveCampaignNode.get_parameter_default("additionalFields.firstName") is None

    def test_defaults_follow_selected_resource(self):
        """Same-named parameters resolve to the declaration shown for the selection."""
        default = ActiveCampaignNode.get_parameter_default

        assert default("operation") == "create"
        assert default("operation", {"resource": "ecommerceOrderProducts"}) == "getAll"
        assert default("connectionid", {"resource": "ecommerceOrder", "operation": "create"}) == 0
        assert default("connectionid", {"resource": "ecommerceCustomer", "operation": "create"}) == ""
        assert default("connectionid", {"resource": "ecommerceCustomer"}) == ""


class TestParameters:
    """Test parameter lookup through the execution context."""

    def test_dot_notation_and_list_indexes(self, make_node):
        node = make_node({
            "additionalFields": {"firstName": "Ada"},
            "orderProducts": [{"name": "Mug"}],
        })

        assert node.get_node_parameter("additionalFields.firstName") == "Ada"
        assert node.get_node_parameter("orderProducts.0.name") == "Mug"
        assert node.get_node_parameter("orderProducts.3.name") is None
        assert node.get_node_parameter("additionalFields.lastName", 0, "") == ""

    def test_falls_back_to_declared_default(self, make_node):
        node = make_node({})

        assert node.get_node_parameter("limit") == 100
        assert node.get_node_parameter("limit", 0, 5) == 5
        assert node.get_node_parameter("notDeclared") is None

    def test_declared_default_matches_selected_resource(self, make_node):
        products = make_node({"resource": "ecommerceOrderProducts"})
        customer = make_node({"resource": "ecommerceCustomer", "operation": "create"})

        assert products.get_node_parameter("operation") == "getAll"
        assert customer.get_node_parameter("connectionid") == ""

    def test_input_data(self, make_node):
        node = make_node({}, input_data=[{"json": {"a": 1}}])

        assert node.get_input_data() == [{"json": {"a": 1}}]
        assert ActiveCampaignNode().get_input_data() == []


class TestExecute:
    """Test per-item execution and output flattening."""

    @patch("node_sdk.http.requests.request")
    def test_single_response_without_input(self, mock_request, make_node, make_response):
        mock_request.return_value = make_response(200, {"contact": {"id": "1", "email": "a@b.c"}})
        node = make_node({"resource": "contact", "operation": "get", "contactId": 1})

        result = node.execute()

        assert result == [[
            {"json": {"contact": {"id": "1", "email": "a@b.c"}}, "pairedItem": {"item": 0}}
        ]]
        assert mock_request.call_count == 1

    @patch("node_sdk.http.requests.request")
    def test_list_response_is_flattened(self, mock_request, make_node, make_response):
        mock_request.return_value = make_response(
            200, {"contacts": [{"id": "1"}, {"id": "2"}], "meta": {"total": "2"}}
        )
        node = make_node({"resource": "contact", "operation": "getAll", "limit": 2})

        result = node.execute()

        assert result == [[
            {"json": {"id": "1"}, "pairedItem": {"item": 0}},
            {"json": {"id": "2"}, "pairedItem": {"item": 0}},
        ]]
        assert mock_request.call_args.kwargs["params"] == {"limit": 2}

    @patch("node_sdk.http.requests.request")
    def test_one_call_per_input_item(self, mock_request, make_node, make_response):
        mock_request.side_effect = [
            make_response(200, {"deal": {"id": "7"}}),
            make_response(200, {"deal": {"id": "8"}}),
        ]
        node = make_node(
            {"resource": "deal", "operation": "get", "dealId": 7},
            input_data=[{"json": {"a": 1}}, {"json": {"a": 2}}],
        )

        result = node.execute()

        assert [item["pairedItem"] for item in result[0]] == [{"item": 0}, {"item": 1}]
        assert mock_request.call_count == 2

    @patch("node_sdk.http.requests.request")
    def test_empty_delete_reply_becomes_empty_item(self, mock_request, make_node, make_response):
        mock_request.return_value = make_response(200, text="", method="DELETE")
        node = make_node({"resource": "connection", "operation": "delete", "connectionId": 3})

        assert node.execute() == [[{"json": {}, "pairedItem": {"item": 0}}]]

    @patch("nodepacks.activecampaign.node.api_request")
    @patch("nodepacks.activecampaign.node.api_request_all_items")
    def test_return_all_uses_paginating_helper(self, mock_all_items, mock_request, make_node):
        mock_all_items.return_value = [{"id": "1"}]
        node = make_node({"resource": "deal", "operation": "getAll", "returnAll": True})

        result = node.execute()

        mock_all_items.assert_called_once_with(node, "GET", "/api/3/deals", {}, {}, "deals")
        mock_request.assert_not_called()
        assert result == [[{"json": {"id": "1"}, "pairedItem": {"item": 0}}]]

    @patch("nodepacks.activecampaign.node.api_request")
    def test_single_request_helper_arguments(self, mock_request, make_node):
        mock_request.return_value = {"id": "5"}
        node = make_node({
            "resource": "ecommerceCustomer",
            "operation": "create",
            "connectionid": "1",
            "externalid": "c-1",
            "email": "a@b.c",
            "additionalFields": {"acceptsMarketing": True},
        })

        node.execute()

        mock_request.assert_called_once_with(
            node,
            "POST",
            "/api/3/ecomCustomers",
            {"ecomCustomer": {"connectionid": "1", "externalid": "c-1", "email": "a@b.c", "acceptsMarketing": "1"}},
            {},
            None,
        )

    @patch("nodepacks.activecampaign.node.api_request")
    def test_operation_defaults_to_resource_selector(self, mock_request, make_node):
        mock_request.return_value = []
        node = make_node({"resource": "ecommerceOrderProducts"})

        node.execute()

        mock_request.assert_called_once_with(
            node, "GET", "/api/3/ecomOrderProducts", {}, {"limit": 100}, "ecomOrderProducts"
        )

    @patch("nodepacks.activecampaign.node.api_request")
    def test_resource_is_read_per_item(self, mock_request, make_node):
        mock_request.return_value = {}
        node = make_node(
            {"resource": "contact", "operation": "get", "contactId": 1},
            input_data=[{"json": {}}, {"json": {}}],
        )

        node.execute()

        endpoints = [c.args[2] for c in mock_request.call_args_list]
        assert endpoints == ["/api/3/contacts/1", "/api/3/contacts/1"]


class TestErrors:
    """Test failure handling."""

    @patch("node_sdk.http.requests.request")
    def test_api_error_propagates(self, mock_request, make_node, make_response):
        mock_request.return_value = make_response(500, {"message": "boom"}, reason="Server Error")
        node = make_node({"resource": "contact", "operation": "get", "contactId": 1})

        with pytest.raises(HttpApiError):
            node.execute()

    @patch("node_sdk.http.requests.request")
    def test_continue_on_fail_reports_error_item(self, mock_request, make_node, make_response):
        mock_request.side_effect = [
            make_response(500, {"message": "boom"}, reason="Server Error"),
            make_response(200, {"contact": {"id": "2"}}),
        ]
        node = make_node(
            {"resource": "contact", "operation": "get", "contactId": 1},
            input_data=[{"json": {}}, {"json": {}}],
            continue_on_fail=True,
        )

        result = node.execute()

        assert result == [[
            {"json": {"error": "HTTP 500: Server Error"}, "pairedItem": {"item": 0}},
            {"json": {"contact": {"id": "2"}}, "pairedItem": {"item": 1}},
        ]]

    @patch("node_sdk.http.requests.request")
    def test_continue_on_fail_covers_non_json_reply(self, mock_request, make_node, make_response):
        mock_request.return_value = make_response(200, text="<html>maintenance</html>")
        node = make_node(
            {"resource": "contact", "operation": "get", "contactId": 1},
            continue_on_fail=True,
        )

        result = node.execute()

        assert len(result[0]) == 1
        assert result[0][0]["json"]["error"].startswith("Invalid JSON response")
        assert result[0][0]["pairedItem"] == {"item": 0}

    @patch("node_sdk.http.requests.request")
    def test_unknown_resource_raises_even_when_continuing(self, mock_request, make_node):
        node = make_node({"resource": "ticket", "operation": "get"}, continue_on_fail=True)

        with pytest.raises(NodeOperationError, match='The resource "ticket" is not known!'):
            node.execute()
        mock_request.assert_not_called()

    def test_unknown_operation_raises(self, make_node):
        node = make_node({"resource": "deal", "operation": "archive"})

        with pytest.raises(NodeOperationError, match='The operation "archive" is not known'):
            node.execute()

    def test_execute_needs_context(self):
        with pytest.raises(NodeOperationError, match="No context set"):
            ActiveCampaignNode().execute()
