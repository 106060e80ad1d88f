"""Pytest configuration and fixtures."""
import json
import os
from unittest.mock import Mock

import pytest

from node_sdk.basenode import NodeExecutionContext
from node_sdk.config import reset_settings
from nodepacks.activecampaign import ActiveCampaignNode

# Set test environment variables
os.environ["NODEPACK_ENV"] = "test"
os.environ["NODEPACK_LOG_JSON"] = "false"


API_URL = "https://acme.api-us1.com"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test sees settings built from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def credentials():
    """Credential store as the host runtime passes it to a node."""
    return {
        "activeCampaignApi": {
            "apiUrl": API_URL + "/",
            "apiKey": "test-api-key",
        }
    }


@pytest.fixture
def make_node(credentials):
    """Build an ActiveCampaignNode with parameters and input items."""

    def _make(parameters, input_data=None, continue_on_fail=False):
        node = ActiveCampaignNode()
        node.continue_on_fail = continue_on_fail
        node.set_context(
            NodeExecutionContext(
                parameters=parameters,
                credentials=credentials,
                input_data=input_data if input_data is not None else [],
                workflow_id="wf-test",
                node_name="ActiveCampaign",
            )
        )
        return node

    return _make


@pytest.fixture
def make_response():
    """Build a fake requests.Response."""

    def _make(status_code=200, json_data=None, text=None, reason="OK", method="GET"):
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        response = Mock()
        response.status_code = status_code
        response.ok = status_code < 400
        response.text = text
        response.content = text.encode("utf-8")
        response.reason = reason
        response.url = API_URL
        response.headers = {"Content-Type": "application/json"}
        response.request = Mock(method=method)
        response.json.side_effect = lambda: json.loads(text)
        return response

    return _make
