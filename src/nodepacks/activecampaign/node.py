"""
ActiveCampaign Node - Create and work with ActiveCampaign data.

Each input item selects a resource/operation pair; the pair is translated
into an ActiveCampaign API v3 request and the response is flattened into
output items.

SYNC-CELERY SAFE: Requests go through HttpClient with a timeout.
"""

from typing import Any, Dict, List

from node_sdk.basenode import BaseNode, NodeApiError, NodeExecutionData
from node_sdk.http import HttpApiError, NodeTimeoutError
from node_sdk.observability import get_logger

from .descriptions import ALL_PARAMETERS
from .operations import build_request
from .transport import CREDENTIAL_NAME, api_request, api_request_all_items


class ActiveCampaignNode(BaseNode):
    """
    ActiveCampaign Node - contacts, deals, connections and e-commerce data.
    """

    type = "n8n-nodes-base.activeCampaign"
    version = 1

    description = {
        "displayName": "ActiveCampaign",
        "name": "activeCampaign",
        "icon": "file:activeCampaign.png",
        "group": ["transform"],
        "subtitle": '={{$parameter["operation"] + ": " + $parameter["resource"]}}',
        "description": "Create and edit data in ActiveCampaign",
        "version": 1,
        "inputs": ["main"],
        "outputs": ["main"],
    }

    properties = {
        "parameters": ALL_PARAMETERS,
        "credentials": [
            {"name": CREDENTIAL_NAME, "required": True},
        ],
    }

    def execute(self) -> List[List[NodeExecutionData]]:
        """Run the selected operation once per input item."""
        items = self.get_input_data() or [{"json": {}}]
        results: List[NodeExecutionData] = []

        context = self.context
        log = get_logger(
            __name__,
            workflow_id=context.workflow_id,
            node_name=context.node_name,
            node_type=self.type,
        )

        for i in range(len(items)):
            resource = self.get_node_parameter("resource", i)
            operation = self.get_node_parameter("operation", i)

            request = build_request(self, resource, operation, i)
            helper = api_request_all_items if request.return_all else api_request

            log.debug(
                "ActiveCampaign %s:%s -> %s %s",
                resource, operation, request.method, request.endpoint,
                extra={"item_index": i},
            )

            try:
                response_data = helper(
                    self,
                    request.method,
                    request.endpoint,
                    request.body,
                    request.qs,
                    request.data_key,
                )
            except (NodeApiError, HttpApiError, NodeTimeoutError) as e:
                if not self.continue_on_fail:
                    raise
                log.warning("ActiveCampaign item failed: %s", e, extra={"item_index": i})
                results.append({"json": {"error": str(e)}, "pairedItem": {"item": i}})
                continue

            results.extend(
                {"json": entry, "pairedItem": {"item": i}}
                for entry in _as_output_entries(response_data)
            )

        return [results]


def _as_output_entries(response_data: Any) -> List[Dict[str, Any]]:
    """Flatten list responses; wrap anything else as a single entry."""
    if isinstance(response_data, list):
        return [entry if isinstance(entry, dict) else {"value": entry} for entry in response_data]
    if response_data is None:
        return [{}]
    if not isinstance(response_data, dict):
        return [{"value": response_data}]
    return [response_data]
