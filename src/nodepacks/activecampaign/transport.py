"""
Authenticated request helpers shared by every ActiveCampaign operation.

Both helpers take the same arguments so the node can pick one per item
without reshaping its request:

    api_request(node, method, endpoint, body, qs, data_key)
    api_request_all_items(node, method, endpoint, body, qs, data_key)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from node_sdk.basenode import BaseNode, NodeApiError
from node_sdk.config import get_settings
from node_sdk.http import HttpApiError, HttpClient

from .credentials import ActiveCampaignApiCredential

logger = logging.getLogger(__name__)

CREDENTIAL_NAME = ActiveCampaignApiCredential.name


def _client_for(node: BaseNode) -> HttpClient:
    credential = ActiveCampaignApiCredential(node.get_credentials(CREDENTIAL_NAME))
    return HttpClient(
        base_url=credential.get_base_url(),
        default_headers=credential.get_headers(),
        timeout=node.context.http_timeout,
    )


def api_request(
    node: BaseNode,
    method: str,
    endpoint: str,
    body: Optional[Dict[str, Any]] = None,
    qs: Optional[Dict[str, Any]] = None,
    data_key: Optional[str] = None,
) -> Any:
    """
    Make an authenticated request to the ActiveCampaign API.

    Args:
        node: Node whose context supplies the credentials
        method: HTTP method
        endpoint: Path below the account API URL, e.g. "/api/3/contacts"
        body: JSON body, only sent when not empty
        qs: Query string parameters
        data_key: Return only this key of the parsed response

    Returns:
        Parsed response, or its ``data_key`` entry

    Raises:
        NodeApiError: On an invalid credential (403) or an API-level error reply
        HttpApiError: On any other HTTP failure
    """
    client = _client_for(node)

    logger.debug("ActiveCampaign request %s %s qs=%s", method, endpoint, qs)

    response = client.request(
        method,
        endpoint,
        params=dict(qs) if qs else None,
        json=body if body else None,
    )

    try:
        response.raise_for_status()
    except HttpApiError as e:
        if e.status_code == 403:
            raise NodeApiError(
                "The ActiveCampaign credentials are not valid!",
                node=node,
                status_code=e.status_code,
                response_body=e.response_body,
            ) from e
        logger.error("ActiveCampaign request %s %s failed: %s", method, endpoint, e)
        raise

    response_data = response.json_or_empty()

    if isinstance(response_data, dict) and response_data.get("success") is False:
        raise NodeApiError(
            f"ActiveCampaign error response: {response_data.get('error')} "
            f"({response_data.get('error_info')})",
            node=node,
            status_code=response.status_code,
            response_body=response.text[:1000],
        )

    if data_key is None:
        return response_data
    return response_data.get(data_key) if isinstance(response_data, dict) else None


def _meta_total(response_data: Any) -> int:
    """Read meta.total, which the API reports as a numeric string."""
    if not isinstance(response_data, dict):
        return 0
    meta = response_data.get("meta") or {}
    try:
        return int(meta.get("total"))
    except (TypeError, ValueError):
        return 0


def api_request_all_items(
    node: BaseNode,
    method: str,
    endpoint: str,
    body: Optional[Dict[str, Any]] = None,
    qs: Optional[Dict[str, Any]] = None,
    data_key: Optional[str] = None,
) -> List[Any]:
    """
    Make paginated requests until every item has been received.

    Pages with ``limit``/``offset`` and keeps going while ``meta.total``
    exceeds the number of items collected.

    Args:
        node: Node whose context supplies the credentials
        method: HTTP method
        endpoint: Collection endpoint
        body: JSON body
        qs: Query string parameters (not modified)
        data_key: Response key holding the page's items

    Returns:
        All items from all pages
    """
    query = dict(qs or {})
    query["limit"] = get_settings().activecampaign_page_size
    query["offset"] = 0

    all_items: List[Any] = []

    while True:
        response_data = api_request(node, method, endpoint, body, query)

        if data_key is None:
            page = response_data if isinstance(response_data, list) else []
        else:
            page = (response_data.get(data_key) or []) if isinstance(response_data, dict) else []

        all_items.extend(page)
        query["offset"] = len(all_items)

        if not page or _meta_total(response_data) <= len(all_items):
            break

    logger.debug("ActiveCampaign %s returned %d items", endpoint, len(all_items))
    return all_items
