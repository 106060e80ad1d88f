"""
ActiveCampaign API credential.
"""
import logging
from typing import Any, Dict

from node_sdk.credentials import BaseCredential
from node_sdk.http import HttpApiError, HttpClient, NodeTimeoutError

logger = logging.getLogger(__name__)


class ActiveCampaignApiCredential(BaseCredential):
    """ActiveCampaign API credential implementation"""

    name = "activeCampaignApi"
    display_name = "ActiveCampaign API"
    documentation_url = "https://developers.activecampaign.com/reference/authentication"
    properties = [
        {
            "name": "apiUrl",
            "displayName": "API URL",
            "type": "string",
            "required": True,
            "default": "",
            "placeholder": "https://youraccount.api-us1.com",
            "description": "The API URL shown under Settings > Developer in your ActiveCampaign account"
        },
        {
            "name": "apiKey",
            "displayName": "API Key",
            "type": "password",
            "required": True,
            "default": "",
            "description": "Your ActiveCampaign API key"
        }
    ]

    def get_base_url(self) -> str:
        """
        Get the base URL for ActiveCampaign API requests

        Returns:
            Account API URL without a trailing slash
        """
        return str(self.data.get("apiUrl", "")).rstrip("/")

    def get_headers(self) -> Dict[str, str]:
        """
        Get the headers that authenticate a request

        Returns:
            Headers dictionary
        """
        return {
            "Api-Token": str(self.data.get("apiKey", "")),
            "Accept": "application/json",
        }

    def test(self) -> Dict[str, Any]:
        """
        Test the credential by fetching the authenticated user

        Returns:
            Dictionary with test results
        """
        validation = self.validate()
        if not validation["valid"]:
            return {
                "success": False,
                "message": validation["message"]
            }

        client = HttpClient(base_url=self.get_base_url(), default_headers=self.get_headers())
        try:
            response = client.get("/api/3/users/me")
        except (HttpApiError, NodeTimeoutError) as e:
            logger.warning("ActiveCampaign credential test failed: %s", e)
            return {
                "success": False,
                "message": f"Connection error: {e}"
            }

        if response.ok:
            try:
                payload = response.json_or_empty()
            except HttpApiError as e:
                logger.warning("ActiveCampaign credential test failed: %s", e)
                return {
                    "success": False,
                    "message": f"Unexpected response: {e}"
                }
            user = (payload.get("user") if isinstance(payload, dict) else None) or {}
            return {
                "success": True,
                "message": f"Authentication successful as {user.get('username', 'unknown user')}."
            }

        return {
            "success": False,
            "message": f"API error {response.status_code}: {response.text[:200]}"
        }
