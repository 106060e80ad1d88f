"""Tests for the ActiveCampaign API credential."""
from unittest.mock import patch

import requests

from nodepacks.activecampaign.credentials import ActiveCampaignApiCredential


VALID = {"apiUrl": "https://acme.api-us1.com/", "apiKey": "test-api-key"}


class TestActiveCampaignApiCredential:
    """Test credential helpers and connection test."""

    def test_definition(self):
        definition = ActiveCampaignApiCredential.get_definition()

        assert definition["name"] == "activeCampaignApi"
        assert [p["name"] for p in definition["properties"]] == ["apiUrl", "apiKey"]

    def test_base_url_strips_trailing_slash(self):
        assert ActiveCampaignApiCredential(VALID).get_base_url() == "https://acme.api-us1.com"

    def test_headers(self):
        assert ActiveCampaignApiCredential(VALID).get_headers() == {
            "Api-Token": "test-api-key",
            "Accept": "application/json",
        }

    def test_validate_reports_missing_fields(self):
        result = ActiveCampaignApiCredential({"apiUrl": "https://acme.api-us1.com"}).validate()

        assert result == {"valid": False, "message": "Missing required fields: apiKey"}

    @patch("node_sdk.http.requests.request")
    def test_test_skips_request_when_invalid(self, mock_request):
        result = ActiveCampaignApiCredential({}).test()

        assert result["success"] is False
        mock_request.assert_not_called()

    @patch("node_sdk.http.requests.request")
    def test_test_success(self, mock_request, make_response):
        mock_request.return_value = make_response(200, {"user": {"username": "ada"}})

        result = ActiveCampaignApiCredential(VALID).test()

        assert result == {"success": True, "message": "Authentication successful as ada."}
        kwargs = mock_request.call_args.kwargs
        assert kwargs["url"] == "https://acme.api-us1.com/api/3/users/me"
        assert kwargs["headers"]["Api-Token"] == "test-api-key"

    @patch("node_sdk.http.requests.request")
    def test_test_rejected_key(self, mock_request, make_response):
        mock_request.return_value = make_response(403, {"message": "Forbidden"}, reason="Forbidden")

        result = ActiveCampaignApiCredential(VALID).test()

        assert result["success"] is False
        assert result["message"].startswith("API error 403")

    @patch("node_sdk.http.requests.request")
    def test_test_connection_error(self, mock_request):
        mock_request.side_effect = requests.ConnectionError("refused")

        result = ActiveCampaignApiCredential(VALID).test()

        assert result["success"] is False
        assert result["message"].startswith("Connection error")

    @patch("node_sdk.http.requests.request")
    def test_test_tolerates_unexpected_user_payload(self, mock_request, make_response):
        mock_request.side_effect = [
            make_response(200, []),
            make_response(200, {"user": None}),
        ]
        credential = ActiveCampaignApiCredential(VALID)

        for _ in range(2):
            assert credential.test() == {
                "success": True,
                "message": "Authentication successful as unknown user.",
            }

    @patch("node_sdk.http.requests.request")
    def test_test_non_json_reply(self, mock_request, make_response):
        mock_request.return_value = make_response(200, text="<html>login</html>")

        result = ActiveCampaignApiCredential(VALID).test()

        assert result["success"] is False
        assert result["message"].startswith("Unexpected response: Invalid JSON response")
