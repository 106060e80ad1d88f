"""Tests for CLI commands."""
import json
import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from nodepacks.cli import cli


NODE_TYPE = "n8n-nodes-base.activeCampaign"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def credentials_file(tmp_path, credentials):
    path = tmp_path / "credentials.json"
    path.write_text(json.dumps(credentials))
    return str(path)


@patch("nodepacks.cli.setup_logging")
class TestNodeCommands:
    """Test the node command group."""

    def test_list(self, mock_logging, runner):
        result = runner.invoke(cli, ["node", "list"])

        assert result.exit_code == 0
        assert f"{NODE_TYPE}: ActiveCampaign (activecampaign)" in result.output

    def test_describe(self, mock_logging, runner):
        result = runner.invoke(cli, ["node", "describe", NODE_TYPE])

        assert result.exit_code == 0
        assert "Credentials: activeCampaignApi" in result.output
        assert "deal: create, createNote, delete, get, getAll, update, updateNote" in result.output

    def test_describe_unknown_node(self, mock_logging, runner):
        result = runner.invoke(cli, ["node", "describe", "n8n-nodes-base.unknown"])

        assert result.exit_code == 1
        assert "Unknown node type" in result.output

    @patch("node_sdk.http.requests.request")
    def test_run_prints_output_items(self, mock_request, mock_logging, runner, credentials_file, make_response):
        mock_request.return_value = make_response(200, {"contact": {"id": "1"}})
        parameters = json.dumps({"resource": "contact", "operation": "get", "contactId": 1})

        result = runner.invoke(
            cli, ["node", "run", NODE_TYPE, "-p", parameters, "-c", credentials_file]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"json": {"contact": {"id": "1"}}, "pairedItem": {"item": 0}}
        ]
        assert mock_request.call_args.kwargs["url"] == "https://acme.api-us1.com/api/3/contacts/1"

    @patch("node_sdk.http.requests.request")
    def test_run_with_input_items(self, mock_request, mock_logging, runner, credentials_file, make_response, tmp_path):
        mock_request.return_value = make_response(200, {"deal": {"id": "7"}})
        input_file = tmp_path / "input.json"
        input_file.write_text(json.dumps([{"a": 1}, {"json": {"a": 2}}]))
        parameters = json.dumps({"resource": "deal", "operation": "get", "dealId": 7})

        result = runner.invoke(
            cli,
            ["node", "run", NODE_TYPE, "-p", parameters, "-c", credentials_file, "-i", str(input_file)],
        )

        assert result.exit_code == 0
        assert [item["pairedItem"]["item"] for item in json.loads(result.stdout)] == [0, 1]

    def test_run_unknown_resource_fails(self, mock_logging, runner, credentials_file):
        parameters = json.dumps({"resource": "ticket", "operation": "get"})

        result = runner.invoke(
            cli, ["node", "run", NODE_TYPE, "-p", parameters, "-c", credentials_file]
        )

        assert result.exit_code == 1
        assert 'The resource "ticket" is not known!' in result.output

    def test_run_rejects_invalid_json(self, mock_logging, runner, credentials_file):
        result = runner.invoke(
            cli, ["node", "run", NODE_TYPE, "-p", "{not json", "-c", credentials_file]
        )

        assert result.exit_code == 1
        assert "--parameters is not valid JSON" in result.output

    @patch("node_sdk.http.requests.request")
    def test_run_continue_on_fail(self, mock_request, mock_logging, runner, credentials_file, make_response):
        mock_request.return_value = make_response(500, {"message": "boom"}, reason="Server Error")
        parameters = json.dumps({"resource": "contact", "operation": "get", "contactId": 1})

        result = runner.invoke(
            cli,
            ["node", "run", NODE_TYPE, "-p", parameters, "-c", credentials_file, "--continue-on-fail"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"json": {"error": "HTTP 500: Server Error"}, "pairedItem": {"item": 0}}
        ]


@patch("nodepacks.cli.setup_logging")
class TestCredentialCommands:
    """Test the credential command group."""

    @patch("node_sdk.http.requests.request")
    def test_credential_test_success(self, mock_request, mock_logging, runner, credentials_file, make_response):
        mock_request.return_value = make_response(200, {"user": {"username": "ada"}})

        result = runner.invoke(cli, ["credential", "test", "activeCampaignApi", "-c", credentials_file])

        assert result.exit_code == 0
        assert "Authentication successful as ada." in result.output

    @patch("node_sdk.http.requests.request")
    def test_credential_test_failure(self, mock_request, mock_logging, runner, credentials_file, make_response):
        mock_request.return_value = make_response(401, {"message": "No"}, reason="Unauthorized")

        result = runner.invoke(cli, ["credential", "test", "activeCampaignApi", "-c", credentials_file])

        assert result.exit_code == 1
        assert "API error 401" in result.output

    def test_unknown_credential(self, mock_logging, runner, credentials_file):
        result = runner.invoke(cli, ["credential", "test", "nope", "-c", credentials_file])

        assert result.exit_code == 1
        assert "Unknown credential type" in result.output


@pytest.fixture
def root_logging():
    """Restore root handlers replaced by the CLI's logging setup."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestOutputStreams:
    """Test that log lines stay off stdout."""

    @patch("node_sdk.http.requests.request")
    def test_run_output_is_parseable_with_logging_enabled(
        self, mock_request, runner, credentials_file, make_response, root_logging
    ):
        mock_request.return_value = make_response(200, {"contact": {"id": "1"}})
        parameters = json.dumps({"resource": "contact", "operation": "get", "contactId": 1})

        result = runner.invoke(
            cli, ["-v", "node", "run", NODE_TYPE, "-p", parameters, "-c", credentials_file]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"json": {"contact": {"id": "1"}}, "pairedItem": {"item": 0}}
        ]
        assert "Registered pack" in result.stderr
