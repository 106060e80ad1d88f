"""
Node pack CLI - inspect and run the installed nodes.

Provides commands for:
- Listing and describing registered nodes
- Running a node once against the live API
- Testing a credential
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click

from node_registry import NodeRegistry
from node_sdk.basenode import NodeExecutionContext, NodeOperationError
from node_sdk.http import HttpApiError, NodeTimeoutError
from node_sdk.observability import setup_logging

from .activecampaign import register_nodes


logger = logging.getLogger("nodepacks")


def _load_registry() -> NodeRegistry:
    """Registry holding the bundled pack plus any installed entry-point packs."""
    registry = NodeRegistry()
    registry.register_pack(*register_nodes())
    registry.discover_entry_points()
    return registry


def _read_json_file(path: Optional[str], default: Any) -> Any:
    if path is None:
        return default
    return json.loads(Path(path).read_text(encoding="utf-8"))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("-q", "--quiet", is_flag=True, help="Suppress output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool):
    """Node packs - inspect and run workflow nodes."""
    ctx.ensure_object(dict)
    # stdout carries command output only
    setup_logging(stream=sys.stderr)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.ERROR)

    ctx.obj["registry"] = _load_registry()


# ==============================================================================
# Node Commands
# ==============================================================================

@cli.group()
def node():
    """Inspect and run nodes."""
    pass


@node.command("list")
@click.pass_context
def node_list(ctx: click.Context):
    """List registered nodes."""
    registry: NodeRegistry = ctx.obj["registry"]

    click.echo("Available nodes:")
    for definition in registry.list_nodes():
        click.echo(f"  {definition.node_type}: {definition.display_name} ({definition.node_pack})")


@node.command("describe")
@click.argument("node_type")
@click.pass_context
def node_describe(ctx: click.Context, node_type: str):
    """
    Show resources and operations of a node.

    NODE_TYPE: Node type (e.g., 'n8n-nodes-base.activeCampaign')
    """
    registry: NodeRegistry = ctx.obj["registry"]
    definition = registry.get_node(node_type)
    if definition is None:
        click.echo(f"Error: Unknown node type: {node_type}", err=True)
        sys.exit(1)

    click.echo(f"{definition.display_name} ({definition.node_type} v{definition.version})")
    if definition.description:
        click.echo(definition.description)
    click.echo(f"Credentials: {', '.join(c['name'] for c in definition.credentials) or '-'}")
    click.echo("Operations:")
    for resource, operations in definition.operations_by_resource().items():
        click.echo(f"  {resource}: {', '.join(operations)}")


@node.command("run")
@click.argument("node_type")
@click.option(
    "--parameters", "-p",
    required=True,
    help="Node parameters as a JSON object"
)
@click.option(
    "--credentials", "-c",
    type=click.Path(exists=True),
    help="JSON file mapping credential type -> values"
)
@click.option(
    "--input", "-i", "input_file",
    type=click.Path(exists=True),
    help="JSON file with the input items"
)
@click.option(
    "--workflow-id", "-w",
    help="Workflow ID for log context"
)
@click.option(
    "--continue-on-fail", is_flag=True,
    help="Report failed items in the output instead of stopping"
)
@click.pass_context
def node_run(
    ctx: click.Context,
    node_type: str,
    parameters: str,
    credentials: Optional[str],
    input_file: Optional[str],
    workflow_id: Optional[str],
    continue_on_fail: bool,
):
    """
    Run a node once and print its output items as JSON.

    Examples:

        nodepack node run n8n-nodes-base.activeCampaign \\
            -p '{"resource": "contact", "operation": "get", "contactId": 1}' \\
            -c creds.json
    """
    registry: NodeRegistry = ctx.obj["registry"]
    instance = registry.create_node(node_type)
    if instance is None:
        click.echo(f"Error: Unknown node type: {node_type}", err=True)
        sys.exit(1)

    try:
        params: Dict[str, Any] = json.loads(parameters)
    except json.JSONDecodeError as e:
        click.echo(f"Error: --parameters is not valid JSON: {e}", err=True)
        sys.exit(1)

    input_items = [
        item if "json" in item else {"json": item}
        for item in _read_json_file(input_file, [])
    ]

    instance.continue_on_fail = continue_on_fail
    instance.set_context(
        NodeExecutionContext(
            parameters=params,
            credentials=_read_json_file(credentials, {}),
            input_data=input_items,
            workflow_id=workflow_id,
            node_name=node_type,
        )
    )

    try:
        result = instance.execute()
    except (NodeOperationError, HttpApiError, NodeTimeoutError) as e:
        logger.error("Node %s failed: %s", node_type, e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(result[0], indent=2, default=str))


# ==============================================================================
# Credential Commands
# ==============================================================================

@cli.group()
def credential():
    """Work with credentials."""
    pass


@credential.command("test")
@click.argument("name")
@click.option(
    "--credentials", "-c",
    type=click.Path(exists=True),
    required=True,
    help="JSON file mapping credential type -> values"
)
@click.pass_context
def credential_test(ctx: click.Context, name: str, credentials: str):
    """
    Test a credential against its service.

    NAME: Credential type (e.g., 'activeCampaignApi')
    """
    registry: NodeRegistry = ctx.obj["registry"]
    credential_class = registry.get_credential_class(name)
    if credential_class is None:
        click.echo(f"Error: Unknown credential type: {name}", err=True)
        sys.exit(1)

    data = _read_json_file(credentials, {}).get(name, {})
    result = credential_class(data).test()

    click.echo(result["message"])
    sys.exit(0 if result["success"] else 1)


# ==============================================================================
# Entry Point
# ==============================================================================

def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
