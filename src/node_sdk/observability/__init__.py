"""Observability package."""
from node_sdk.observability.logging import (
    get_logger,
    setup_logging,
    with_node_context,
    NodeLoggerAdapter,
)

__all__ = ["get_logger", "setup_logging", "with_node_context", "NodeLoggerAdapter"]
