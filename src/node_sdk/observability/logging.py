"""Structured JSON logging with node execution context."""
import logging
import sys
from typing import Any, Optional, TextIO

from pythonjsonlogger import jsonlogger

from node_sdk.config import get_settings


CONTEXT_FIELDS = ("workflow_id", "node_name", "node_type", "item_index")


class NodeContextFilter(logging.Filter):
    """Add node execution context to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add default context fields if not present."""
        for name in CONTEXT_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, None)
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with standardized field names."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to the log record."""
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        # item_index 0 is meaningful, so compare against None
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_record[name] = value
            else:
                log_record.pop(name, None)


def setup_logging(stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for the node runtime.

    Args:
        stream: Where log lines go, stdout when not given
    """
    settings = get_settings()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)

    if settings.log_json:
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    handler.setFormatter(formatter)
    handler.addFilter(NodeContextFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level.upper())

    # Reduce noise from third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class NodeLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges per-call extra with the bound context."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str, **context: Any) -> NodeLoggerAdapter:
    """
    Get a logger with node context support.

    Args:
        name: Logger name (typically __name__)
        **context: Context fields bound to every record (see with_node_context)

    Returns:
        LoggerAdapter that can accept node context in extra dict
    """
    logger = logging.getLogger(name)
    return NodeLoggerAdapter(logger, with_node_context(**context))


def with_node_context(
    workflow_id: str | None = None,
    node_name: str | None = None,
    node_type: str | None = None,
    item_index: int | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create an extra dict with node context for logging.

    Args:
        workflow_id: Workflow ID
        node_name: Node name within the workflow
        node_type: Node type identifier
        item_index: Index of the input item being processed
        **kwargs: Additional context fields

    Returns:
        Dict to pass as extra parameter to logger methods
    """
    extra = kwargs.copy()
    if workflow_id:
        extra["workflow_id"] = workflow_id
    if node_name:
        extra["node_name"] = node_name
    if node_type:
        extra["node_type"] = node_type
    if item_index is not None:
        extra["item_index"] = item_index
    return extra
