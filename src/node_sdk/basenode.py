"""
BaseNode - Abstract base class for Python node implementations.

All nodes inherit from BaseNode and implement the execute() method.
The host runtime builds a NodeExecutionContext (parameters, credentials,
input items) and hands it to the node before calling execute().

SYNC-CELERY SAFE: execute() is synchronous.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional, TypedDict

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)


# ==============================================================================
# NodeParameterType
# ==============================================================================

NodeParameterType = Literal[
    "string", "number", "boolean", "options", "multiOptions",
    "color", "json", "collection", "fixedCollection", "dateTime",
    "notice", "array",
]


# ==============================================================================
# NodeParameter - Pydantic model for defining parameters
# ==============================================================================

class NodeParameter(BaseModel):
    """
    A single parameter in the node's properties.

    Node classes declare parameters as plain dicts; this model validates
    them (see BaseNode.validate_properties).
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., description="Parameter key (internal name)")
    display_name: str = Field(..., alias="displayName", description="Human-readable label")
    type: NodeParameterType = Field(..., description="Parameter type")
    default: Any = Field(None, description="Default value")
    required: bool = Field(False, description="Is parameter required?")
    description: Optional[str] = Field(None, description="Help text")
    placeholder: Optional[str] = Field(None, description="Input placeholder")
    options: Optional[List[Dict[str, Any]]] = Field(
        None,
        description="Options for options/multiOptions/collection types"
    )
    display_options: Optional[Dict[str, Any]] = Field(
        None,
        alias="displayOptions",
        description="Conditional visibility"
    )


# ==============================================================================
# NodeExecutionData - Output data format
# ==============================================================================

class NodeExecutionData(TypedDict, total=False):
    """
    Single item of execution output data.

    Format: {"json": {...}, "binary": {...}, "pairedItem": {"item": 0}}
    """
    json: Dict[str, Any]
    binary: Optional[Dict[str, Any]]
    pairedItem: Optional[Dict[str, int]]


# Marker for "no default supplied" so that None stays a valid explicit default
_UNSET: Any = object()


# ==============================================================================
# BaseNode - Abstract base class
# ==============================================================================

class BaseNode(ABC):
    """
    Abstract base class for all Python node implementations.

    Nodes define:
    - type: Unique identifier (e.g., "n8n-nodes-base.activeCampaign")
    - version: Node version number
    - description: Node metadata dict
    - properties: Parameters and credentials

    And implement execute() which processes input items.

    SYNC-CELERY SAFE: All execution is synchronous.
    """

    # Required class attributes (override in subclasses)
    type: str = "base"
    version: int = 1

    description: Dict[str, Any] = {
        "displayName": "Base Node",
        "name": "base",
        "description": "",
        "group": [],
        "version": 1,
        "inputs": ["main"],
        "outputs": ["main"],
    }

    properties: Dict[str, Any] = {
        "parameters": [],
        "credentials": [],
    }

    # Continue processing other items if one fails
    continue_on_fail: bool = False

    def __init__(self) -> None:
        """Initialize node instance."""
        self.logger = logging.getLogger(f"node.{self.type}")
        self._context: Optional[NodeExecutionContext] = None

    @abstractmethod
    def execute(self) -> List[List[NodeExecutionData]]:
        """
        Execute node operation.

        Returns:
            List[List[NodeExecutionData]]: Nested list of execution results.
            - Outer list represents output branches (usually 1)
            - Inner list represents items in that branch

        Raises:
            NodeOperationError: On operation failure
            NodeApiError: On API call failure
        """
        raise NotImplementedError

    # ==== Context Management ====

    def set_context(self, context: "NodeExecutionContext") -> None:
        """Set the execution context."""
        self._context = context

    @property
    def context(self) -> "NodeExecutionContext":
        if self._context is None:
            raise NodeOperationError("No context set", node=self)
        return self._context

    # ==== Helper methods for subclasses ====

    def get_node_parameter(
        self,
        name: str,
        item_index: int = 0,
        default: Any = _UNSET,
    ) -> Any:
        """
        Get parameter value.

        Falls back to the default declared in ``properties["parameters"]``
        when the parameter was not set and no explicit default is given.

        Args:
            name: Parameter name, dot notation allowed ("updateFields.email")
            item_index: Index of the item being processed
            default: Default if not set
        """
        if default is _UNSET:
            selected = self._context.parameters if self._context is not None else {}
            default = self.get_parameter_default(name, selected)
        if self._context is None:
            return default
        return self._context.get_node_parameter(name, item_index, default)

    @classmethod
    def get_parameter_default(
        cls,
        name: str,
        selected: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Look up the declared default of a top-level parameter.

        Several parameters may share a name under different resources or
        operations. The one whose ``displayOptions`` match the ``selected``
        values wins; parameters missing from ``selected`` are resolved to
        their own defaults first. Without a visible match the first
        unconditional declaration is used, then the first declaration.

        Args:
            name: Parameter name
            selected: Parameter values already set on the node
        """
        return cls._resolve_default(name, selected or {}, frozenset())

    @classmethod
    def _resolve_default(cls, name: str, selected: Dict[str, Any], seen: frozenset) -> Any:
        if "." in name:
            return None

        candidates = [
            param for param in cls.properties.get("parameters", [])
            if param.get("name") == name
        ]
        if not candidates:
            return None

        seen = seen | {name}

        def value_of(key: str) -> Any:
            if key in selected:
                return selected[key]
            if key in seen:
                return _UNSET
            return cls._resolve_default(key, selected, seen)

        def is_shown(param: Dict[str, Any]) -> bool:
            display_options = param.get("displayOptions") or {}
            for key, allowed in (display_options.get("show") or {}).items():
                if value_of(key) not in allowed:
                    return False
            for key, hidden in (display_options.get("hide") or {}).items():
                if value_of(key) in hidden:
                    return False
            return True

        for param in candidates:
            if param.get("displayOptions") and is_shown(param):
                return param.get("default")
        for param in candidates:
            if not param.get("displayOptions"):
                return param.get("default")
        return candidates[0].get("default")

    def get_credentials(self, name: str) -> Dict[str, Any]:
        """
        Get credentials by type name.

        Args:
            name: Credential type name (e.g., "activeCampaignApi")

        Returns:
            Credentials dict with decrypted values
        """
        return self.context.get_credentials(name)

    def get_input_data(self) -> List[Dict[str, Any]]:
        """
        Get input items from previous node.

        Returns:
            List of input items, each with 'json' key.
        """
        if self._context is None:
            return []
        return self._context.get_input_data()

    @classmethod
    def validate_properties(cls) -> List[NodeParameter]:
        """Validate declared parameters against the NodeParameter model."""
        return [
            NodeParameter.model_validate(param)
            for param in cls.properties.get("parameters", [])
        ]

    @classmethod
    def get_definition(cls) -> Dict[str, Any]:
        """Get full node definition for registration."""
        return {
            "type": cls.type,
            "version": cls.version,
            "description": cls.description,
            "properties": cls.properties,
        }


# ==============================================================================
# NodeExecutionContext - Runtime context for node execution
# ==============================================================================

class NodeExecutionContext:
    """
    Runtime context provided to nodes during execution.

    Provides access to:
    - Parameters
    - Credentials
    - Input data
    - Workflow identity (for log context)
    """

    def __init__(
        self,
        parameters: Dict[str, Any],
        credentials: Dict[str, Dict[str, Any]],
        input_data: List[Dict[str, Any]],
        workflow_id: Optional[str] = None,
        node_name: Optional[str] = None,
        http_timeout: Optional[float] = None,
    ) -> None:
        self._parameters = parameters
        self._credentials = credentials
        self._input_data = input_data
        self.workflow_id = workflow_id
        self.node_name = node_name
        self.http_timeout = http_timeout

    @property
    def parameters(self) -> Dict[str, Any]:
        """Parameter values set on the node."""
        return self._parameters

    def get_node_parameter(
        self,
        name: str,
        item_index: int = 0,
        default: Any = None,
    ) -> Any:
        """
        Get parameter value.

        Supports dot notation with list indexes, e.g.
        'additionalFields.firstName' or 'orderProducts.0.name'.
        """
        current: Any = self._parameters
        for key in name.split("."):
            if isinstance(current, list) and key.isdigit():
                index = int(key)
                if index >= len(current):
                    return default
                current = current[index]
            elif isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    def get_credentials(self, name: str) -> Dict[str, Any]:
        """Get credentials by type name."""
        if name not in self._credentials:
            raise NodeOperationError(f"Credentials '{name}' not found")
        return self._credentials[name]

    def get_input_data(self) -> List[Dict[str, Any]]:
        """Get input items."""
        return self._input_data


# ==============================================================================
# Errors
# ==============================================================================

class NodeOperationError(Exception):
    """Error during node operation."""

    def __init__(
        self,
        message: str,
        node: Optional[BaseNode] = None,
        item_index: Optional[int] = None,
    ) -> None:
        self.message = message
        self.node = node
        self.item_index = item_index
        super().__init__(message)


class NodeApiError(NodeOperationError):
    """Error from external API call."""

    def __init__(
        self,
        message: str,
        node: Optional[BaseNode] = None,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        item_index: Optional[int] = None,
    ) -> None:
        super().__init__(message, node, item_index)
        self.status_code = status_code
        self.response_body = response_body


__all__ = [
    "BaseNode",
    "NodeExecutionContext",
    "NodeExecutionData",
    "NodeParameter",
    "NodeParameterType",
    "NodeOperationError",
    "NodeApiError",
]
