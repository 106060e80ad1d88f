"""
Node SDK - Minimal Python node execution semantics.

This package provides the runtime for executing Python nodes:
- BaseNode: Abstract base class for node implementations
- NodeExecutionContext: Runtime context for a node
- HttpClient: Timeout-bounded HTTP requests
- BaseCredential: Credential type definitions

All nodes execute synchronously (sync-Celery safe).
"""

from .basenode import (
    BaseNode,
    NodeExecutionContext,
    NodeExecutionData,
    NodeParameter,
    NodeParameterType,
    NodeOperationError,
    NodeApiError,
)
from .credentials import BaseCredential
from .http import HttpClient, HttpResponse, HttpApiError, NodeTimeoutError

__all__ = [
    "NodeExecutionData",
    # Context
    "NodeExecutionContext",
    # Base classes
    "BaseNode",
    "BaseCredential",
    "NodeParameter",
    "NodeParameterType",
    # Errors
    "NodeOperationError",
    "NodeApiError",
    "HttpApiError",
    "NodeTimeoutError",
    # HTTP
    "HttpClient",
    "HttpResponse",
]
