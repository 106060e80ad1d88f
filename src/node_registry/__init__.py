"""
Node Registry - Discovery and registration of node implementations.

This package provides:
- NodeDefinition / CredentialDefinition: Metadata about registered classes
- NodePackManifest: Package metadata for a node pack
- NodeRegistry: Central registry, fed by the ``node_sdk.nodepacks`` entry points
"""

from .models import CredentialDefinition, NodeDefinition, NodePackManifest
from .registry import (
    NODE_PACK_ENTRY_POINT,
    NodeRegistry,
    get_global_registry,
    reset_global_registry,
)

__all__ = [
    "CredentialDefinition",
    "NodeDefinition",
    "NodePackManifest",
    "NodeRegistry",
    "NODE_PACK_ENTRY_POINT",
    "get_global_registry",
    "reset_global_registry",
]
