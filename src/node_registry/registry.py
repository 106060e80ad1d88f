"""
Node Registry - Central registry for node discovery and instantiation.

Node packs are found through the ``node_sdk.nodepacks`` entry-point group
or registered by hand from their manifest.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import Dict, Iterator, List, Optional, Type, TYPE_CHECKING

from .models import CredentialDefinition, NodeDefinition, NodePackManifest


if TYPE_CHECKING:
    from node_sdk.basenode import BaseNode
    from node_sdk.credentials import BaseCredential


logger = logging.getLogger(__name__)

# Entry point group for node packs
NODE_PACK_ENTRY_POINT = "node_sdk.nodepacks"


class NodeRegistry:
    """
    Central registry for node and credential classes.

    Usage:
        registry = NodeRegistry()
        registry.discover_entry_points()

        node = registry.create_node("n8n-nodes-base.activeCampaign")
    """

    def __init__(self):
        self._nodes: Dict[str, NodeDefinition] = {}
        self._node_classes: Dict[str, Type["BaseNode"]] = {}
        self._credential_classes: Dict[str, Type["BaseCredential"]] = {}
        self._packs: Dict[str, NodePackManifest] = {}
        self._discovered = False

    def register_node(self, node_class: Type["BaseNode"]) -> NodeDefinition:
        """
        Register a node class under its ``type``.

        Returns:
            NodeDefinition for the registered node
        """
        definition = NodeDefinition.from_node_class(node_class)
        self._nodes[definition.node_type] = definition
        self._node_classes[definition.node_type] = node_class

        logger.debug("Registered node: %s", definition.node_type)
        return definition

    def register_credential(self, credential_class: Type["BaseCredential"]) -> CredentialDefinition:
        """Register a credential class under its ``name``."""
        definition = CredentialDefinition.from_credential_class(credential_class)
        self._credential_classes[definition.name] = credential_class

        logger.debug("Registered credential: %s", definition.name)
        return definition

    def register_pack(
        self,
        manifest: NodePackManifest,
        node_classes: Dict[str, Type["BaseNode"]],
        credential_classes: Optional[Dict[str, Type["BaseCredential"]]] = None,
    ) -> None:
        """
        Register a node pack with its nodes and credentials.

        Args:
            manifest: Pack manifest
            node_classes: Map of node_type -> node class
            credential_classes: Map of credential name -> credential class
        """
        self._packs[manifest.name] = manifest

        for node_class in node_classes.values():
            definition = self.register_node(node_class)
            definition.node_pack = manifest.name

        for credential_class in (credential_classes or {}).values():
            self.register_credential(credential_class)

        logger.info("Registered pack '%s' with %d nodes", manifest.name, len(node_classes))

    def discover_entry_points(self, force: bool = False) -> int:
        """
        Discover node packs via entry points.

        Entry points are declared in pyproject.toml:

            [project.entry-points."node_sdk.nodepacks"]
            mypack = "mypack:register_nodes"

        The entry point returns ``(manifest, node_classes)`` or
        ``(manifest, node_classes, credential_classes)``.
        Packs already registered under the same name are skipped.

        Args:
            force: Re-discover even if already done

        Returns:
            Number of packs discovered
        """
        if self._discovered and not force:
            return len(self._packs)

        count = 0
        for ep in entry_points(group=NODE_PACK_ENTRY_POINT):
            try:
                result = ep.load()()
            except Exception as e:
                logger.error("Failed to load node pack '%s': %s", ep.name, e)
                continue

            manifest = result[0]
            if manifest.name in self._packs:
                logger.debug("Node pack already registered: %s", manifest.name)
                continue

            self.register_pack(*result)
            count += 1
            logger.info("Discovered node pack: %s", ep.name)

        self._discovered = True
        return count

    def get_node(self, node_type: str) -> Optional[NodeDefinition]:
        """Get node definition by type."""
        return self._nodes.get(node_type)

    def get_node_class(self, node_type: str) -> Optional[Type["BaseNode"]]:
        """Get node class by type."""
        return self._node_classes.get(node_type)

    def get_credential_class(self, name: str) -> Optional[Type["BaseCredential"]]:
        """Get credential class by name."""
        return self._credential_classes.get(name)

    def create_node(self, node_type: str) -> Optional["BaseNode"]:
        """
        Create a node instance.

        Returns:
            Node instance or None if not found
        """
        node_class = self.get_node_class(node_type)
        if node_class:
            return node_class()
        return None

    def list_nodes(self) -> List[NodeDefinition]:
        """List all registered nodes."""
        return list(self._nodes.values())

    def list_packs(self) -> List[NodePackManifest]:
        """List all registered packs."""
        return list(self._packs.values())

    def list_credential_names(self) -> List[str]:
        """List all registered credential names."""
        return list(self._credential_classes.keys())

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeDefinition]:
        return iter(self._nodes.values())

    def __contains__(self, node_type: str) -> bool:
        return node_type in self._nodes


# Global registry instance
_global_registry: Optional[NodeRegistry] = None


def get_global_registry() -> NodeRegistry:
    """Get the global node registry, discovering installed packs on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = NodeRegistry()
        _global_registry.discover_entry_points()
    return _global_registry


def reset_global_registry() -> None:
    """Drop the global registry (useful for testing)."""
    global _global_registry
    _global_registry = None


__all__ = [
    "NodeRegistry",
    "get_global_registry",
    "reset_global_registry",
    "NODE_PACK_ENTRY_POINT",
]
