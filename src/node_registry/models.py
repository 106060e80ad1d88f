"""
Node Registry Models - Metadata for registered nodes, credentials and packs.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class NodeDefinition(BaseModel):
    """
    Metadata about a registered node, as listed by the CLI.
    """
    model_config = ConfigDict(extra="allow")

    node_type: str = Field(..., description="Unique node type identifier")
    version: int = Field(1, description="Node version")
    display_name: str = Field(..., description="Human-readable name")
    description: str = Field("", description="Node description")
    group: List[str] = Field(default_factory=list, description="Categories")

    node_class: str = Field(..., description="Fully qualified class name")
    node_pack: Optional[str] = Field(None, description="Source node pack")

    credentials: List[Dict[str, Any]] = Field(default_factory=list)
    parameters: List[Dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_node_class(cls, node_class: Type) -> "NodeDefinition":
        """Create definition from a BaseNode subclass."""
        description = node_class.description
        properties = node_class.properties

        return cls(
            node_type=node_class.type,
            version=node_class.version,
            display_name=description.get("displayName", node_class.type),
            description=description.get("description", ""),
            group=description.get("group", []),
            node_class=f"{node_class.__module__}.{node_class.__name__}",
            credentials=properties.get("credentials", []),
            parameters=properties.get("parameters", []),
        )

    def operations_by_resource(self) -> Dict[str, List[str]]:
        """Map each resource value to the operation values it offers."""
        result: Dict[str, List[str]] = {}
        for param in self.parameters:
            if param.get("name") != "operation":
                continue
            resources = param.get("displayOptions", {}).get("show", {}).get("resource", [])
            values = [option["value"] for option in param.get("options", [])]
            for resource in resources:
                result.setdefault(resource, []).extend(values)
        return result


class CredentialDefinition(BaseModel):
    """
    Definition of a credential type.
    """
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Credential type name")
    display_name: str = Field(..., description="Human-readable name")
    documentation_url: Optional[str] = Field(None, description="Where to find the values")
    properties: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Credential properties/fields"
    )

    @classmethod
    def from_credential_class(cls, credential_class: Type) -> "CredentialDefinition":
        """Create definition from a BaseCredential subclass."""
        return cls.model_validate(credential_class.get_definition())


class NodePackManifest(BaseModel):
    """
    Manifest for a node pack (collection of nodes and their credentials).
    """
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Pack name (e.g., 'activecampaign')")
    version: str = Field("1.0.0", description="Pack version")
    description: str = Field("", description="Pack description")

    nodes: List[str] = Field(
        default_factory=list,
        description="Node types in this pack"
    )
    credentials: List[str] = Field(
        default_factory=list,
        description="Credential types in this pack"
    )

    entry_point: str = Field(
        "",
        description="Module path of the pack (e.g., 'nodepacks.activecampaign')"
    )


__all__ = [
    "NodeDefinition",
    "NodePackManifest",
    "CredentialDefinition",
]
