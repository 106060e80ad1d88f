"""
ActiveCampaign Node Pack Manifest - Registration function for entry-points.
"""

from node_registry.models import NodePackManifest

from .credentials import ActiveCampaignApiCredential
from .node import ActiveCampaignNode


MANIFEST = NodePackManifest(
    name="activecampaign",
    version="1.0.0",
    description="ActiveCampaign contacts, deals, connections and e-commerce data",
    nodes=[ActiveCampaignNode.type],
    credentials=[ActiveCampaignApiCredential.name],
    entry_point="nodepacks.activecampaign",
)


# Node classes by type
NODE_CLASSES = {
    ActiveCampaignNode.type: ActiveCampaignNode,
}

# Credential classes by name
CREDENTIAL_CLASSES = {
    ActiveCampaignApiCredential.name: ActiveCampaignApiCredential,
}


def register_nodes():
    """
    Entry point function for node pack discovery.

    Returns tuple of (manifest, node_classes, credential_classes).
    """
    return MANIFEST, NODE_CLASSES, CREDENTIAL_CLASSES


__all__ = [
    "MANIFEST",
    "NODE_CLASSES",
    "CREDENTIAL_CLASSES",
    "register_nodes",
]
