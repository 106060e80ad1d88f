"""
ActiveCampaign node pack.
"""

from .credentials import ActiveCampaignApiCredential
from .manifest import CREDENTIAL_CLASSES, MANIFEST, NODE_CLASSES, register_nodes
from .node import ActiveCampaignNode

__all__ = [
    "ActiveCampaignApiCredential",
    "ActiveCampaignNode",
    "CREDENTIAL_CLASSES",
    "MANIFEST",
    "NODE_CLASSES",
    "register_nodes",
]
