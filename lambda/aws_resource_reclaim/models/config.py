"""Configuration from environment variables."""

from __future__ import annotations
import os
from dataclasses import dataclass, field

from .resource import ResourceType, RetryBudget

# Configuration from environment variables
DRY_RUN = os.environ.get("DRY_RUN", "false").lower() == "true"

# Retry budget for asynchronously deleted resources (NAT gateways, EIPs)
RETRY_MAX_ATTEMPTS = int(os.environ.get("RETRY_MAX_ATTEMPTS", "30"))
RETRY_DELAY_SECONDS = float(os.environ.get("RETRY_DELAY_SECONDS", "5"))

# Tag used to find elastic IPs, which group membership does not list reliably
RESOURCE_GROUP_TAG_KEY = os.environ.get("RESOURCE_GROUP_TAG_KEY", "resource_group")

# Block on EKS node group / cluster deletion before the next tail step
WAIT_FOR_EKS = os.environ.get("WAIT_FOR_EKS", "true").lower() == "true"

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Dependency order: compute, then network interfaces, gateways, subnets,
# route tables and finally the VPC itself
DELETION_ORDER = (
    ResourceType.INSTANCE,
    ResourceType.SECURITY_GROUP,
    ResourceType.NAT_GATEWAY,
    ResourceType.ELASTIC_IP,
    ResourceType.INTERNET_GATEWAY,
    ResourceType.SUBNET,
    ResourceType.ROUTE_TABLE,
    ResourceType.VPC,
)

# Name suffixes appended to the group key by the provisioning module
RESOURCE_GROUP_SUFFIX = "-rg"
KEY_PAIR_SUFFIX = "-kp"
LOG_GROUP_SUFFIX = "-log-group"
NODE_GROUP_SUFFIX = "-node-group0"
IAM_ROLE_SUFFIXES = (
    "-eks-cluster-iam-role",
    "-eks-nodes-iam-role",
    "-cluster-autoscaler",
)


@dataclass(frozen=True)
class ResourceNames:
    """Names of the fixed-tail resources derived from a group key."""

    resource_group: str
    key_pair: str
    log_group: str
    node_group: str
    cluster: str
    iam_roles: tuple[str, ...]


@dataclass
class ReclaimConfig:
    """All tunables of a teardown in one place."""

    dry_run: bool = DRY_RUN
    retry_budget: RetryBudget = field(
        default_factory=lambda: RetryBudget(RETRY_MAX_ATTEMPTS, RETRY_DELAY_SECONDS)
    )
    deletion_order: tuple[ResourceType, ...] = DELETION_ORDER
    resource_group_tag_key: str = RESOURCE_GROUP_TAG_KEY
    wait_for_eks: bool = WAIT_FOR_EKS
    resource_group_suffix: str = RESOURCE_GROUP_SUFFIX
    key_pair_suffix: str = KEY_PAIR_SUFFIX
    log_group_suffix: str = LOG_GROUP_SUFFIX
    node_group_suffix: str = NODE_GROUP_SUFFIX
    iam_role_suffixes: tuple[str, ...] = IAM_ROLE_SUFFIXES

    def names_for(self, group_key: str) -> ResourceNames:
        """Apply the naming convention to a group key."""
        if not group_key:
            raise ValueError("group_key must be a non-empty string")
        return ResourceNames(
            resource_group=group_key + self.resource_group_suffix,
            key_pair=group_key + self.key_pair_suffix,
            log_group=group_key + self.log_group_suffix,
            node_group=group_key + self.node_group_suffix,
            cluster=group_key,
            iam_roles=tuple(group_key + suffix for suffix in self.iam_role_suffixes),
        )
