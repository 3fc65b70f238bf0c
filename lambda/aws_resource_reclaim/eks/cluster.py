"""EKS cluster and node group deletion."""

from __future__ import annotations

from botocore.exceptions import ClientError, WaiterError

from ..models import DeletionOutcome, ReclaimConfig
from ..policies import CLUSTER_POLICY, NODE_GROUP_POLICY
from ..utils import AwsClients, get_logger

logger = get_logger()


def delete_node_group(
    clients: AwsClients, cluster_name: str, node_group_name: str, config: ReclaimConfig
) -> DeletionOutcome:
    """Delete node group; the cluster cannot be deleted while it exists."""
    if config.dry_run:
        logger.info(
            f"[DRY-RUN] Would delete node group: {node_group_name}",
            extra={"dry_run": True, "cluster_name": cluster_name},
        )
        return DeletionOutcome.DELETED

    eks = clients.eks
    try:
        eks.delete_nodegroup(clusterName=cluster_name, nodegroupName=node_group_name)
    except ClientError as e:
        return NODE_GROUP_POLICY.handle(e, node_group_name)

    logger.info(
        f"Deleting node group: {node_group_name}",
        extra={"resource_id": node_group_name, "cluster_name": cluster_name},
    )

    if config.wait_for_eks:
        try:
            eks.get_waiter("nodegroup_deleted").wait(
                clusterName=cluster_name, nodegroupName=node_group_name
            )
            logger.info(
                f"Node group deleted: {node_group_name}",
                extra={"resource_id": node_group_name, "cluster_name": cluster_name},
            )
        except WaiterError as e:
            logger.warning(
                f"Timed out waiting for node group {node_group_name}: {e}",
                extra={"resource_id": node_group_name, "cluster_name": cluster_name},
            )

    return DeletionOutcome.DELETED


def delete_cluster(
    clients: AwsClients, cluster_name: str, config: ReclaimConfig
) -> DeletionOutcome:
    """Delete EKS cluster control plane."""
    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete EKS cluster: {cluster_name}")
        return DeletionOutcome.DELETED

    eks = clients.eks
    try:
        eks.delete_cluster(name=cluster_name)
    except ClientError as e:
        return CLUSTER_POLICY.handle(e, cluster_name)

    logger.info(
        f"Deleting EKS cluster: {cluster_name}", extra={"resource_id": cluster_name}
    )

    if config.wait_for_eks:
        try:
            eks.get_waiter("cluster_deleted").wait(name=cluster_name)
            logger.info(
                f"EKS cluster deleted: {cluster_name}",
                extra={"resource_id": cluster_name},
            )
        except WaiterError as e:
            logger.warning(
                f"Timed out waiting for EKS cluster {cluster_name}: {e}",
                extra={"resource_id": cluster_name},
            )

    return DeletionOutcome.DELETED
