"""EKS cluster and node group cleanup."""

from .cluster import delete_cluster, delete_node_group

__all__ = ["delete_cluster", "delete_node_group"]
