"""Resource group record cleanup."""

from __future__ import annotations

from botocore.exceptions import ClientError

from .models import DeletionOutcome, ReclaimConfig
from .policies import RESOURCE_GROUP_POLICY
from .utils import AwsClients, get_logger

logger = get_logger()


def delete_resource_group(
    clients: AwsClients, group_name: str, config: ReclaimConfig
) -> DeletionOutcome:
    """Delete the group record itself; members are not touched."""
    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete resource group: {group_name}")
        return DeletionOutcome.DELETED

    try:
        clients.resource_groups.delete_group(Group=group_name)
    except ClientError as e:
        return RESOURCE_GROUP_POLICY.handle(e, group_name)

    logger.info(
        f"Deleted resource group: {group_name}", extra={"resource_id": group_name}
    )
    return DeletionOutcome.DELETED
