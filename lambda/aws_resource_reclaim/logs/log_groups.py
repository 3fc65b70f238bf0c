"""CloudWatch log group cleanup."""

from __future__ import annotations

from botocore.exceptions import ClientError

from ..models import DeletionOutcome, ReclaimConfig
from ..policies import LOG_GROUP_POLICY
from ..utils import AwsClients, get_logger

logger = get_logger()


def delete_log_group(
    clients: AwsClients, log_group_name: str, config: ReclaimConfig
) -> DeletionOutcome:
    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete log group: {log_group_name}")
        return DeletionOutcome.DELETED

    try:
        clients.logs.delete_log_group(logGroupName=log_group_name)
    except ClientError as e:
        return LOG_GROUP_POLICY.handle(e, log_group_name)

    logger.info(
        f"Deleted log group: {log_group_name}", extra={"resource_id": log_group_name}
    )
    return DeletionOutcome.DELETED
