"""EC2 key pair cleanup."""

from __future__ import annotations

from botocore.exceptions import ClientError

from ..models import DeletionOutcome, ReclaimConfig
from ..policies import KEY_PAIR_POLICY
from ..utils import AwsClients, get_logger

logger = get_logger()


def delete_key_pair(
    clients: AwsClients, key_name: str, config: ReclaimConfig
) -> DeletionOutcome:
    """Delete key pair by name."""
    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete key pair: {key_name}")
        return DeletionOutcome.DELETED

    try:
        clients.ec2.delete_key_pair(KeyName=key_name)
    except ClientError as e:
        return KEY_PAIR_POLICY.handle(e, key_name)

    logger.info(f"Deleted key pair: {key_name}", extra={"resource_id": key_name})
    return DeletionOutcome.DELETED
