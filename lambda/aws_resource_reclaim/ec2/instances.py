"""EC2 instance termination."""

from __future__ import annotations

from botocore.exceptions import ClientError, WaiterError

from ..errors import ReclaimError
from ..models import DeletionOutcome, ReclaimConfig, ResourceIdentifier
from ..policies import INSTANCE_POLICY
from ..utils import AwsClients, get_logger

logger = get_logger()


def delete_instance(
    clients: AwsClients, identifier: ResourceIdentifier, config: ReclaimConfig
) -> DeletionOutcome:
    """Terminate an instance and block until the provider reports it terminated."""
    instance_id = identifier.resource_id
    ec2 = clients.ec2

    try:
        reservations = ec2.describe_instances(InstanceIds=[instance_id])[
            "Reservations"
        ]
    except ClientError as e:
        return INSTANCE_POLICY.handle(e, instance_id)

    instances = [i for r in reservations for i in r.get("Instances", [])]
    live = [i for i in instances if i.get("State", {}).get("Name") != "terminated"]
    if not live:
        logger.info(
            "Instance already terminated",
            extra={"resource_type": "instance", "resource_id": instance_id},
        )
        return DeletionOutcome.NOT_FOUND

    if config.dry_run:
        logger.info(
            "Would TERMINATE instance",
            extra={"dry_run": True, "resource_id": instance_id},
        )
        return DeletionOutcome.DELETED

    logger.info(
        "TERMINATE instance",
        extra={"resource_type": "instance", "resource_id": instance_id},
    )
    try:
        ec2.terminate_instances(InstanceIds=[instance_id])
    except ClientError as e:
        return INSTANCE_POLICY.handle(e, instance_id)

    try:
        ec2.get_waiter("instance_terminated").wait(InstanceIds=[instance_id])
    except WaiterError as e:
        logger.error(
            "Instance did not reach terminated state",
            extra={"resource_type": "instance", "resource_id": instance_id},
        )
        raise ReclaimError(
            f"instance {instance_id}: {e}",
            resource_type="instance",
            resource_id=instance_id,
        ) from e

    logger.info(
        "Instance terminated",
        extra={"resource_type": "instance", "resource_id": instance_id},
    )
    return DeletionOutcome.DELETED
