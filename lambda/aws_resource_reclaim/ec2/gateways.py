"""NAT gateway and elastic IP cleanup.

Both are released asynchronously by the provider, so deletion goes through
the retry driver: NAT gateways linger in the "deleting" state and elastic
IPs stay associated until the NAT gateway using them is gone.
"""

from __future__ import annotations

from ..models import DeletionOutcome, ReclaimConfig, ResourceIdentifier
from ..policies import ELASTIC_IP_POLICY, NAT_GATEWAY_POLICY
from ..retry import RetryDriver
from ..utils import AwsClients, get_logger

logger = get_logger()


def delete_nat_gateway(
    clients: AwsClients,
    identifier: ResourceIdentifier,
    config: ReclaimConfig,
    driver: RetryDriver | None = None,
) -> DeletionOutcome:
    """Delete NAT gateway and poll until it reaches the deleted state."""
    nat_id = identifier.resource_id
    ec2 = clients.ec2

    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete NAT Gateway: {nat_id}")
        return DeletionOutcome.DELETED

    def probe() -> bool:
        nat_gws = ec2.describe_nat_gateways(NatGatewayIds=[nat_id])["NatGateways"]
        return any(nat.get("State") != "deleted" for nat in nat_gws)

    def remove() -> None:
        ec2.delete_nat_gateway(NatGatewayId=nat_id)
        logger.info(f"Deleted NAT Gateway: {nat_id}", extra={"resource_id": nat_id})

    def settle() -> None:
        ec2.get_waiter("nat_gateway_deleted").wait(NatGatewayIds=[nat_id])

    driver = driver or RetryDriver(config.retry_budget)
    return driver.run(nat_id, probe, remove, NAT_GATEWAY_POLICY, settle=settle)


def release_elastic_ip(
    clients: AwsClients,
    identifier: ResourceIdentifier,
    config: ReclaimConfig,
    driver: RetryDriver | None = None,
) -> DeletionOutcome:
    """Release elastic IP, retrying while it is still in use."""
    allocation_id = identifier.resource_id
    ec2 = clients.ec2

    if config.dry_run:
        logger.info(f"[DRY-RUN] Would release EIP: {allocation_id}")
        return DeletionOutcome.DELETED

    def probe() -> bool:
        addresses = ec2.describe_addresses(AllocationIds=[allocation_id])["Addresses"]
        return bool(addresses)

    def remove() -> None:
        ec2.release_address(AllocationId=allocation_id)
        logger.info(
            f"Released EIP: {allocation_id}", extra={"resource_id": allocation_id}
        )

    driver = driver or RetryDriver(config.retry_budget)
    return driver.run(allocation_id, probe, remove, ELASTIC_IP_POLICY)
