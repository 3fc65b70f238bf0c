"""VPC network resources cleanup."""

from __future__ import annotations

from botocore.exceptions import ClientError, WaiterError

from ..models import DeletionOutcome, ReclaimConfig, ResourceIdentifier
from ..policies import (
    INTERNET_GATEWAY_POLICY,
    NETWORK_INTERFACE_POLICY,
    ROUTE_TABLE_POLICY,
    SECURITY_GROUP_POLICY,
    SUBNET_POLICY,
    VPC_POLICY,
)
from ..utils import AwsClients, get_logger

logger = get_logger()


def delete_security_group(
    clients: AwsClients, identifier: ResourceIdentifier, config: ReclaimConfig
) -> DeletionOutcome:
    """Delete security group."""
    sg_id = identifier.resource_id
    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete SG: {sg_id}")
        return DeletionOutcome.DELETED

    try:
        clients.ec2.delete_security_group(GroupId=sg_id)
    except ClientError as e:
        return SECURITY_GROUP_POLICY.handle(e, sg_id)

    logger.info(f"Deleted SG: {sg_id}", extra={"resource_id": sg_id})
    return DeletionOutcome.DELETED


def delete_internet_gateway(
    clients: AwsClients, identifier: ResourceIdentifier, config: ReclaimConfig
) -> DeletionOutcome:
    """Detach internet gateway from its VPCs, then delete it."""
    igw_id = identifier.resource_id
    ec2 = clients.ec2

    try:
        igws = ec2.describe_internet_gateways(InternetGatewayIds=[igw_id])[
            "InternetGateways"
        ]
    except ClientError as e:
        return INTERNET_GATEWAY_POLICY.handle(e, igw_id)

    if not igws:
        logger.info(f"IGW already gone: {igw_id}", extra={"resource_id": igw_id})
        return DeletionOutcome.NOT_FOUND

    vpc_ids = [
        attachment["VpcId"]
        for attachment in igws[0].get("Attachments", [])
        if attachment.get("VpcId")
    ]

    if config.dry_run:
        logger.info(
            f"[DRY-RUN] Would detach/delete IGW: {igw_id}",
            extra={"dry_run": True, "resource_id": igw_id, "vpc_ids": vpc_ids},
        )
        return DeletionOutcome.DELETED

    for vpc_id in vpc_ids:
        try:
            ec2.detach_internet_gateway(InternetGatewayId=igw_id, VpcId=vpc_id)
            logger.info(
                f"Detached IGW {igw_id} from {vpc_id}",
                extra={"resource_id": igw_id, "vpc_id": vpc_id},
            )
        except ClientError as e:
            # Gateway.NotAttached is absorbed
            INTERNET_GATEWAY_POLICY.handle(e, igw_id)

    try:
        ec2.delete_internet_gateway(InternetGatewayId=igw_id)
    except ClientError as e:
        return INTERNET_GATEWAY_POLICY.handle(e, igw_id)

    logger.info(f"Deleted IGW: {igw_id}", extra={"resource_id": igw_id})
    return DeletionOutcome.DELETED


def cleanup_network_interfaces(
    clients: AwsClients, subnet_id: str, config: ReclaimConfig
) -> None:
    """Force-detach and delete every network interface in a subnet.

    Interfaces are not group members but block subnet deletion.
    """
    ec2 = clients.ec2
    enis = ec2.describe_network_interfaces(
        Filters=[{"Name": "subnet-id", "Values": [subnet_id]}]
    )["NetworkInterfaces"]

    for eni in enis:
        eni_id = eni["NetworkInterfaceId"]
        attachment = eni.get("Attachment") or {}

        if config.dry_run:
            logger.info(
                f"[DRY-RUN] Would detach/delete ENI: {eni_id}",
                extra={"dry_run": True, "resource_id": eni_id, "subnet_id": subnet_id},
            )
            continue

        if attachment.get("AttachmentId") and attachment.get("Status") != "detached":
            try:
                ec2.detach_network_interface(
                    AttachmentId=attachment["AttachmentId"], Force=True
                )
                logger.info(
                    f"Detached ENI: {eni_id}",
                    extra={"resource_id": eni_id, "subnet_id": subnet_id},
                )
                ec2.get_waiter("network_interface_available").wait(
                    NetworkInterfaceIds=[eni_id]
                )
            except ClientError as e:
                NETWORK_INTERFACE_POLICY.handle(e, eni_id)
            except WaiterError as e:
                logger.warning(
                    f"ENI {eni_id} still attached after detach: {e}",
                    extra={"resource_id": eni_id, "subnet_id": subnet_id},
                )

        try:
            ec2.delete_network_interface(NetworkInterfaceId=eni_id)
            logger.info(
                f"Deleted ENI: {eni_id}",
                extra={"resource_id": eni_id, "subnet_id": subnet_id},
            )
        except ClientError as e:
            NETWORK_INTERFACE_POLICY.handle(e, eni_id)


def delete_subnet(
    clients: AwsClients, identifier: ResourceIdentifier, config: ReclaimConfig
) -> DeletionOutcome:
    """Remove the subnet's network interfaces, then the subnet."""
    subnet_id = identifier.resource_id

    try:
        cleanup_network_interfaces(clients, subnet_id, config)
    except ClientError as e:
        return SUBNET_POLICY.handle(e, subnet_id)

    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete subnet: {subnet_id}")
        return DeletionOutcome.DELETED

    try:
        clients.ec2.delete_subnet(SubnetId=subnet_id)
    except ClientError as e:
        return SUBNET_POLICY.handle(e, subnet_id)

    logger.info(f"Deleted subnet: {subnet_id}", extra={"resource_id": subnet_id})
    return DeletionOutcome.DELETED


def delete_route_table(
    clients: AwsClients, identifier: ResourceIdentifier, config: ReclaimConfig
) -> DeletionOutcome:
    """Delete route table; the main route table goes away with its VPC."""
    rt_id = identifier.resource_id
    ec2 = clients.ec2

    try:
        rts = ec2.describe_route_tables(RouteTableIds=[rt_id])["RouteTables"]
    except ClientError as e:
        return ROUTE_TABLE_POLICY.handle(e, rt_id)

    if not rts:
        logger.info(f"Route table already gone: {rt_id}", extra={"resource_id": rt_id})
        return DeletionOutcome.NOT_FOUND

    associations = rts[0].get("Associations", [])
    if any(assoc.get("Main", False) for assoc in associations):
        logger.info(
            f"Skipping main route table: {rt_id}",
            extra={"resource_id": rt_id, "vpc_id": rts[0].get("VpcId")},
        )
        return DeletionOutcome.NOT_FOUND

    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete route table: {rt_id}")
        return DeletionOutcome.DELETED

    for assoc in associations:
        assoc_id = assoc.get("RouteTableAssociationId")
        if not assoc_id:
            continue
        try:
            ec2.disassociate_route_table(AssociationId=assoc_id)
            logger.info(
                f"Disassociated route table {rt_id}",
                extra={"resource_id": rt_id, "association_id": assoc_id},
            )
        except ClientError as e:
            ROUTE_TABLE_POLICY.handle(e, rt_id)

    try:
        ec2.delete_route_table(RouteTableId=rt_id)
    except ClientError as e:
        return ROUTE_TABLE_POLICY.handle(e, rt_id)

    logger.info(f"Deleted route table: {rt_id}", extra={"resource_id": rt_id})
    return DeletionOutcome.DELETED


def delete_vpc(
    clients: AwsClients, identifier: ResourceIdentifier, config: ReclaimConfig
) -> DeletionOutcome:
    """Delete VPC, best effort: a refused deletion is logged, not raised."""
    vpc_id = identifier.resource_id
    if config.dry_run:
        logger.info(f"[DRY-RUN] Would delete VPC: {vpc_id}")
        return DeletionOutcome.DELETED

    try:
        clients.ec2.delete_vpc(VpcId=vpc_id)
    except ClientError as e:
        return VPC_POLICY.handle(e, vpc_id)

    logger.info(f"Deleted VPC: {vpc_id}", extra={"resource_id": vpc_id})
    return DeletionOutcome.DELETED
