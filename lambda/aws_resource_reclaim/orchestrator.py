"""Resource group teardown orchestration.

Single pass, strictly sequential:
  1. Classify the tagged members of the run's resource group
  2. Delete them type by type in dependency order
  3. Delete the fixed tail derived from the naming convention
     (node group, cluster, IAM roles, log group, resource group, key pair)

Every deleter treats "not found" as success, so rerunning against the same
group key is the recovery path after a partial teardown.
"""

from __future__ import annotations
import time
from typing import Callable

from botocore.exceptions import BotoCoreError

from .classifier import classify, find_elastic_ips
from .ec2 import (
    delete_instance,
    delete_internet_gateway,
    delete_key_pair,
    delete_nat_gateway,
    delete_route_table,
    delete_security_group,
    delete_subnet,
    delete_vpc,
    release_elastic_ip,
)
from .eks import delete_cluster, delete_node_group
from .errors import ReclaimError
from .iam import delete_role
from .logs import delete_log_group
from .models import (
    DeletionOutcome,
    ReclaimConfig,
    ReclaimReport,
    ResourceIdentifier,
    ResourceType,
)
from .resource_groups import delete_resource_group
from .retry import RetryDriver
from .utils import AwsClients, Credentials, get_logger

logger = get_logger()

Deleter = Callable[..., DeletionOutcome]

DELETERS: dict[ResourceType, Deleter] = {
    ResourceType.INSTANCE: delete_instance,
    ResourceType.SECURITY_GROUP: delete_security_group,
    ResourceType.NAT_GATEWAY: delete_nat_gateway,
    ResourceType.ELASTIC_IP: release_elastic_ip,
    ResourceType.INTERNET_GATEWAY: delete_internet_gateway,
    ResourceType.SUBNET: delete_subnet,
    ResourceType.ROUTE_TABLE: delete_route_table,
    ResourceType.VPC: delete_vpc,
}

# Deleters that poll through the retry driver
DRIVER_BACKED = {ResourceType.NAT_GATEWAY, ResourceType.ELASTIC_IP}


def delete_group_members(
    clients: AwsClients,
    group_key: str,
    config: ReclaimConfig,
    report: ReclaimReport,
) -> None:
    """Steps 1 and 2: classify the group and delete members in order."""
    names = config.names_for(group_key)
    classification = classify(clients, names.resource_group)
    report.group_found = classification.group_found
    driver = RetryDriver(config.retry_budget)

    for resource_type in config.deletion_order:
        members: list[ResourceIdentifier] = classification.members(resource_type)
        if resource_type is ResourceType.ELASTIC_IP:
            members = find_elastic_ips(
                clients, group_key, config.resource_group_tag_key, members
            )
        if not members:
            continue

        deleter = DELETERS[resource_type]
        kwargs = {"driver": driver} if resource_type in DRIVER_BACKED else {}
        logger.info(
            f"Deleting {len(members)} {resource_type.name.lower()} resources",
            extra={"group_key": group_key, "resource_type": resource_type.value},
        )
        for identifier in members:
            outcome = deleter(clients, identifier, config, **kwargs)
            report.record(
                resource_type.name.lower(), identifier.resource_id, outcome
            )


def delete_fixed_tail(
    clients: AwsClients,
    group_key: str,
    config: ReclaimConfig,
    report: ReclaimReport,
) -> None:
    """Step 3: resources named after the group key, never group members."""
    names = config.names_for(group_key)

    report.record(
        "eks_node_group",
        names.node_group,
        delete_node_group(clients, names.cluster, names.node_group, config),
    )
    report.record(
        "eks_cluster", names.cluster, delete_cluster(clients, names.cluster, config)
    )
    for role_name in names.iam_roles:
        report.record("iam_role", role_name, delete_role(clients, role_name, config))
    report.record(
        "log_group", names.log_group, delete_log_group(clients, names.log_group, config)
    )
    report.record(
        "resource_group",
        names.resource_group,
        delete_resource_group(clients, names.resource_group, config),
    )
    report.record(
        "key_pair", names.key_pair, delete_key_pair(clients, names.key_pair, config)
    )


def reclaim_all(
    group_key: str,
    region: str,
    credentials: Credentials | None = None,
    config: ReclaimConfig | None = None,
    clients: AwsClients | None = None,
) -> ReclaimReport:
    """
    Delete every resource created by one test run.

    Raises:
        ReclaimError: on the first fatal provider error, or when the
            provider cannot be reached at all; nothing after it is attempted.

    Returns:
        ReclaimReport listing every resource attempted and its outcome.
        Resources left in place after exhausted retries or a best-effort
        refusal are reported, not raised.
    """
    if not group_key:
        raise ValueError("group_key must be a non-empty string")
    config = config or ReclaimConfig()
    clients = clients or AwsClients(region, credentials)
    report = ReclaimReport(group_key=group_key, region=region, dry_run=config.dry_run)
    start_time = time.time()

    logger.info(
        f"Starting teardown of {group_key} (DRY_RUN={config.dry_run})",
        extra={"group_key": group_key, "region": region},
    )

    try:
        try:
            delete_group_members(clients, group_key, config, report)
            delete_fixed_tail(clients, group_key, config, report)
        except BotoCoreError as e:
            # Credentials, endpoint and transport failures carry no error code
            raise ReclaimError(f"{group_key}: {e}") from e
    except ReclaimError as e:
        logger.error(
            "Teardown aborted",
            extra={
                "group_key": group_key,
                "region": region,
                "resource_type": e.resource_type,
                "resource_id": e.resource_id,
                "error_code": e.error_code,
                "error": str(e),
            },
        )
        raise

    report.duration_seconds = time.time() - start_time
    if report.given_up:
        logger.warning(
            f"{len(report.given_up)} resources left in place",
            extra={
                "group_key": group_key,
                "resources": [r.resource_id for r in report.given_up],
            },
        )
    logger.info(
        f"Completed teardown of {group_key} in {report.duration_seconds:.1f}s: "
        f"{len(report.records)} resources processed",
        extra={"group_key": group_key, "region": region},
    )
    return report
