"""Resource group membership discovery and type bucketing."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from botocore.exceptions import ClientError

from .errors import ReclaimError
from .models import ResourceIdentifier, ResourceType
from .utils import AwsClients, get_error_code, get_logger
from .utils.aws_helpers import get_error_message

logger = get_logger()


@dataclass
class ClassificationResult:
    """Group members bucketed by type."""

    group_found: bool = False
    buckets: dict[ResourceType, list[ResourceIdentifier]] = field(
        default_factory=dict
    )

    def members(self, resource_type: ResourceType) -> list[ResourceIdentifier]:
        return self.buckets.get(resource_type, [])

    @property
    def total(self) -> int:
        return sum(len(ids) for ids in self.buckets.values())


def _page_identifiers(page: dict[str, Any]) -> list[dict[str, str]]:
    """Resource identifiers from one ListGroupResources page."""
    if "Resources" in page:
        return [
            item["Identifier"] for item in page["Resources"] if "Identifier" in item
        ]
    return page.get("ResourceIdentifiers", [])


def classify(clients: AwsClients, group_name: str) -> ClassificationResult:
    """
    List the members of a resource group and bucket them by type.

    A missing group is not an error: the run may never have created it.
    Any other listing failure raises ReclaimError, since deletion order
    cannot be trusted without a reliable inventory.
    """
    result = ClassificationResult()

    try:
        paginator = clients.resource_groups.get_paginator("list_group_resources")
        raw: list[dict[str, str]] = []
        for page in paginator.paginate(Group=group_name):
            raw.extend(_page_identifiers(page))
    except ClientError as e:
        error_code = get_error_code(e)
        if error_code == "NotFoundException":
            logger.info(
                "Resource group not found, continuing with fixed tail only",
                extra={"resource_group": group_name, "error_code": error_code},
            )
            return result
        logger.error(
            "Failed to list resource group members",
            extra={"resource_group": group_name, "error_code": error_code},
        )
        raise ReclaimError(
            f"listing {group_name}: {error_code}: {get_error_message(e)}",
            resource_type="resource_group",
            resource_id=group_name,
            error_code=error_code,
        ) from e

    result.group_found = True
    for item in raw:
        resource_type = ResourceType.from_type_string(item.get("ResourceType", ""))
        if resource_type is None:
            logger.warning(
                "Skipping unsupported resource type",
                extra={
                    "resource_group": group_name,
                    "type_string": item.get("ResourceType"),
                    "arn": item.get("ResourceArn"),
                },
            )
            continue
        result.buckets.setdefault(resource_type, []).append(
            ResourceIdentifier(resource_type, item["ResourceArn"])
        )

    logger.info(
        f"Classified {result.total} resources in {group_name}",
        extra={
            "resource_group": group_name,
            "by_type": {t.name: len(ids) for t, ids in result.buckets.items()},
        },
    )
    return result


def find_elastic_ips(
    clients: AwsClients,
    group_key: str,
    tag_key: str,
    listed: list[ResourceIdentifier] | None = None,
) -> list[ResourceIdentifier]:
    """
    Elastic IPs tagged with the group key, merged with any the group listed.

    Group membership does not reliably include elastic IPs, so they are
    looked up by tag. Identifiers are deduplicated by allocation ID.
    """
    found = list(listed or [])
    seen = {identifier.resource_id for identifier in found}

    try:
        addresses = clients.ec2.describe_addresses(
            Filters=[{"Name": f"tag:{tag_key}", "Values": [group_key]}]
        )["Addresses"]
    except ClientError as e:
        error_code = get_error_code(e)
        logger.error(
            "Failed to list elastic IPs",
            extra={"group_key": group_key, "error_code": error_code},
        )
        raise ReclaimError(
            f"listing elastic IPs for {group_key}: {error_code}: {get_error_message(e)}",
            resource_type="elastic_ip",
            error_code=error_code,
        ) from e

    for address in addresses:
        allocation_id = address.get("AllocationId")
        if not allocation_id or allocation_id in seen:
            continue
        seen.add(allocation_id)
        arn = f"arn:aws:ec2:{clients.region}::elastic-ip/{allocation_id}"
        found.append(ResourceIdentifier(ResourceType.ELASTIC_IP, arn))

    return found
