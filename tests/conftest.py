"""Pytest configuration and shared fixtures for resource reclaim tests."""

from __future__ import annotations
from typing import Any, Callable
from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError, WaiterError

from aws_resource_reclaim.models import (
    ReclaimConfig,
    ResourceIdentifier,
    ResourceType,
    RetryBudget,
)

REGION = "us-east-1"
ACCOUNT = "123456789012"

ARN_PREFIXES = {
    ResourceType.INSTANCE: "instance",
    ResourceType.SECURITY_GROUP: "security-group",
    ResourceType.NAT_GATEWAY: "natgateway",
    ResourceType.ELASTIC_IP: "elastic-ip",
    ResourceType.INTERNET_GATEWAY: "internet-gateway",
    ResourceType.SUBNET: "subnet",
    ResourceType.ROUTE_TABLE: "route-table",
    ResourceType.VPC: "vpc",
}


def make_arn(resource_type: ResourceType, resource_id: str) -> str:
    """Build an EC2 ARN the way resource-groups lists it."""
    return f"arn:aws:ec2:{REGION}:{ACCOUNT}:{ARN_PREFIXES[resource_type]}/{resource_id}"


def make_client_error(
    code: str, operation: str = "Operation", message: str = ""
) -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": message or f"{code} error"}}, operation
    )


def make_waiter_error(name: str = "waiter") -> WaiterError:
    return WaiterError(
        name=name, reason="Max attempts exceeded", last_response={}
    )


class GroupListingBuilder:
    """Builder for resource-groups ListGroupResources pages.

    Produces the page shape the paginator yields so classification can be
    tested without an AWS account.
    """

    def __init__(self):
        self._resources: list[dict[str, Any]] = []

    def with_resource(
        self, resource_type: ResourceType, resource_id: str
    ) -> GroupListingBuilder:
        """Add a known member."""
        self._resources.append(
            {
                "Identifier": {
                    "ResourceArn": make_arn(resource_type, resource_id),
                    "ResourceType": resource_type.value,
                }
            }
        )
        return self

    def with_raw(self, type_string: str, arn: str) -> GroupListingBuilder:
        """Add a member with an arbitrary type string."""
        self._resources.append(
            {"Identifier": {"ResourceArn": arn, "ResourceType": type_string}}
        )
        return self

    def build(self) -> list[dict[str, Any]]:
        """Single page listing."""
        return [{"Resources": self._resources}]


@pytest.fixture
def client_error() -> Callable[..., ClientError]:
    """Factory for botocore ClientErrors carrying a provider error code."""
    return make_client_error


@pytest.fixture
def waiter_error() -> Callable[..., WaiterError]:
    """Factory for botocore WaiterErrors."""
    return make_waiter_error


@pytest.fixture
def identifier() -> Callable[[ResourceType, str], ResourceIdentifier]:
    """Factory for group member identifiers."""

    def _make(resource_type: ResourceType, resource_id: str) -> ResourceIdentifier:
        return ResourceIdentifier(resource_type, make_arn(resource_type, resource_id))

    return _make


@pytest.fixture
def group_listing() -> GroupListingBuilder:
    """Fixture that returns a new GroupListingBuilder."""
    return GroupListingBuilder()


@pytest.fixture
def config() -> ReclaimConfig:
    """Live-mode config with the standard budget but no delay between attempts."""
    return ReclaimConfig(dry_run=False, retry_budget=RetryBudget(30, 0))


@pytest.fixture
def dry_run_config() -> ReclaimConfig:
    return ReclaimConfig(dry_run=True, retry_budget=RetryBudget(30, 0))


@pytest.fixture
def mock_clients():
    """AwsClients stand-in whose service clients are plain Mocks.

    By default the resource group lists nothing, elastic IP lookups return
    nothing and IAM roles have no policies.
    """
    clients = Mock()
    clients.region = REGION
    clients.ec2 = Mock()
    clients.iam = Mock()
    clients.eks = Mock()
    clients.logs = Mock()
    clients.resource_groups = Mock()

    clients.resource_groups.get_paginator.return_value.paginate.return_value = [
        {"Resources": []}
    ]
    clients.ec2.describe_addresses.return_value = {"Addresses": []}

    iam_pages = {
        "list_attached_role_policies": [{"AttachedPolicies": []}],
        "list_role_policies": [{"PolicyNames": []}],
    }

    def _iam_paginator(name):
        paginator = Mock()
        paginator.paginate.return_value = iam_pages[name]
        return paginator

    clients.iam.get_paginator.side_effect = _iam_paginator
    clients.iam_pages = iam_pages
    return clients
