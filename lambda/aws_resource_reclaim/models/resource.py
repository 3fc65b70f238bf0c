"""Resource identifiers, types and deletion outcomes."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from ..utils.aws_helpers import resource_id_from_arn


class ResourceType(Enum):
    """Group member types handled by the orchestrator, keyed by type string."""

    INSTANCE = "AWS::EC2::Instance"
    SECURITY_GROUP = "AWS::EC2::SecurityGroup"
    NAT_GATEWAY = "AWS::EC2::NatGateway"
    ELASTIC_IP = "AWS::EC2::EIP"
    INTERNET_GATEWAY = "AWS::EC2::InternetGateway"
    SUBNET = "AWS::EC2::Subnet"
    ROUTE_TABLE = "AWS::EC2::RouteTable"
    VPC = "AWS::EC2::VPC"

    @classmethod
    def from_type_string(cls, type_string: str) -> ResourceType | None:
        """Map a fully-qualified type string to a member, None if unknown."""
        try:
            return cls(type_string)
        except ValueError:
            return None


@dataclass(frozen=True)
class ResourceIdentifier:
    """A tagged group member as listed by the provider."""

    resource_type: ResourceType
    arn: str

    @property
    def resource_id(self) -> str:
        return resource_id_from_arn(self.arn)


class DeletionOutcome(Enum):
    """Result of a deletion attempt."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"
    RETRYABLE = "retryable"
    FATAL = "fatal"
    # Terminal driver state once the retry budget is exhausted
    GIVEN_UP = "given_up"

    @property
    def is_done(self) -> bool:
        return self in (DeletionOutcome.DELETED, DeletionOutcome.NOT_FOUND)


@dataclass(frozen=True)
class RetryBudget:
    """Fixed attempt count and fixed delay between attempts."""

    max_attempts: int = 30
    delay_seconds: float = 5

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")
