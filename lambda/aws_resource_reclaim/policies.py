"""Provider error-code dispatch tables.

Each resource type maps the EC2/IAM/EKS/Logs error codes it can receive to a
DeletionOutcome. Codes that are not listed fall back to the table default,
which is FATAL everywhere except the VPC: VPC removal is best effort and an
unexpected refusal leaves the VPC behind without failing the teardown.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping

from botocore.exceptions import ClientError

from .errors import ReclaimError
from .models import DeletionOutcome
from .utils import get_error_code, get_logger
from .utils.aws_helpers import get_error_message

logger = get_logger()

NOT_FOUND = DeletionOutcome.NOT_FOUND
RETRYABLE = DeletionOutcome.RETRYABLE
FATAL = DeletionOutcome.FATAL


@dataclass(frozen=True)
class ErrorPolicy:
    """Maps provider error codes for one resource kind to outcomes."""

    name: str
    codes: Mapping[str, DeletionOutcome] = field(default_factory=dict)
    default: DeletionOutcome = FATAL

    def classify(self, error: ClientError) -> DeletionOutcome:
        return self.codes.get(get_error_code(error), self.default)

    def handle(self, error: ClientError, resource_id: str) -> DeletionOutcome:
        """Classify and log an error; raise ReclaimError when it is fatal."""
        outcome = self.classify(error)
        error_code = get_error_code(error)
        extra = {
            "resource_type": self.name,
            "resource_id": resource_id,
            "error_code": error_code,
            "outcome": outcome.value,
        }

        if outcome is FATAL:
            logger.error(f"Failed to delete {self.name} {resource_id}", extra=extra)
            raise ReclaimError(
                f"{self.name} {resource_id}: {error_code}: {get_error_message(error)}",
                resource_type=self.name,
                resource_id=resource_id,
                error_code=error_code,
            ) from error

        if outcome is NOT_FOUND:
            logger.info(f"{self.name} {resource_id} already gone", extra=extra)
        elif outcome is RETRYABLE:
            logger.info(f"{self.name} {resource_id} not ready yet", extra=extra)
        else:
            logger.warning(
                f"Leaving {self.name} {resource_id} in place: {error}", extra=extra
            )
        return outcome


INSTANCE_POLICY = ErrorPolicy(
    "instance",
    {"InvalidInstanceID.NotFound": NOT_FOUND},
)

SECURITY_GROUP_POLICY = ErrorPolicy(
    "security_group",
    {
        "InvalidGroup.NotFound": NOT_FOUND,
        "InvalidGroupId.NotFound": NOT_FOUND,
    },
)

NAT_GATEWAY_POLICY = ErrorPolicy(
    "nat_gateway",
    {
        "InvalidNatGatewayID.NotFound": NOT_FOUND,
        "NatGatewayNotFound": NOT_FOUND,
        "DependencyViolation": RETRYABLE,
        "IncorrectState": RETRYABLE,
    },
)

ELASTIC_IP_POLICY = ErrorPolicy(
    "elastic_ip",
    {
        "InvalidAllocationID.NotFound": NOT_FOUND,
        "InvalidAddress.NotFound": NOT_FOUND,
        "InvalidIPAddress.InUse": RETRYABLE,
        "DependencyViolation": RETRYABLE,
        "IncorrectState": RETRYABLE,
    },
)

INTERNET_GATEWAY_POLICY = ErrorPolicy(
    "internet_gateway",
    {
        "InvalidInternetGatewayID.NotFound": NOT_FOUND,
        "Gateway.NotAttached": NOT_FOUND,
    },
)

SUBNET_POLICY = ErrorPolicy(
    "subnet",
    {"InvalidSubnetID.NotFound": NOT_FOUND},
)

NETWORK_INTERFACE_POLICY = ErrorPolicy(
    "network_interface",
    {
        "InvalidNetworkInterfaceID.NotFound": NOT_FOUND,
        "InvalidAttachmentID.NotFound": NOT_FOUND,
    },
)

ROUTE_TABLE_POLICY = ErrorPolicy(
    "route_table",
    {
        "InvalidRouteTableID.NotFound": NOT_FOUND,
        "InvalidAssociationID.NotFound": NOT_FOUND,
    },
)

VPC_POLICY = ErrorPolicy(
    "vpc",
    {
        "InvalidVpcID.NotFound": NOT_FOUND,
        "InvalidVpcID.Malformed": FATAL,
        "UnauthorizedOperation": FATAL,
    },
    default=DeletionOutcome.GIVEN_UP,
)

IAM_ROLE_POLICY = ErrorPolicy(
    "iam_role",
    {"NoSuchEntity": NOT_FOUND},
)

LOG_GROUP_POLICY = ErrorPolicy(
    "log_group",
    {"ResourceNotFoundException": NOT_FOUND},
)

NODE_GROUP_POLICY = ErrorPolicy(
    "eks_node_group",
    {"ResourceNotFoundException": NOT_FOUND},
)

CLUSTER_POLICY = ErrorPolicy(
    "eks_cluster",
    {"ResourceNotFoundException": NOT_FOUND},
)

KEY_PAIR_POLICY = ErrorPolicy(
    "key_pair",
    {"InvalidKeyPair.NotFound": NOT_FOUND},
)

RESOURCE_GROUP_POLICY = ErrorPolicy(
    "resource_group",
    {"NotFoundException": NOT_FOUND},
)
