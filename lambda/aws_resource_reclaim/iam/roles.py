"""IAM role deletion.

A role cannot be deleted while managed policies are attached or inline
policies exist, so each role goes through three ordered steps: detach
managed policies, delete inline policies, delete the role.
"""

from __future__ import annotations

from botocore.exceptions import ClientError

from ..models import DeletionOutcome, ReclaimConfig
from ..policies import IAM_ROLE_POLICY
from ..utils import AwsClients, get_logger

logger = get_logger()


def _attached_policy_arns(iam, role_name: str) -> list[str]:
    paginator = iam.get_paginator("list_attached_role_policies")
    return [
        policy["PolicyArn"]
        for page in paginator.paginate(RoleName=role_name)
        for policy in page["AttachedPolicies"]
    ]


def _inline_policy_names(iam, role_name: str) -> list[str]:
    paginator = iam.get_paginator("list_role_policies")
    return [
        name
        for page in paginator.paginate(RoleName=role_name)
        for name in page["PolicyNames"]
    ]


def delete_role(
    clients: AwsClients, role_name: str, config: ReclaimConfig
) -> DeletionOutcome:
    """Detach managed policies, delete inline policies, then delete the role."""
    iam = clients.iam

    try:
        policy_arns = _attached_policy_arns(iam, role_name)
        if config.dry_run:
            inline_names = _inline_policy_names(iam, role_name)
            logger.info(
                f"[DRY-RUN] Would delete IAM role: {role_name}",
                extra={
                    "dry_run": True,
                    "resource_id": role_name,
                    "attached_policies": policy_arns,
                    "inline_policies": inline_names,
                },
            )
            return DeletionOutcome.DELETED

        for policy_arn in policy_arns:
            iam.detach_role_policy(RoleName=role_name, PolicyArn=policy_arn)
            logger.info(
                f"Detached policy from {role_name}",
                extra={"resource_id": role_name, "policy_arn": policy_arn},
            )

        for policy_name in _inline_policy_names(iam, role_name):
            iam.delete_role_policy(RoleName=role_name, PolicyName=policy_name)
            logger.info(
                f"Deleted inline policy from {role_name}",
                extra={"resource_id": role_name, "policy_name": policy_name},
            )

        iam.delete_role(RoleName=role_name)
    except ClientError as e:
        return IAM_ROLE_POLICY.handle(e, role_name)

    logger.info(f"Deleted IAM role: {role_name}", extra={"resource_id": role_name})
    return DeletionOutcome.DELETED
