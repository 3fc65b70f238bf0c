"""Bounded retry driver for resources with asynchronous deletion.

NAT gateways and elastic IPs settle on the provider side after the delete
call returns. The driver re-describes the resource on every attempt and
stops once it is gone, when the provider reports it already deleted, or
when the retry budget runs out. Running out of budget is not an error: the
resource may be left behind and the teardown still succeeds.
"""

from __future__ import annotations
import time
from typing import Callable

from botocore.exceptions import ClientError, WaiterError

from .models import DeletionOutcome, RetryBudget
from .policies import ErrorPolicy
from .utils import get_logger

logger = get_logger()


class RetryDriver:
    """Describe → delete → wait loop with a fixed attempt count and delay."""

    def __init__(
        self,
        budget: RetryBudget,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.budget = budget
        self._sleep = sleep

    def run(
        self,
        resource_id: str,
        probe: Callable[[], bool],
        remove: Callable[[], None],
        policy: ErrorPolicy,
        settle: Callable[[], None] | None = None,
    ) -> DeletionOutcome:
        """Drive one resource to deletion.

        Args:
            resource_id: provider-native ID, used for logging
            probe: returns True while the resource still needs deleting
            remove: issues the delete call
            policy: error table used for both probe and remove failures
            settle: optional provider waiter run after a successful delete

        Returns:
            DELETED after an accepted delete call (and a settled waiter),
            NOT_FOUND when the resource was already gone, GIVEN_UP when
            the budget is exhausted. Fatal errors raise ReclaimError.
        """
        for attempt in range(1, self.budget.max_attempts + 1):
            if attempt > 1:
                self._sleep(self.budget.delay_seconds)

            logger.debug(
                f"Checking {policy.name} {resource_id}",
                extra={
                    "resource_type": policy.name,
                    "resource_id": resource_id,
                    "attempt": attempt,
                    "max_attempts": self.budget.max_attempts,
                },
            )

            try:
                present = probe()
            except ClientError as e:
                if policy.handle(e, resource_id) is DeletionOutcome.NOT_FOUND:
                    return DeletionOutcome.NOT_FOUND
                continue

            if not present:
                logger.info(
                    f"{policy.name} {resource_id} deleted",
                    extra={
                        "resource_type": policy.name,
                        "resource_id": resource_id,
                        "attempt": attempt,
                    },
                )
                return DeletionOutcome.NOT_FOUND

            try:
                remove()
            except ClientError as e:
                outcome = policy.handle(e, resource_id)
                if outcome is DeletionOutcome.NOT_FOUND:
                    return outcome
                continue

            if settle is None:
                return DeletionOutcome.DELETED

            try:
                settle()
            except WaiterError as e:
                # Next probe re-describes and converges
                logger.info(
                    f"Timed out waiting for {policy.name} {resource_id}: {e}",
                    extra={
                        "resource_type": policy.name,
                        "resource_id": resource_id,
                        "attempt": attempt,
                    },
                )
                continue

            return DeletionOutcome.DELETED

        # TODO: decide with product owners whether exhausting the budget
        # should fail the teardown instead of leaving the resource behind.
        logger.warning(
            f"Giving up on {policy.name} {resource_id}",
            extra={
                "resource_type": policy.name,
                "resource_id": resource_id,
                "max_attempts": self.budget.max_attempts,
                "outcome": DeletionOutcome.GIVEN_UP.value,
            },
        )
        return DeletionOutcome.GIVEN_UP
