"""Lambda handler for resource group teardown."""

from __future__ import annotations
import json
import os
from typing import Any

from .errors import ReclaimError
from .models import ReclaimConfig
from .orchestrator import reclaim_all
from .utils import get_logger

logger = get_logger()


def _as_bool(value: Any) -> bool:
    """Event flags may arrive as JSON booleans or as strings."""
    if isinstance(value, bool):
        return value
    return str(value).lower() == "true"


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Tear down one test run's resources.

    Event:
        group_key: resource group key of the run (required)
        region: AWS region, defaults to the Lambda's own region
        dry_run: optional override of the DRY_RUN environment setting

    Credentials come from the function's execution role.
    """
    group_key = event.get("group_key")
    if not group_key:
        logger.error("Missing group_key in event")
        return {
            "statusCode": 400,
            "body": json.dumps({"error": "group_key is required"}),
        }

    region = event.get("region") or os.environ.get("AWS_REGION", "us-east-1")
    config = ReclaimConfig()
    if "dry_run" in event:
        config.dry_run = _as_bool(event["dry_run"])

    try:
        report = reclaim_all(group_key, region, config=config)
    except ReclaimError as e:
        logger.error(f"Lambda execution failed: {e}")
        raise

    return {"statusCode": 200, "body": json.dumps(report.to_dict())}
