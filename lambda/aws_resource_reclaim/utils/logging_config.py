"""Logging configuration using AWS Lambda Powertools."""

import os

from aws_lambda_powertools import Logger

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Shared by the Lambda handler and the CLI
logger = Logger(
    service="aws-resource-reclaim",
    level=LOG_LEVEL,
)


def get_logger():
    """Get the configured logger instance.

    Returns Powertools Logger with structured JSON output; pass
    ``extra={...}`` for per-resource fields.
    """
    return logger
