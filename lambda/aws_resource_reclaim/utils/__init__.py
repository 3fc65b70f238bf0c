"""Utility functions for resource reclamation."""

from .aws_helpers import (
    AwsClients,
    Credentials,
    get_error_code,
    resource_id_from_arn,
)
from .logging_config import get_logger

__all__ = [
    "AwsClients",
    "Credentials",
    "get_error_code",
    "resource_id_from_arn",
    "get_logger",
]
