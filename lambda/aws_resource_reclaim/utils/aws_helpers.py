"""AWS helper functions."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

import boto3
from botocore.exceptions import ClientError

from .logging_config import get_logger

logger = get_logger()


@dataclass(frozen=True)
class Credentials:
    """Static access key pair supplied by the caller."""

    access_key: str
    secret_key: str
    session_token: str | None = None

    def __repr__(self) -> str:
        return f"Credentials(access_key={self.access_key[:4]}****)"


class AwsClients:
    """One boto3 session per teardown, one client per service.

    Clients are created lazily and reused by every deleter. Without
    credentials the default boto3 credential chain applies.
    """

    def __init__(self, region: str, credentials: Credentials | None = None):
        self.region = region
        if credentials:
            self._session = boto3.session.Session(
                aws_access_key_id=credentials.access_key,
                aws_secret_access_key=credentials.secret_key,
                aws_session_token=credentials.session_token,
                region_name=region,
            )
        else:
            self._session = boto3.session.Session(region_name=region)
        self._clients: dict[str, Any] = {}

    def client(self, service: str) -> Any:
        """Return the cached client for an AWS service."""
        if service not in self._clients:
            logger.debug(
                "Creating AWS client",
                extra={"service": service, "region": self.region},
            )
            self._clients[service] = self._session.client(service)
        return self._clients[service]

    @property
    def ec2(self) -> Any:
        return self.client("ec2")

    @property
    def iam(self) -> Any:
        return self.client("iam")

    @property
    def eks(self) -> Any:
        return self.client("eks")

    @property
    def logs(self) -> Any:
        return self.client("logs")

    @property
    def resource_groups(self) -> Any:
        return self.client("resource-groups")


def get_error_code(error: ClientError) -> str:
    """Extract the provider error code from a ClientError."""
    return error.response.get("Error", {}).get("Code", "")


def get_error_message(error: ClientError) -> str:
    """Extract the provider error message, falling back to str(error)."""
    return error.response.get("Error", {}).get("Message") or str(error)


def resource_id_from_arn(arn: str) -> str:
    """Provider-native ID is the last path segment of the ARN."""
    return arn.rsplit("/", 1)[-1]
