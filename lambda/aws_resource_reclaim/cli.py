"""Command-line entry point."""

from __future__ import annotations
import argparse
import os
import sys

from .errors import ReclaimError
from .models import ReclaimConfig
from .orchestrator import reclaim_all
from .utils import Credentials


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="aws-resource-reclaim",
        description="Delete every AWS resource created by one module test run",
    )
    parser.add_argument("group_key", help="Resource group key of the test run")
    parser.add_argument(
        "-r",
        "--region",
        default=os.environ.get("AWS_REGION", "eu-central-1"),
        help="AWS region (default: $AWS_REGION or eu-central-1)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log what would be deleted without deleting anything",
    )
    return parser.parse_args(argv)


def credentials_from_env() -> Credentials | None:
    """Key pair from AWS_ACCESS_KEY/AWS_SECRET_KEY, None to use the default chain."""
    access_key = os.environ.get("AWS_ACCESS_KEY")
    secret_key = os.environ.get("AWS_SECRET_KEY")
    if access_key and secret_key:
        return Credentials(access_key, secret_key)
    return None


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = ReclaimConfig()
    if args.dry_run:
        config.dry_run = True

    try:
        reclaim_all(args.group_key, args.region, credentials_from_env(), config)
    except ReclaimError as e:
        print(f"Teardown of {args.group_key} failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
