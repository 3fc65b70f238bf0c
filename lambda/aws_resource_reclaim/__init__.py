"""Teardown of AWS resources created by module test runs."""

from .errors import ReclaimError
from .models import ReclaimConfig, ReclaimReport
from .orchestrator import reclaim_all
from .utils import Credentials

__all__ = [
    "Credentials",
    "ReclaimConfig",
    "ReclaimError",
    "ReclaimReport",
    "reclaim_all",
]
