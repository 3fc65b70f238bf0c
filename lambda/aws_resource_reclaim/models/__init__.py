"""Data models for resource reclamation."""

from .resource import (
    DeletionOutcome,
    ResourceIdentifier,
    ResourceType,
    RetryBudget,
)
from .config import ReclaimConfig, ResourceNames
from .report import DeletionRecord, ReclaimReport

__all__ = [
    "DeletionOutcome",
    "ResourceIdentifier",
    "ResourceType",
    "RetryBudget",
    "ReclaimConfig",
    "ResourceNames",
    "DeletionRecord",
    "ReclaimReport",
]
