"""Teardown report data classes."""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any

from .resource import DeletionOutcome


@dataclass
class DeletionRecord:
    """Outcome of one deleter invocation."""

    component: str
    resource_id: str
    outcome: DeletionOutcome

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["outcome"] = self.outcome.value
        return data


@dataclass
class ReclaimReport:
    """Everything attempted during one teardown."""

    group_key: str
    region: str
    dry_run: bool = False
    group_found: bool = False
    records: list[DeletionRecord] = field(default_factory=list)
    duration_seconds: float = 0.0

    def record(
        self, component: str, resource_id: str, outcome: DeletionOutcome
    ) -> None:
        self.records.append(DeletionRecord(component, resource_id, outcome))

    @property
    def given_up(self) -> list[DeletionRecord]:
        """Resources left in place: retries exhausted or a best-effort refusal."""
        return [r for r in self.records if r.outcome is DeletionOutcome.GIVEN_UP]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        counts: dict[str, int] = {}
        for rec in self.records:
            counts[rec.outcome.value] = counts.get(rec.outcome.value, 0) + 1
        return {
            "group_key": self.group_key,
            "region": self.region,
            "dry_run": self.dry_run,
            "group_found": self.group_found,
            "duration_seconds": round(self.duration_seconds, 2),
            "by_outcome": counts,
            "records": [rec.to_dict() for rec in self.records],
        }
