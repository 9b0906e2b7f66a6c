# seatplan/result_types.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from seatplan.roster import Student


@dataclass
class AllocationResult:
    """Structured output of an allocation run."""

    # seat key -> student; each seat key appears once
    assignment: dict[str, Student] = field(default_factory=dict)
    # class id -> students left without a seat; fully seated classes are absent
    unseated: dict[str, int] = field(default_factory=dict)

    @property
    def total_seated(self) -> int:
        return len(self.assignment)

    @property
    def total_unseated(self) -> int:
        return sum(self.unseated.values())

    def seated_counts(self) -> dict[str, int]:
        return dict(Counter(s.class_id for s in self.assignment.values()))

    def seated_count(self, class_id: str) -> int:
        return sum(1 for s in self.assignment.values() if s.class_id == class_id)
