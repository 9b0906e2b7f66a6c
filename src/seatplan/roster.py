from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class Student:
    student_id: str
    class_id: str


@dataclass(slots=True)
class ClassGroup:
    class_id: str
    student_count: int

    def __post_init__(self) -> None:
        self.class_id = str(self.class_id)
        if isinstance(self.student_count, bool) or not isinstance(
            self.student_count, int
        ):
            raise TypeError("student_count must be an integer.")
        if self.student_count < 0:
            raise ValueError(f"Class {self.class_id!r} has a negative student count.")

    def students(self, prefix: str = "S") -> list[Student]:
        """Students in seating order: {prefix}1 .. {prefix}N."""
        return [
            Student(student_id=f"{prefix}{i + 1}", class_id=self.class_id)
            for i in range(self.student_count)
        ]


class ClassRoster:
    """Ordered set of classes and the students each one brings."""

    def __init__(
        self, classes: Iterable[ClassGroup], student_id_prefix: str = "S"
    ) -> None:
        self.classes: list[ClassGroup] = list(classes)
        self.student_id_prefix = student_id_prefix
        seen: set[str] = set()
        for group in self.classes:
            if group.class_id in seen:
                raise ValueError(f"Duplicate class id {group.class_id!r} in roster.")
            seen.add(group.class_id)

    def __len__(self) -> int:
        return len(self.classes)

    @property
    def class_ids(self) -> list[str]:
        return [c.class_id for c in self.classes]

    def total_students(self) -> int:
        return sum(c.student_count for c in self.classes)

    def students_by_class(self) -> dict[str, list[Student]]:
        return {c.class_id: c.students(self.student_id_prefix) for c in self.classes}

    def select(self, class_ids: Sequence[str]) -> ClassRoster:
        """Roster restricted to `class_ids`, keeping roster order."""
        wanted = set(class_ids)
        unknown = wanted - set(self.class_ids)
        if unknown:
            raise KeyError(f"Unknown class ids: {sorted(unknown)}")
        return ClassRoster(
            [c for c in self.classes if c.class_id in wanted],
            student_id_prefix=self.student_id_prefix,
        )
