"""
Schedule snapshot: subject name -> allocated hours.

Schedules are transient views over the planner. They iterate in name
order and can be merged with ``+``, which sums hours of shared subjects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Schedule:
    """One day's distribution of study hours."""

    allocations: dict[str, float] = field(default_factory=dict)

    @property
    def total_hours(self) -> float:
        return sum(self.allocations.values())

    def items(self) -> list[tuple[str, float]]:
        return sorted(self.allocations.items())

    def __getitem__(self, name: str) -> float:
        return self.allocations[name]

    def __contains__(self, name: object) -> bool:
        return name in self.allocations

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.allocations))

    def __len__(self) -> int:
        return len(self.allocations)

    def __add__(self, other: Schedule) -> Schedule:
        if not isinstance(other, Schedule):
            return NotImplemented
        merged = dict(self.allocations)
        for name, hours in other.allocations.items():
            merged[name] = merged.get(name, 0.0) + hours
        return Schedule(merged)

    def render(self) -> str:
        """Plain-text rendering used by logs and the menu."""
        lines = [f"Schedule (total {self.total_hours:.2f} hrs):"]
        for name, hours in self.items():
            lines.append(f"  - {name:<15} -> {hours:.2f} hrs")
        return "\n".join(lines)
