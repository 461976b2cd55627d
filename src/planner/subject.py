"""
Subject model for the study planner.

A subject carries its difficulty and importance (both 1-10), a rolling
performance score (0-100) and the hours the allocation engine last gave it.

Priority weight:
    weight = difficulty × importance × (1.5 - performance / 100)

so a weak subject (low performance) weighs up to three times a mastered one.
"""

from __future__ import annotations

import math

MIN_LEVEL = 1
MAX_LEVEL = 10
MIN_SCORE = 0.0
MAX_SCORE = 100.0
DEFAULT_PERFORMANCE = 100.0
DEFAULT_HISTORY_WINDOW = 10


def clamp(value, low, high):
    """Clamp value into [low, high]; the lower bound wins if low > high."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def round_hours(value: float) -> float:
    """Round hours to 2 decimals, halves away from zero."""
    return math.copysign(math.floor(abs(value) * 100.0 + 0.5) / 100.0, value)


class Subject:
    """
    A study topic and its current allocation state.

    The name is fixed at construction; the planner keys subjects by it.
    Level and score setters clamp, so values stay in range however they
    are assigned.
    """

    def __init__(
        self,
        name: str,
        difficulty: int = 5,
        importance: int = 5,
        performance_score: float = DEFAULT_PERFORMANCE,
        history_window: int = DEFAULT_HISTORY_WINDOW,
    ):
        self._name = name
        self.difficulty = difficulty
        self.importance = importance
        self.performance_score = performance_score
        self.history_window = max(1, int(history_window))
        self._allocated_hours = 0.0
        self._history: list[float] = []

    def __repr__(self) -> str:
        return (
            f"Subject(name={self._name!r}, difficulty={self._difficulty}, "
            f"importance={self._importance}, performance_score={self._performance_score})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, level: int) -> None:
        self._difficulty = clamp(int(level), MIN_LEVEL, MAX_LEVEL)

    @property
    def importance(self) -> int:
        return self._importance

    @importance.setter
    def importance(self, level: int) -> None:
        self._importance = clamp(int(level), MIN_LEVEL, MAX_LEVEL)

    @property
    def performance_score(self) -> float:
        return self._performance_score

    @performance_score.setter
    def performance_score(self, score: float) -> None:
        self._performance_score = clamp(float(score), MIN_SCORE, MAX_SCORE)

    @property
    def allocated_hours(self) -> float:
        return self._allocated_hours

    @allocated_hours.setter
    def allocated_hours(self, hours: float) -> None:
        self._allocated_hours = max(0.0, float(hours))

    @property
    def history(self) -> tuple[float, ...]:
        """Most recent recorded scores, oldest first."""
        return tuple(self._history)

    @property
    def priority_weight(self) -> float:
        perf_factor = 1.5 - (self.performance_score / 100.0)
        return float(self.difficulty) * float(self.importance) * perf_factor

    def record_score(self, score: float) -> float:
        """
        Append a score to the rolling window and recompute the mean.

        Args:
            score: Raw score, clamped to 0-100

        Returns:
            The updated performance score
        """
        self._history.append(clamp(float(score), MIN_SCORE, MAX_SCORE))
        if len(self._history) > self.history_window:
            del self._history[: len(self._history) - self.history_window]
        self.performance_score = sum(self._history) / len(self._history)
        return self.performance_score

    def set_performance(self, score: float) -> None:
        """Override the performance score without touching history."""
        self.performance_score = score

    def summary(self) -> str:
        return (
            f"{self.name:<15} | diff: {self.difficulty:<2} imp: {self.importance:<2} "
            f"perf: {self.performance_score:<6.1f} hrs: {self.allocated_hours:<5.2f}"
        )
