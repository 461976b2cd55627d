"""
Study planner: the subject registry and its operations.

The planner owns its subjects in an insertion-ordered, name-keyed dict and
delegates schedule math to the AllocationEngine and file I/O to storage.
Every mutating operation validates before it changes anything.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from loguru import logger

from src.planner.allocator import DEFAULT_MIN_SLOT_HOURS, AdjustmentConfig, AllocationEngine
from src.planner.errors import DuplicateSubjectError, InvalidHoursError, SubjectNotFoundError
from src.planner.schedule import Schedule
from src.planner.storage import load_subjects, save_subjects
from src.planner.subject import DEFAULT_HISTORY_WINDOW, DEFAULT_PERFORMANCE, Subject

if TYPE_CHECKING:
    from config import PlannerSettings

DEFAULT_TOTAL_DAILY_HOURS = 4.0

DEMO_SUBJECTS = [
    ("Math", 9, 10, 80.0),
    ("Physics", 8, 9, 70.0),
    ("History", 4, 5, 90.0),
    ("English", 3, 4, 95.0),
]


class StudyPlanner:
    """Registry of subjects plus the daily hours budget."""

    def __init__(
        self,
        total_daily_hours: float = DEFAULT_TOTAL_DAILY_HOURS,
        engine: Optional[AllocationEngine] = None,
        history_window: int = DEFAULT_HISTORY_WINDOW,
        default_performance: float = DEFAULT_PERFORMANCE,
    ):
        """
        Initialize an empty planner.

        Args:
            total_daily_hours: Budget distributed by generate_schedule
            engine: AllocationEngine or None for defaults
            history_window: Scores kept per subject for the rolling mean
            default_performance: Score for subjects added without one
        """
        self._subjects: dict[str, Subject] = {}
        self._total_daily_hours = 0.0
        self.total_daily_hours = total_daily_hours
        self.engine = engine or AllocationEngine()
        self.history_window = history_window
        self.default_performance = default_performance

    @classmethod
    def from_settings(cls, settings: PlannerSettings) -> StudyPlanner:
        return cls(
            total_daily_hours=settings.total_daily_hours,
            engine=AllocationEngine(min_slot_hours=settings.min_slot_hours),
            history_window=settings.history_window,
            default_performance=settings.default_performance,
        )

    # =========================================================================
    # Registry
    # =========================================================================

    def __len__(self) -> int:
        return len(self._subjects)

    def __contains__(self, name: object) -> bool:
        return name in self._subjects

    @property
    def subjects(self) -> tuple[Subject, ...]:
        """Subjects in insertion order."""
        return tuple(self._subjects.values())

    def add_subject(
        self,
        name: str,
        difficulty: int,
        importance: int,
        performance: Optional[float] = None,
    ) -> Subject:
        """
        Register a new subject.

        Raises:
            DuplicateSubjectError: A subject with this name exists
        """
        if name in self._subjects:
            raise DuplicateSubjectError(name)
        subject = Subject(
            name=name,
            difficulty=difficulty,
            importance=importance,
            performance_score=self.default_performance if performance is None else performance,
            history_window=self.history_window,
        )
        self._subjects[name] = subject
        logger.debug(f"Added subject {subject.summary()}")
        return subject

    def remove_subject(self, name: str) -> bool:
        """Remove a subject; returns False if it was not registered."""
        removed = self._subjects.pop(name, None)
        if removed is not None:
            logger.debug(f"Removed subject {name}")
        return removed is not None

    def find_subject(self, name: str) -> Optional[Subject]:
        return self._subjects.get(name)

    def get_subject(self, name: str) -> Subject:
        subject = self._subjects.get(name)
        if subject is None:
            raise SubjectNotFoundError(name)
        return subject

    @property
    def total_daily_hours(self) -> float:
        return self._total_daily_hours

    @total_daily_hours.setter
    def total_daily_hours(self, hours: float) -> None:
        if hours < 0.0:
            raise InvalidHoursError(hours)
        self._total_daily_hours = float(hours)

    # =========================================================================
    # Allocation
    # =========================================================================

    def generate_schedule(self) -> Schedule:
        return self.engine.generate_schedule(list(self._subjects.values()), self._total_daily_hours)

    def adaptive_adjust(self, config: Optional[AdjustmentConfig] = None) -> Schedule:
        """Apply one adaptive pass to the current allocations."""
        self.engine.adaptive_adjust(list(self._subjects.values()), self._total_daily_hours, config)
        return self.current_schedule()

    def current_schedule(self) -> Schedule:
        """Snapshot of each subject's allocated hours."""
        return Schedule({name: subject.allocated_hours for name, subject in self._subjects.items()})

    # =========================================================================
    # Performance
    # =========================================================================

    def record_performance(self, name: str, score: float) -> float:
        """
        Record a score for a subject.

        Raises:
            SubjectNotFoundError: No such subject
        """
        subject = self.get_subject(name)
        updated = subject.record_score(score)
        logger.debug(f"Recorded {score} for {name}; rolling score {updated:.1f}")
        return updated

    def set_performance(self, name: str, score: float) -> None:
        self.get_subject(name).set_performance(score)

    # =========================================================================
    # Persistence
    # =========================================================================

    def save(self, path: str | Path) -> None:
        save_subjects(path, self._subjects.values())

    def load(self, path: str | Path) -> None:
        """
        Replace all subjects with the contents of path.

        The registry is only replaced once the whole file has parsed; on any
        error the current subjects are left untouched.

        Raises:
            StorageError: The file cannot be read
            InvalidFormatError: A data line is malformed
            DuplicateSubjectError: The file names a subject twice
        """
        loaded: dict[str, Subject] = {}
        for subject in load_subjects(path, self.history_window):
            if subject.name in loaded:
                raise DuplicateSubjectError(subject.name)
            loaded[subject.name] = subject
        self._subjects = loaded


def seed_demo_subjects(planner: StudyPlanner) -> None:
    """Add the demo subject set and reset the budget to 4 hours."""
    for name, difficulty, importance, performance in DEMO_SUBJECTS:
        if name not in planner:
            planner.add_subject(name, difficulty, importance, performance)
    planner.total_daily_hours = DEFAULT_TOTAL_DAILY_HOURS
