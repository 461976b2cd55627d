"""
Study Planner core.

Provides:
- Subject registry with rolling performance scores
- Proportional schedule generation with a per-subject floor
- Adaptive rebalancing driven by performance thresholds
- CSV persistence
"""

from src.planner.allocator import AdjustmentConfig, AllocationEngine
from src.planner.errors import (
    DuplicateSubjectError,
    InvalidFormatError,
    InvalidHoursError,
    PlannerError,
    PlannerErrorKind,
    StorageError,
    SubjectNotFoundError,
)
from src.planner.registry import StudyPlanner, seed_demo_subjects
from src.planner.schedule import Schedule
from src.planner.subject import Subject

__all__ = [
    "AdjustmentConfig",
    "AllocationEngine",
    "DuplicateSubjectError",
    "InvalidFormatError",
    "InvalidHoursError",
    "PlannerError",
    "PlannerErrorKind",
    "Schedule",
    "StorageError",
    "StudyPlanner",
    "Subject",
    "SubjectNotFoundError",
    "seed_demo_subjects",
]
