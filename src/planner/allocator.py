"""
Allocation Engine for the Study Planner.

Distributes a daily hours budget across subjects in proportion to their
priority weight, then nudges the result with an adaptive pass:

1. Proportional share: weight / total_weight × budget
2. Floor every share at min_slot_hours (default 0.25 h)
3. Rescale so the shares sum to the budget again
4. Round to 2 decimals

The rescale in step 3 can push a floored share back under the floor for very
skewed weights. That is accepted; the floor is not re-applied.

Adaptive adjustment works on the hours each subject currently holds:
- performance < low_threshold  → hours × boost_factor
- performance > high_threshold → hours × reduce_factor
then clamps each value to [min_hours, budget] and rescales to the budget.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from loguru import logger

from src.planner.schedule import Schedule
from src.planner.subject import Subject, clamp, round_hours

DEFAULT_MIN_SLOT_HOURS = 0.25


@dataclass
class AdjustmentConfig:
    """Thresholds and factors for the adaptive adjustment pass."""
    low_threshold: float = 70.0
    high_threshold: float = 90.0
    boost_factor: float = 1.15
    reduce_factor: float = 0.9
    min_hours: float = 0.1


class AllocationEngine:
    """
    Computes schedules from subject weights.

    The engine holds no subject state; it reads and writes the
    ``allocated_hours`` of the subjects it is given.
    """

    def __init__(self, min_slot_hours: float = DEFAULT_MIN_SLOT_HOURS):
        """
        Initialize the engine.

        Args:
            min_slot_hours: Minimum share given to every subject before rescaling
        """
        self.min_slot_hours = min_slot_hours

    @staticmethod
    def compute_weights(subjects: Iterable[Subject]) -> dict[str, float]:
        """Priority weight per subject name."""
        return {subject.name: subject.priority_weight for subject in subjects}

    def generate_schedule(self, subjects: list[Subject], total_hours: float) -> Schedule:
        """
        Distribute total_hours across subjects and write the result back.

        Args:
            subjects: Subjects to schedule (mutated in place)
            total_hours: Daily budget, >= 0

        Returns:
            Schedule covering every subject
        """
        schedule = Schedule()
        if not subjects:
            return schedule

        weights_by_name = self.compute_weights(subjects)
        weights = [weights_by_name[subject.name] for subject in subjects]
        total_weight = sum(weights)

        if total_weight <= 0.0:
            per_subject = total_hours / len(subjects)
            logger.warning(
                f"Total weight {total_weight:.2f} is not positive; "
                f"splitting {total_hours:.2f}h evenly"
            )
            for subject in subjects:
                subject.allocated_hours = per_subject
                schedule.allocations[subject.name] = per_subject
            return schedule

        raw = [
            max((weight / total_weight) * total_hours, self.min_slot_hours)
            for weight in weights
        ]

        raw_sum = sum(raw)
        if raw_sum > 0.0:
            scale = total_hours / raw_sum
            raw = [hours * scale for hours in raw]

        for subject, hours in zip(subjects, raw):
            rounded = round_hours(hours)
            subject.allocated_hours = rounded
            schedule.allocations[subject.name] = rounded

        logger.info(
            f"Generated schedule for {len(subjects)} subjects "
            f"({schedule.total_hours:.2f}/{total_hours:.2f}h)"
        )
        logger.debug(schedule.render())
        return schedule

    def adaptive_adjust(
        self,
        subjects: list[Subject],
        total_hours: float,
        config: Optional[AdjustmentConfig] = None,
    ) -> None:
        """
        Rebalance current allocations by performance, then rescale to budget.

        Args:
            subjects: Subjects whose allocated_hours are adjusted in place
            total_hours: Daily budget the result must sum to
            config: AdjustmentConfig or None for defaults
        """
        config = config or AdjustmentConfig()
        boosted = reduced = 0

        for subject in subjects:
            hours = subject.allocated_hours
            if subject.performance_score < config.low_threshold:
                hours *= config.boost_factor
                boosted += 1
            elif subject.performance_score > config.high_threshold:
                hours *= config.reduce_factor
                reduced += 1
            subject.allocated_hours = clamp(hours, config.min_hours, total_hours)

        current_total = sum(subject.allocated_hours for subject in subjects)
        if current_total <= 0:
            logger.debug("Adaptive adjustment skipped rescale: no allocated hours")
            return

        scale = total_hours / current_total
        for subject in subjects:
            subject.allocated_hours = round_hours(subject.allocated_hours * scale)

        logger.info(
            f"Adaptive adjustment: {boosted} boosted, {reduced} reduced "
            f"(thresholds {config.low_threshold:.0f}/{config.high_threshold:.0f})"
        )
