"""
Unit tests for the StudyPlanner registry.

Focused on registry semantics and error handling; persistence round trips
live in tests/integration.
"""

import pytest

from config import PlannerSettings
from src.planner import (
    AdjustmentConfig,
    DuplicateSubjectError,
    InvalidFormatError,
    InvalidHoursError,
    PlannerError,
    PlannerErrorKind,
    StudyPlanner,
    SubjectNotFoundError,
)


class TestSubjects:
    def test_add_and_find(self, planner):
        planner.add_subject("Math", 9, 10, 80.0)
        subject = planner.find_subject("Math")
        assert subject is not None
        assert subject.performance_score == 80.0
        assert "Math" in planner
        assert len(planner) == 1

    def test_default_performance(self, planner):
        assert planner.add_subject("Art", 2, 2).performance_score == 100.0

    def test_duplicate_rejected(self, planner):
        planner.add_subject("Math", 9, 10)
        with pytest.raises(DuplicateSubjectError) as exc:
            planner.add_subject("Math", 1, 1)
        assert exc.value.kind is PlannerErrorKind.DUPLICATE_SUBJECT
        assert planner.get_subject("Math").difficulty == 9

    def test_names_are_case_sensitive(self, planner):
        planner.add_subject("Math", 9, 10)
        planner.add_subject("math", 2, 2)
        assert len(planner) == 2

    def test_remove(self, planner):
        planner.add_subject("Math", 9, 10)
        assert planner.remove_subject("Math") is True
        assert planner.find_subject("Math") is None

    def test_remove_missing_is_noop(self, planner):
        planner.add_subject("Math", 9, 10)
        assert planner.remove_subject("Chemistry") is False
        assert len(planner) == 1

    def test_subjects_keep_insertion_order(self, demo_planner):
        assert [s.name for s in demo_planner.subjects] == ["Math", "Physics", "History", "English"]

    def test_get_missing_raises(self, planner):
        with pytest.raises(SubjectNotFoundError):
            planner.get_subject("Nope")


class TestTotalDailyHours:
    def test_default(self, planner):
        assert planner.total_daily_hours == 4.0

    def test_set(self, planner):
        planner.total_daily_hours = 6
        assert planner.total_daily_hours == 6.0

    def test_negative_rejected(self, planner):
        with pytest.raises(InvalidHoursError) as exc:
            planner.total_daily_hours = -1.0
        assert exc.value.kind is PlannerErrorKind.INVALID_HOURS
        assert planner.total_daily_hours == 4.0

    def test_negative_in_constructor(self):
        with pytest.raises(InvalidHoursError):
            StudyPlanner(total_daily_hours=-0.5)


class TestPerformance:
    def test_record_updates_rolling_mean(self, demo_planner):
        demo_planner.record_performance("Math", 50)
        demo_planner.record_performance("Math", 70)
        assert demo_planner.get_subject("Math").performance_score == pytest.approx(60.0)

    def test_record_missing_subject(self, planner):
        with pytest.raises(SubjectNotFoundError) as exc:
            planner.record_performance("Ghost", 50)
        assert exc.value.kind is PlannerErrorKind.SUBJECT_NOT_FOUND
        assert isinstance(exc.value, PlannerError)

    def test_set_performance(self, demo_planner):
        demo_planner.set_performance("History", 42)
        history = demo_planner.get_subject("History")
        assert history.performance_score == 42.0
        assert history.history == ()

    def test_set_performance_missing(self, planner):
        with pytest.raises(SubjectNotFoundError):
            planner.set_performance("Ghost", 50)


class TestScheduling:
    def test_generate_and_current_schedule(self, demo_planner):
        schedule = demo_planner.generate_schedule()
        assert demo_planner.current_schedule() == schedule
        assert schedule.total_hours == pytest.approx(4.0, abs=0.04)

    def test_empty_planner(self, planner):
        assert len(planner.generate_schedule()) == 0

    def test_current_schedule_before_generate(self, demo_planner):
        assert all(hours == 0.0 for _, hours in demo_planner.current_schedule().items())

    def test_adaptive_adjust_returns_snapshot(self, demo_planner):
        demo_planner.generate_schedule()
        demo_planner.record_performance("Physics", 30)
        schedule = demo_planner.adaptive_adjust(AdjustmentConfig(boost_factor=1.5))
        assert schedule["Physics"] > 1.63
        assert schedule == demo_planner.current_schedule()

    def test_generate_uses_budget(self, demo_planner):
        demo_planner.total_daily_hours = 8.0
        schedule = demo_planner.generate_schedule()
        assert schedule.total_hours == pytest.approx(8.0, abs=0.04)

    def test_ranges_hold_after_operations(self, demo_planner):
        demo_planner.record_performance("English", 300)
        demo_planner.record_performance("Math", -5)
        demo_planner.generate_schedule()
        demo_planner.adaptive_adjust()
        for subject in demo_planner.subjects:
            assert 1 <= subject.difficulty <= 10
            assert 1 <= subject.importance <= 10
            assert 0.0 <= subject.performance_score <= 100.0
            assert subject.allocated_hours >= 0.0


class TestLoadAtomicity:
    def test_malformed_file_leaves_registry_untouched(self, demo_planner, plan_file):
        plan_file.write_text("Chem,5,5,50,1.0\nBroken,line\n", encoding="utf-8")
        with pytest.raises(InvalidFormatError):
            demo_planner.load(plan_file)
        assert [s.name for s in demo_planner.subjects] == ["Math", "Physics", "History", "English"]

    def test_duplicate_names_in_file(self, demo_planner, plan_file):
        plan_file.write_text("Chem,5,5,50,1.0\nChem,6,6,60,1.0\n", encoding="utf-8")
        with pytest.raises(DuplicateSubjectError):
            demo_planner.load(plan_file)
        assert "Chem" not in demo_planner
        assert len(demo_planner) == 4


class TestFromSettings:
    def test_settings_applied(self):
        settings = PlannerSettings(
            total_daily_hours=2.5,
            min_slot_hours=0.5,
            history_window=3,
            default_performance=60.0,
        )
        planner = StudyPlanner.from_settings(settings)
        subject = planner.add_subject("Art", 2, 2)

        assert planner.total_daily_hours == 2.5
        assert planner.engine.min_slot_hours == 0.5
        assert subject.performance_score == 60.0
        for score in (10, 20, 30, 40):
            planner.record_performance("Art", score)
        assert subject.history == (20.0, 30.0, 40.0)

    def test_adjustment_config(self):
        config = PlannerSettings(low_threshold=50.0, boost_factor=1.3).adjustment_config()
        assert config.low_threshold == 50.0
        assert config.boost_factor == 1.3
        assert config.high_threshold == 90.0
        assert config.min_hours == 0.1


class TestBorrowedSubjects:
    def test_rename_through_lookup_rejected(self, demo_planner):
        math = demo_planner.find_subject("Math")
        with pytest.raises(AttributeError):
            math.name = "Art"

        schedule = demo_planner.generate_schedule()
        assert demo_planner.find_subject("Art") is None
        assert list(schedule) == list(demo_planner.current_schedule())

    def test_out_of_range_writes_are_clamped(self, demo_planner):
        math = demo_planner.get_subject("Math")
        math.difficulty = 0
        math.performance_score = 500
        demo_planner.generate_schedule()
        assert 1 <= math.difficulty <= 10
        assert math.performance_score == 100.0
        assert math.allocated_hours > 0
