"""Tests for the statistics service."""

import datetime as dt

import pytest

from progress_dashboard.services.statistics import (
    compute_monthly_progress,
    compute_statistics,
    count_by,
)


class TestComputeStatistics:
    """Statistics snapshot of a challenge collection."""

    def test_empty_collection(self):
        stats = compute_statistics([])

        assert stats.total_challenges == 0
        assert stats.active_challenges == 0
        assert stats.completed_challenges == 0
        assert stats.pending_challenges == 0
        assert stats.completion_rate == 0
        assert stats.category_counts == {}
        assert stats.difficulty_counts == {}
        assert stats.priority_counts == {}
        assert stats.average_completion_days == 0

    def test_status_counts_are_consistent(self, make_challenge):
        challenges = [
            make_challenge(status="active"),
            make_challenge(status="active"),
            make_challenge(status="pending"),
            make_challenge(status="completed"),
        ]
        stats = compute_statistics(challenges)

        assert stats.total_challenges == 4
        assert stats.active_challenges == 2
        assert stats.pending_challenges == 1
        assert stats.completed_challenges == 1
        assert (
            stats.active_challenges + stats.pending_challenges + stats.completed_challenges
            == stats.total_challenges
        )
        assert stats.completion_rate == 25.0

    def test_all_completed(self, make_challenge):
        stats = compute_statistics([make_challenge(status="completed")] * 3)
        assert stats.completion_rate == 100.0

    def test_grouped_counts(self, make_challenge):
        challenges = [
            make_challenge(category="Learning", difficulty="hard", priority="low"),
            make_challenge(category="Fitness", difficulty="easy", priority="low"),
            make_challenge(category="Learning", difficulty="hard", priority="high"),
        ]
        stats = compute_statistics(challenges)

        assert stats.category_counts == {"Learning": 2, "Fitness": 1}
        assert stats.difficulty_counts == {"hard": 2, "easy": 1}
        assert stats.priority_counts == {"low": 2, "high": 1}
        # Ordre de première apparition
        assert list(stats.category_counts) == ["Learning", "Fitness"]

    def test_average_completion_days(self, make_challenge):
        challenges = [
            make_challenge(status="completed", total_days=10),
            make_challenge(status="completed", total_days=20),
            make_challenge(status="active", total_days=100),
        ]
        assert compute_statistics(challenges).average_completion_days == 15.0


class TestCountBy:

    def test_unknown_field(self, make_challenge):
        with pytest.raises(ValueError):
            count_by([make_challenge()], "title")


class TestComputeMonthlyProgress:
    """Monthly buckets of challenges by end date."""

    def test_returns_requested_months_oldest_first(self):
        months = compute_monthly_progress([], dt.date(2025, 1, 15), months=3)

        assert [(m.month, m.year) for m in months] == [("Nov", 2024), ("Dec", 2024), ("Jan", 2025)]
        assert all(m.total == 0 and m.completed == 0 for m in months)

    def test_counts_by_end_month(self, make_challenge):
        challenges = [
            # fin le 10 janvier
            make_challenge(start_date=dt.date(2025, 1, 1), total_days=10, status="active"),
            # fin le 1er mars
            make_challenge(start_date=dt.date(2025, 2, 20), total_days=10, status="completed"),
            # fin en décembre 2024, hors fenêtre
            make_challenge(start_date=dt.date(2024, 12, 1), total_days=5, status="completed"),
        ]
        months = compute_monthly_progress(challenges, dt.date(2025, 3, 15), months=3)

        assert [(m.month, m.total, m.completed) for m in months] == [
            ("Jan", 1, 0),
            ("Feb", 0, 0),
            ("Mar", 1, 1),
        ]

    def test_invalid_month_count(self):
        with pytest.raises(ValueError):
            compute_monthly_progress([], dt.date(2025, 1, 1), months=0)
