# backend/progress_dashboard/services/progress.py
# Calcule les dérivations de progression d'un challenge à un instant donné.

from __future__ import annotations

from typing import Optional

from progress_dashboard.models.challenge import Challenge
from progress_dashboard.models.progress import ChallengeProgress
from progress_dashboard.services.dates import (
    DateLike,
    compute_days_elapsed,
    compute_days_remaining,
    compute_end_date,
    format_display_date,
)


def _clamp_percent(value: float) -> float:
    return max(0.0, min(value, 100.0))


def compute_time_progress(days_elapsed: int, total_days: int) -> float:
    """Avancement temporel (%) : jours écoulés sur durée totale, borné à 100."""
    return _clamp_percent(days_elapsed / total_days * 100)


def compute_manual_progress(completed_days: Optional[int], total_days: int) -> Optional[float]:
    """Avancement déclaré (%) à partir de `completed_days`.

    Returns:
        float | None: Pourcentage borné à [0, 100], ou None si non suivi.
    """
    if completed_days is None:
        return None
    return _clamp_percent(completed_days / total_days * 100)


def build_challenge_progress(challenge: Challenge, now: DateLike) -> ChallengeProgress:
    """Calculer l'instantané de progression d'un challenge.

    Description:
        Date de fin recalculée, jours écoulés (>= 0), jours restants signés et
        bornés pour l'affichage, avancement temporel et avancement manuel
        conservés séparément.

    Args:
        challenge (Challenge): Challenge concerné.
        now (date | datetime): Instant d'évaluation.

    Returns:
        ChallengeProgress: Dérivations calculées.
    """
    end_date = compute_end_date(challenge.start_date, challenge.total_days)
    days_elapsed = compute_days_elapsed(challenge.start_date, now)
    days_remaining = compute_days_remaining(end_date, now)

    return ChallengeProgress(
        end_date=end_date,
        days_elapsed=days_elapsed,
        days_remaining=days_remaining,
        display_days_remaining=max(0, days_remaining),
        time_progress_percent=compute_time_progress(days_elapsed, challenge.total_days),
        manual_progress_percent=compute_manual_progress(
            challenge.completed_days, challenge.total_days
        ),
        start_date_display=format_display_date(challenge.start_date),
        end_date_display=format_display_date(end_date),
    )
