# backend/progress_dashboard/services/statistics.py
# Service pour calculer les statistiques synthétiques d'une collection de challenges

from __future__ import annotations

import datetime as dt
from typing import Callable, Iterable, Sequence

from progress_dashboard.models.challenge import Challenge
from progress_dashboard.models.statistics import MonthlyProgress, Statistics
from progress_dashboard.services.dates import compute_end_date
from progress_dashboard.shared.constants import MONTH_ABBREVIATIONS

# Accesseurs explicites des champs de regroupement
GROUP_FIELDS: dict[str, Callable[[Challenge], str]] = {
    "category": lambda c: c.category,
    "difficulty": lambda c: c.difficulty,
    "priority": lambda c: c.priority,
}


def count_by(challenges: Iterable[Challenge], field: str) -> dict[str, int]:
    """Compter les challenges par valeur d'un champ.

    Description:
        Une seule passe ; les clés suivent l'ordre de première apparition.

    Args:
        challenges (Iterable[Challenge]): Collection à regrouper.
        field (str): "category", "difficulty" ou "priority".

    Returns:
        dict[str, int]: Valeur du champ -> nombre d'occurrences.

    Raises:
        ValueError: Si le champ n'est pas regroupable.
    """
    try:
        accessor = GROUP_FIELDS[field]
    except KeyError:
        raise ValueError(f"Unsupported group field: {field}") from None

    counts: dict[str, int] = {}
    for challenge in challenges:
        key = accessor(challenge)
        counts[key] = counts.get(key, 0) + 1
    return counts


def compute_statistics(challenges: Sequence[Challenge]) -> Statistics:
    """Calculer les statistiques synthétiques d'une collection.

    Description:
        Fonction pure. Une collection vide donne des compteurs à 0, un taux de
        complétion à 0 et des regroupements vides.

    Args:
        challenges (Sequence[Challenge]): Collection de challenges.

    Returns:
        Statistics: Instantané calculé.
    """
    total = len(challenges)
    active = sum(1 for c in challenges if c.status == "active")
    completed = sum(1 for c in challenges if c.status == "completed")
    pending = sum(1 for c in challenges if c.status == "pending")

    # Durée moyenne des challenges terminés
    completed_durations = [c.total_days for c in challenges if c.status == "completed"]
    average_days = (
        sum(completed_durations) / len(completed_durations) if completed_durations else 0.0
    )

    return Statistics(
        total_challenges=total,
        active_challenges=active,
        completed_challenges=completed,
        pending_challenges=pending,
        completion_rate=(completed / total) * 100 if total > 0 else 0.0,
        category_counts=count_by(challenges, "category"),
        difficulty_counts=count_by(challenges, "difficulty"),
        priority_counts=count_by(challenges, "priority"),
        average_completion_days=average_days,
    )


def _shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def compute_monthly_progress(
    challenges: Sequence[Challenge], now: dt.date, months: int = 6
) -> list[MonthlyProgress]:
    """Calculer le bilan mensuel des challenges.

    Description:
        Pour chacun des `months` mois calendaires se terminant par le mois de `now`
        (du plus ancien au plus récent), compte les challenges dont la date de fin
        tombe dans ce mois (`total`) et, parmi eux, ceux au statut completed.

    Args:
        challenges (Sequence[Challenge]): Collection de challenges.
        now (date | datetime): Instant de référence.
        months (int): Nombre de mois (>= 1).

    Returns:
        list[MonthlyProgress]: Exactement `months` entrées.

    Raises:
        ValueError: Si `months` < 1.
    """
    if months < 1:
        raise ValueError(f"months must be >= 1, got {months}")

    buckets: dict[tuple[int, int], MonthlyProgress] = {}
    for offset in range(-(months - 1), 1):
        year, month = _shift_month(now.year, now.month, offset)
        buckets[(year, month)] = MonthlyProgress(
            month=MONTH_ABBREVIATIONS[month - 1], year=year
        )

    for challenge in challenges:
        end = compute_end_date(challenge.start_date, challenge.total_days)
        bucket = buckets.get((end.year, end.month))
        if bucket is None:
            continue
        bucket.total += 1
        if challenge.status == "completed":
            bucket.completed += 1

    return list(buckets.values())
