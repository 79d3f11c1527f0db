# backend/progress_dashboard/services/dashboard.py
# Composition des vues : tableau de bord (statistiques + liste filtrée) et détail d'un challenge.

from __future__ import annotations

import datetime as dt
from typing import Any, List, Optional, Sequence

from progress_dashboard.core.settings import settings
from progress_dashboard.models.challenge import Challenge, FilterState
from progress_dashboard.models.dashboard import ChallengeCard, ChallengeDetailView, DashboardView
from progress_dashboard.services.challenge_filters import (
    apply_filter_and_sort,
    list_categories,
    list_tags,
)
from progress_dashboard.services.dates import DateLike
from progress_dashboard.services.progress import build_challenge_progress
from progress_dashboard.services.progress_table import export_filename, load_table
from progress_dashboard.services.statistics import compute_monthly_progress, compute_statistics


def build_dashboard(
    challenges: Sequence[Challenge], filters: FilterState, now: DateLike
) -> DashboardView:
    """Construire la vue d'accueil.

    Description:
        Les statistiques portent sur la collection complète ; la liste de cartes
        sur la collection filtrée et triée. Les deux calculs sont indépendants.

    Args:
        challenges (Sequence[Challenge]): Collection complète.
        filters (FilterState): Filtres et tri courants.
        now (date | datetime): Instant d'évaluation.

    Returns:
        DashboardView: Vue composée.
    """
    visible = apply_filter_and_sort(challenges, filters)
    cards = [
        ChallengeCard(challenge=c, progress=build_challenge_progress(c, now)) for c in visible
    ]

    return DashboardView(
        filters=filters,
        statistics=compute_statistics(challenges),
        cards=cards,
        categories=list_categories(challenges),
        tags=list_tags(challenges),
        has_active_filters=filters.has_active_filters,
        result_count=len(cards),
        monthly_progress=compute_monthly_progress(
            challenges, now, settings.monthly_progress_months
        ),
    )


def find_challenge(challenges: Sequence[Challenge], challenge_id: str) -> Challenge:
    """Retrouver un challenge par identifiant.

    Raises:
        LookupError: Si aucun challenge ne porte cet identifiant.
    """
    for challenge in challenges:
        if challenge.id == challenge_id:
            return challenge
    raise LookupError(f"Challenge '{challenge_id}' not found")


def build_challenge_detail(
    challenges: Sequence[Challenge],
    challenge_id: str,
    now: DateLike,
    table: Optional[List[List[Any]]] = None,
) -> ChallengeDetailView:
    """Construire la vue détail d'un challenge.

    Args:
        challenges (Sequence[Challenge]): Collection complète.
        challenge_id (str): Identifiant recherché.
        now (date | datetime): Instant d'évaluation.
        table (list[list] | None): Tableau déjà chargé ; sinon chargé via `load_table`
            (éventuellement tableau de secours).

    Returns:
        ChallengeDetailView: Vue détail.

    Raises:
        LookupError: Si le challenge n'existe pas.
    """
    challenge = find_challenge(challenges, challenge_id)
    if table is None:
        today = now.date() if isinstance(now, dt.datetime) else now
        table = load_table(challenge.excel_file, today=today)

    return ChallengeDetailView(
        challenge=challenge,
        progress=build_challenge_progress(challenge, now),
        table=table,
        export_filename=export_filename(challenge),
    )
