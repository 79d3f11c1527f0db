# backend/progress_dashboard/models/dashboard.py
# DTOs de composition des vues (tableau de bord et détail d'un challenge).

from typing import Any, List

from pydantic import BaseModel, Field

from progress_dashboard.models.challenge import Challenge, FilterState
from progress_dashboard.models.progress import ChallengeProgress
from progress_dashboard.models.statistics import MonthlyProgress, Statistics


class ChallengeCard(BaseModel):
    """Challenge accompagné de ses dérivations temporelles."""

    challenge: Challenge
    progress: ChallengeProgress


class DashboardView(BaseModel):
    """Vue d'accueil : statistiques + liste filtrée/triée.

    Attributes:
        filters (FilterState): Filtres appliqués.
        statistics (Statistics): Statistiques de la collection complète (non filtrée).
        cards (list[ChallengeCard]): Challenges retenus, dans l'ordre de tri.
        categories (list[str]): Catégories disponibles (triées).
        tags (list[str]): Tags disponibles (triés).
        has_active_filters (bool): Au moins un filtre restreint la liste.
        result_count (int): Nombre de challenges retenus.
        monthly_progress (list[MonthlyProgress]): Bilan mensuel, du plus ancien au plus récent.
    """

    filters: FilterState
    statistics: Statistics
    cards: List[ChallengeCard] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    has_active_filters: bool = False
    result_count: int = Field(0, ge=0)
    monthly_progress: List[MonthlyProgress] = Field(default_factory=list)


class ChallengeDetailView(BaseModel):
    """Vue détail : challenge, progression et tableau journalier.

    Description:
        `table` peut provenir du classeur réel ou du tableau de secours généré
        lorsque le chargement échoue.
    """

    challenge: Challenge
    progress: ChallengeProgress
    table: List[List[Any]] = Field(default_factory=list)
    export_filename: str
