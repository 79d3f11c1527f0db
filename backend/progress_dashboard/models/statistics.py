# backend/progress_dashboard/models/statistics.py
# Instantané statistique d'une collection de challenges.

from typing import Dict

from pydantic import BaseModel, Field


class Statistics(BaseModel):
    """Statistiques agrégées d'une collection de challenges.

    Description:
        Recalculé à chaque appel, jamais stocké ni comparé.
        Les regroupements conservent l'ordre de première apparition des clés.

    Attributes:
        total_challenges (int): Taille de la collection.
        active_challenges (int): Challenges au statut active.
        completed_challenges (int): Challenges au statut completed.
        pending_challenges (int): Challenges au statut pending.
        completion_rate (float): completed / total × 100 (0 si collection vide).
        category_counts (dict[str, int]): Nombre de challenges par catégorie.
        difficulty_counts (dict[str, int]): Nombre de challenges par difficulté.
        priority_counts (dict[str, int]): Nombre de challenges par priorité.
        average_completion_days (float): Durée moyenne (jours) des challenges terminés.
    """

    total_challenges: int = Field(ge=0, description="Nombre total de challenges")
    active_challenges: int = Field(ge=0, description="Challenges actifs")
    completed_challenges: int = Field(ge=0, description="Challenges terminés")
    pending_challenges: int = Field(ge=0, description="Challenges en attente")
    completion_rate: float = Field(ge=0, le=100, description="Taux de complétion (%)")
    category_counts: Dict[str, int] = Field(default_factory=dict)
    difficulty_counts: Dict[str, int] = Field(default_factory=dict)
    priority_counts: Dict[str, int] = Field(default_factory=dict)
    average_completion_days: float = Field(0.0, ge=0, description="Durée moyenne des challenges terminés")


class MonthlyProgress(BaseModel):
    """Bilan d'un mois calendaire : challenges se terminant ce mois-ci."""

    month: str
    year: int
    completed: int = 0
    total: int = 0
