# backend/progress_dashboard/models/challenge.py
# Représentation d'un challenge et de la configuration de filtrage/tri du tableau de bord.

from __future__ import annotations
from typing import List, Literal, Optional, Union
import datetime as dt
from pydantic import BaseModel, ConfigDict, Field

Status = Literal["active", "pending", "completed"]
Difficulty = Literal["easy", "medium", "hard"]
Priority = Literal["low", "medium", "high"]
SortKey = Literal["start_date", "end_date", "status", "title", "difficulty", "priority"]
SortOrder = Literal["asc", "desc"]

class Challenge(BaseModel):
    """Objectif suivi sur une période fixe.

    Description:
        Enregistrement immuable fourni par les données statiques. La date de fin
        n'est jamais stockée : elle se déduit de `start_date` et `total_days`
        (voir `services.dates.compute_end_date`).

    Attributes:
        id (str): Identifiant unique.
        title (str): Titre affiché.
        description (str): Description libre.
        icon (str | None): Nom d'icône (présentation).
        banner_image (str | None): Image de bannière (présentation).
        category (str): Catégorie libre, utilisée pour les regroupements.
        difficulty (str): easy | medium | hard.
        priority (str): low | medium | high.
        status (str): active | pending | completed (fourni, jamais recalculé).
        tags (list[str]): Étiquettes libres (ordre conservé pour l'affichage).
        start_date (date): Premier jour du challenge.
        total_days (int): Nombre de jours, jour de départ inclus (>= 1).
        completed_days (int | None): Compteur manuel de jours réalisés.
        excel_file (str): Référence du tableau de progression journalier.
    """
    id: str
    title: str
    description: str = ""
    icon: Optional[str] = None
    banner_image: Optional[str] = None
    category: str
    difficulty: Difficulty
    priority: Priority
    status: Status
    tags: List[str] = Field(default_factory=list)
    start_date: dt.date
    total_days: int = Field(ge=1)
    completed_days: Optional[int] = Field(default=None, ge=0)
    excel_file: str = ""

    model_config = ConfigDict(frozen=True)

class FilterState(BaseModel):
    """Configuration courante de filtrage et de tri.

    Description:
        Chaque critère vaut soit la sentinelle `"all"`, soit une valeur exacte.
        `tags` vide et `search` vide signifient « pas de contrainte ».
        L'instance par défaut correspond à « effacer tous les filtres ».
    """
    status: Union[Literal["all"], Status] = "all"
    category: str = "all"
    difficulty: Union[Literal["all"], Difficulty] = "all"
    priority: Union[Literal["all"], Priority] = "all"
    tags: List[str] = Field(default_factory=list)
    search: str = ""
    sort_by: SortKey = "start_date"
    sort_order: SortOrder = "desc"

    model_config = ConfigDict(frozen=True)

    @property
    def has_active_filters(self) -> bool:
        """True si au moins un prédicat restreint la collection (le tri n'en fait pas partie)."""
        return (
            self.status != "all"
            or self.category != "all"
            or self.difficulty != "all"
            or self.priority != "all"
            or len(self.tags) > 0
            or self.search != ""
        )
