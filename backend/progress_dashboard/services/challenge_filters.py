# backend/progress_dashboard/services/challenge_filters.py
# Pipeline de filtrage et de tri de la collection de challenges.

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from progress_dashboard.models.challenge import Challenge, FilterState
from progress_dashboard.services.dates import compute_end_date
from progress_dashboard.shared.constants import (
    DIFFICULTY_RANK,
    FILTER_ALL,
    PRIORITY_RANK,
    STATUS_RANK,
)

# Clés de tri : une fonction explicite par valeur de `sort_by`
SORT_KEYS: dict[str, Callable[[Challenge], Any]] = {
    "start_date": lambda c: c.start_date,
    "end_date": lambda c: compute_end_date(c.start_date, c.total_days),
    "title": lambda c: c.title.lower(),
    "status": lambda c: STATUS_RANK[c.status],
    "difficulty": lambda c: DIFFICULTY_RANK[c.difficulty],
    "priority": lambda c: PRIORITY_RANK[c.priority],
}


def _matches_exact(expected: str, actual: str) -> bool:
    return expected == FILTER_ALL or actual == expected


def _matches_tags(required: Sequence[str], tags: Sequence[str]) -> bool:
    # Au moins un tag commun (OU entre les tags demandés)
    if not required:
        return True
    return not set(required).isdisjoint(tags)


def _matches_search(search: str, challenge: Challenge) -> bool:
    if not search:
        return True
    needle = search.lower()
    return (
        needle in challenge.title.lower()
        or needle in challenge.description.lower()
        or any(needle in tag.lower() for tag in challenge.tags)
    )


def matches_filters(challenge: Challenge, filters: FilterState) -> bool:
    """Vérifier qu'un challenge satisfait tous les prédicats (ET logique).

    Args:
        challenge (Challenge): Challenge évalué.
        filters (FilterState): Filtres courants.

    Returns:
        bool: True si tous les prédicats passent.
    """
    return (
        _matches_exact(filters.status, challenge.status)
        and _matches_exact(filters.category, challenge.category)
        and _matches_exact(filters.difficulty, challenge.difficulty)
        and _matches_exact(filters.priority, challenge.priority)
        and _matches_tags(filters.tags, challenge.tags)
        and _matches_search(filters.search, challenge)
    )


def sort_challenges(
    challenges: Iterable[Challenge], sort_by: str, sort_order: str = "asc"
) -> list[Challenge]:
    """Trier une copie de la collection.

    Description:
        Tri stable : à clé égale, l'ordre d'entrée est conservé, y compris en
        ordre décroissant (`reverse=True` de `sorted` préserve la stabilité).

    Args:
        challenges (Iterable[Challenge]): Challenges à trier (non modifiés).
        sort_by (str): Clé de tri (voir `SORT_KEYS`).
        sort_order (str): "asc" ou "desc".

    Returns:
        list[Challenge]: Nouvelle liste triée.

    Raises:
        ValueError: Si la clé ou l'ordre de tri est inconnu.
    """
    try:
        key = SORT_KEYS[sort_by]
    except KeyError:
        raise ValueError(f"Unsupported sort key: {sort_by}") from None
    if sort_order not in ("asc", "desc"):
        raise ValueError(f"Unsupported sort order: {sort_order}")

    return sorted(challenges, key=key, reverse=(sort_order == "desc"))


def apply_filter_and_sort(challenges: Sequence[Challenge], filters: FilterState) -> list[Challenge]:
    """Appliquer les filtres puis le tri.

    Description:
        Fonction pure : la collection d'entrée n'est jamais modifiée. Aucune
        correspondance donne une liste vide, pas une erreur.

    Args:
        challenges (Sequence[Challenge]): Collection complète.
        filters (FilterState): Filtres et tri courants.

    Returns:
        list[Challenge]: Challenges retenus, dans l'ordre demandé.
    """
    filtered = [c for c in challenges if matches_filters(c, filters)]
    return sort_challenges(filtered, filters.sort_by, filters.sort_order)


def list_categories(challenges: Iterable[Challenge]) -> list[str]:
    """Catégories distinctes, triées (options du filtre)."""
    return sorted({c.category for c in challenges})


def list_tags(challenges: Iterable[Challenge]) -> list[str]:
    """Tags distincts, triés (options du filtre)."""
    return sorted({tag for c in challenges for tag in c.tags})
