# backend/progress_dashboard/services/dates.py
# Dérivations temporelles : date de fin, jours écoulés/restants, format d'affichage.

from __future__ import annotations

import datetime as dt
import math
from typing import Union

from progress_dashboard.shared.constants import MONTH_ABBREVIATIONS

DateLike = Union[dt.date, dt.datetime]

_SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value: DateLike) -> dt.datetime:
    """Ramener une date (minuit) ou un datetime naive à un datetime."""
    if isinstance(value, dt.datetime):
        return value
    return dt.datetime.combine(value, dt.time.min)


def _ceil_days(delta: dt.timedelta) -> int:
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def parse_iso_date(value: str) -> dt.date:
    """Parser une date ISO `YYYY-MM-DD`.

    Raises:
        ValueError: Si la chaîne n'est pas une date ISO valide.
    """
    return dt.date.fromisoformat(value[:10])


def compute_end_date(start_date: dt.date, total_days: int) -> dt.date:
    """Calculer la date de fin d'un challenge.

    Description:
        Le jour de départ est inclus : un challenge d'un jour se termine le jour même.

    Args:
        start_date (date): Premier jour.
        total_days (int): Durée en jours (>= 1).

    Returns:
        date: `start_date + (total_days - 1)` jours.

    Raises:
        ValueError: Si `total_days` < 1.
    """
    if total_days < 1:
        raise ValueError(f"total_days must be >= 1, got {total_days}")
    return start_date + dt.timedelta(days=total_days - 1)


def compute_days_elapsed(start_date: dt.date, now: DateLike) -> int:
    """Calculer le nombre de jours écoulés depuis le départ.

    Description:
        Arrondi au jour supérieur sur l'écart de temps, puis plancher à 0 :
        un challenge futur affiche 0 jour écoulé.

    Args:
        start_date (date): Premier jour (pris à minuit).
        now (date | datetime): Instant d'évaluation.

    Returns:
        int: Jours écoulés (>= 0).
    """
    return max(0, _ceil_days(_as_datetime(now) - _as_datetime(start_date)))


def compute_days_remaining(end_date: dt.date, now: DateLike) -> int:
    """Calculer le nombre de jours restants avant la date de fin.

    Description:
        Valeur signée, non bornée : négative une fois la date de fin dépassée.
        L'affichage décide de la borner.

    Args:
        end_date (date): Dernier jour (pris à minuit).
        now (date | datetime): Instant d'évaluation.

    Returns:
        int: Jours restants (signé).
    """
    return _ceil_days(_as_datetime(end_date) - _as_datetime(now))


def format_display_date(value: Union[DateLike, str]) -> str:
    """Formater une date pour l'affichage et l'export (`"Jan 5, 2025"`).

    Description:
        Format fixe indépendant de la locale du processus.

    Args:
        value (date | datetime | str): Date, datetime ou chaîne ISO.

    Returns:
        str: Date formatée `Mon D, YYYY`.
    """
    if isinstance(value, str):
        value = parse_iso_date(value)
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"
