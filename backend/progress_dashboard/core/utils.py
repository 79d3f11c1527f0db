# backend/progress_dashboard/core/utils.py
# Fonctions temporelles basiques (horloge murale locale).

import datetime as dt

def now():
    """Date/heure locale (naive).

    Description:
        Retourne `datetime.now()` sans timezone attachée. Seul point d'accès à
        l'horloge murale : les services reçoivent toujours « maintenant » en paramètre.

    Returns:
        datetime.datetime: Timestamp local (naive).
    """
    return dt.datetime.now()

def today():
    """Date locale du jour.

    Returns:
        datetime.date: Date courante (granularité jour).
    """
    return now().date()
