# backend/progress_dashboard/db/seed_data.py
# Chargement de la collection statique de challenges depuis le fichier de seed JSON.

import json
from pathlib import Path
from typing import Optional

from progress_dashboard.core.logging_config import get_loggers
from progress_dashboard.core.settings import settings
from progress_dashboard.models.challenge import Challenge


def load_challenges(path: Optional[Path] = None) -> tuple[Challenge, ...]:
    """Charge la collection de challenges.

    Description:
        Lit le fichier JSON (tableau d'objets), valide chaque entrée avec le modèle
        `Challenge` et vérifie l'unicité des identifiants. La collection renvoyée
        est immuable : elle est fournie une fois au démarrage.

    Args:
        path (Path | None): Fichier de seed (par défaut `settings.seeds_file`).

    Returns:
        tuple[Challenge, ...]: Challenges dans l'ordre du fichier.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        json.JSONDecodeError: Si le JSON est invalide.
        pydantic.ValidationError: Si une entrée est mal formée.
        ValueError: Si le contenu n'est pas un tableau ou si un identifiant est dupliqué.
    """
    file_path = Path(path or settings.seeds_file)
    logger_main, _, _ = get_loggers()

    with open(file_path, encoding="utf-8") as f:
        seed_data = json.load(f)

    if not isinstance(seed_data, list):
        raise ValueError(f"{file_path.name} must contain a JSON array of challenges")

    challenges = tuple(Challenge.model_validate(doc) for doc in seed_data)

    seen: set[str] = set()
    for challenge in challenges:
        if challenge.id in seen:
            raise ValueError(f"Duplicate challenge id: {challenge.id}")
        seen.add(challenge.id)

    logger_main.info(f"{len(challenges)} challenges loaded from {file_path}")
    return challenges
