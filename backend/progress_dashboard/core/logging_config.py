"""Configuration du système de logging centralisé."""

import datetime as dt
import json
import logging
import logging.handlers
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Optional

from progress_dashboard.core.settings import settings


class CustomJSONEncoder(json.JSONEncoder):
    """Encodeur JSON personnalisé pour gérer dates et chemins."""

    def default(self, obj):
        if isinstance(obj, (dt.date, dt.datetime)):
            return obj.isoformat()
        elif isinstance(obj, Path):
            return str(obj)
        return super().default(obj)


class DataLogger:
    """Logger spécialisé pour les données lourdes en JSON."""

    def __init__(self, logs_dir: str = "logs"):
        self.logs_dir = Path(logs_dir)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    def log_data(self, calling_context: str, data: Dict[str, Any]) -> None:
        """Log des données lourdes en JSON.

        Description:
            Ajoute une entrée au fichier `<date>-data.json` du jour, maintenu sous
            forme de tableau JSON valide.

        Args:
            calling_context (str): Nom de l'opération appelante (ex. "export_table").
            data (dict): Données à journaliser.
        """
        today = datetime.now().strftime("%Y-%m-%d")
        json_file = self.logs_dir / f"{today}-data.json"

        entry = {
            "datetime": datetime.now().isoformat(),
            "calling_context": calling_context,
            "data": data,
        }

        entries = []
        if json_file.exists():
            with open(json_file, "r", encoding="utf-8") as f:
                content = f.read().strip()
            if content:
                entries = json.loads(content)

        entries.append(entry)
        with open(json_file, "w", encoding="utf-8") as f:
            json.dump(entries, f, cls=CustomJSONEncoder)


def setup_logging(logs_dir: Optional[Path] = None) -> tuple[logging.Logger, logging.Logger, DataLogger]:
    """Configure le système de logging avec rotation quotidienne.

    Args:
        logs_dir (Path | None): Dossier des logs (par défaut `settings.logs_dir`).

    Returns:
        tuple: (logger_generic, logger_errors, data_logger)
    """
    logs_dir = Path(logs_dir or settings.logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Nettoyage des logs anciens
    cleanup_old_logs(logs_dir, settings.log_retention_days)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Logger générique (INFO+)
    generic_logger = logging.getLogger("dashboard.generic")
    generic_logger.setLevel(logging.INFO)

    if not generic_logger.handlers:  # Éviter les doublons
        generic_handler = logging.handlers.TimedRotatingFileHandler(
            filename=logs_dir / "generic.log",
            when="midnight",
            interval=1,
            encoding="utf-8",
            delay=True,
        )
        generic_handler.suffix = "%Y-%m-%d"
        generic_handler.setFormatter(formatter)
        generic_logger.addHandler(generic_handler)

    # Logger erreurs (ERROR+)
    error_logger = logging.getLogger("dashboard.errors")
    error_logger.setLevel(logging.ERROR)

    if not error_logger.handlers:
        error_handler = logging.handlers.TimedRotatingFileHandler(
            filename=logs_dir / "errors.log",
            when="midnight",
            interval=1,
            encoding="utf-8",
            delay=True,
        )
        error_handler.suffix = "%Y-%m-%d"
        error_handler.setFormatter(formatter)
        error_logger.addHandler(error_handler)

    data_logger = DataLogger(str(logs_dir))

    return generic_logger, error_logger, data_logger


def cleanup_old_logs(logs_dir: Path, retention_days: int = 30) -> None:
    """Supprime les logs plus anciens que retention_days.

    Description:
        Les fichiers concernés portent une date `YYYY-MM-DD` soit en préfixe
        (`2025-01-05-data.json`), soit en suffixe de rotation (`generic.log.2025-01-05`).
    """
    cutoff_str = (datetime.now() - timedelta(days=retention_days)).strftime("%Y-%m-%d")

    patterns = ["*-data.json", "generic.log.*", "errors.log.*"]

    for pattern in patterns:
        for file_path in logs_dir.glob(pattern):
            name = file_path.name
            date_part = name[:10] if name.endswith("-data.json") else name[-10:]
            try:
                datetime.strptime(date_part, "%Y-%m-%d")
            except ValueError:
                continue
            if date_part < cutoff_str:
                file_path.unlink(missing_ok=True)


# Instance globale (lazy initialization)
_loggers: Optional[tuple[logging.Logger, logging.Logger, DataLogger]] = None


def get_loggers() -> tuple[logging.Logger, logging.Logger, DataLogger]:
    """Retourne les loggers configurés (singleton)."""
    global _loggers
    if _loggers is None:
        _loggers = setup_logging()
    return _loggers
