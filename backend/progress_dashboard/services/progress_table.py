# backend/progress_dashboard/services/progress_table.py
# Tableau de progression journalier : chargement depuis un classeur, tableau de secours, export xlsx/csv.

from __future__ import annotations

import csv
import datetime as dt
import re
import zipfile
from pathlib import Path
from typing import Any, List, Optional

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font
from openpyxl.utils.exceptions import InvalidFileException

from progress_dashboard.core.logging_config import get_loggers
from progress_dashboard.core.settings import settings
from progress_dashboard.core.utils import today as local_today
from progress_dashboard.models.challenge import Challenge
from progress_dashboard.shared.constants import (
    EXPORT_FORMATS,
    PROGRESS_DONE_MARK,
    PROGRESS_DONE_NOTE,
    PROGRESS_TABLE_HEADER,
    PROGRESS_TODO_MARK,
)

Grid = List[List[Any]]

# Caractères interdits dans un nom de fichier (séparateurs de chemin inclus)
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]+')


def generate_sample_table(
    start_date: dt.date, total_days: int, completed_days: Optional[int] = None
) -> Grid:
    """Générer un tableau de progression de démonstration.

    Description:
        Une ligne d'en-tête puis une ligne par jour : numéro du jour, date ISO,
        marque de complétion, note et statut. Les `completed_days` premiers jours
        sont marqués terminés.

    Args:
        start_date (date): Premier jour.
        total_days (int): Nombre de jours (une ligne par jour).
        completed_days (int | None): Jours marqués terminés (défaut : settings).

    Returns:
        list[list]: `total_days + 1` lignes, en-tête incluse.
    """
    if completed_days is None:
        completed_days = settings.fallback_completed_days

    table: Grid = [list(PROGRESS_TABLE_HEADER)]
    for i in range(total_days):
        done = i < completed_days
        table.append(
            [
                i + 1,
                (start_date + dt.timedelta(days=i)).isoformat(),
                PROGRESS_DONE_MARK if done else "",
                PROGRESS_DONE_NOTE if done else "",
                PROGRESS_DONE_MARK if done else PROGRESS_TODO_MARK,
            ]
        )
    return table


def _read_first_sheet(path: Path) -> Grid:
    wb = load_workbook(path, data_only=True)
    try:
        ws = wb.worksheets[0]
        rows = [list(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()

    # Lignes vides finales ignorées ; les lignes vides intermédiaires sont conservées
    while rows and all(cell is None for cell in rows[-1]):
        rows.pop()
    rows = [["" if cell is None else cell for cell in row] for row in rows]

    if not rows:
        raise ValueError(f"Workbook {path.name} has an empty first sheet")
    return rows


def load_table(
    file_ref: str,
    assets_dir: Optional[Path] = None,
    today: Optional[dt.date] = None,
) -> Grid:
    """Charger le tableau de progression d'un challenge.

    Description:
        Lit la première feuille du classeur `<assets_dir>/<file_ref>`. En cas
        d'échec (fichier absent, classeur invalide, feuille vide), l'erreur est
        journalisée et un tableau de secours est renvoyé : l'appelant doit donc
        s'attendre à des données générées.

    Args:
        file_ref (str): Référence du classeur (`Challenge.excel_file`).
        assets_dir (Path | None): Dossier des classeurs (défaut : settings).
        today (date | None): Date de départ du tableau de secours (défaut : aujourd'hui).

    Returns:
        list[list]: Grille de cellules, en-tête en première ligne.
    """
    logger_main, logger_errors, _ = get_loggers()
    path = Path(assets_dir or settings.assets_dir) / file_ref

    try:
        table = _read_first_sheet(path)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
        logger_errors.error(f"Error loading progress table {file_ref}: {e}")
        return generate_sample_table(
            start_date=today or local_today(),
            total_days=settings.fallback_table_days,
        )

    logger_main.info(f"Progress table {file_ref} loaded ({len(table)} rows)")
    return table


def export_filename(challenge: Challenge) -> str:
    """Nom de fichier d'export (sans extension) : `<titre>-data`.

    Description:
        Les séparateurs de chemin et caractères interdits du titre sont remplacés par `_`.
    """
    safe_title = _UNSAFE_FILENAME_CHARS.sub("_", challenge.title)
    return f"{safe_title}-data"


def _write_xlsx(grid: Grid, path: Path) -> None:
    wb = Workbook()
    ws = wb.active
    ws.title = settings.export_sheet_name
    for row in grid:
        ws.append(list(row))
    # En-tête en gras
    if grid:
        for cell in ws[1]:
            cell.font = Font(bold=True)
    wb.save(path)


def _write_csv(grid: Grid, path: Path) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(grid)


def export_table(
    grid: Grid, filename: str, fmt: str = "xlsx", export_dir: Optional[Path] = None
) -> Path:
    """Exporter une grille vers un classeur ou un fichier CSV.

    Args:
        grid (list[list]): Cellules à exporter (en-tête incluse).
        filename (str): Nom de fichier sans extension.
        fmt (str): "xlsx" ou "csv".
        export_dir (Path | None): Dossier de sortie (défaut : settings).

    Returns:
        Path: Chemin du fichier écrit.

    Raises:
        ValueError: Si le format n'est pas supporté ou si le fichier sortirait de `export_dir`.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")

    output_dir = Path(export_dir or settings.export_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{filename}.{fmt}"
    if path.resolve().parent != output_dir.resolve():
        raise ValueError(f"Export filename escapes the export directory: {filename}")

    if fmt == "xlsx":
        _write_xlsx(grid, path)
    else:
        _write_csv(grid, path)

    logger_main, _, data_logger = get_loggers()
    logger_main.info(f"Progress table exported to {path}")
    data_logger.log_data(
        "export_table",
        {"path": path, "format": fmt, "rows": len(grid)},
    )
    return path
