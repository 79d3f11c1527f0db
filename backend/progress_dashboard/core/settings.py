# backend/progress_dashboard/core/settings.py

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BACKEND_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    # === App settings ===
    app_name: str = "Challenge Dashboard"
    environment: str = "development"  # or "production"

    # === DATA ===
    seeds_file: Path = BACKEND_ROOT / "data" / "seeds" / "challenges.json"
    assets_dir: Path = BACKEND_ROOT / "data" / "assets"
    export_dir: Path = Path(".")

    # === LOGS ===
    logs_dir: Path = Path("logs")
    log_retention_days: int = 30

    # === PROGRESS TABLE ===
    fallback_table_days: int = 30
    fallback_completed_days: int = 3
    export_sheet_name: str = "Challenge Data"

    # === ANALYTICS ===
    monthly_progress_months: int = 6

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_", env_file=".env", extra="ignore")

# Instance globale
settings = Settings()
