# backend/progress_dashboard/models/progress.py

from __future__ import annotations
from typing import Optional
import datetime as dt
from pydantic import BaseModel, Field

"""
Progress derivations - clarification

- Two independent progress metrics coexist and are never merged:
    * `time_progress_percent`: days elapsed since the start date over `total_days`,
    * `manual_progress_percent`: `completed_days` over `total_days` (None if not tracked).
- `days_remaining` is signed (negative once the end date has passed);
  `display_days_remaining` is the clamped value shown to the user.
"""

class ChallengeProgress(BaseModel):
    """Temporal snapshot of one challenge at a given instant."""
    end_date: dt.date
    days_elapsed: int = Field(ge=0)
    days_remaining: int
    display_days_remaining: int = Field(ge=0)
    time_progress_percent: float = Field(ge=0, le=100)
    manual_progress_percent: Optional[float] = Field(default=None, ge=0, le=100)

    # Display strings ("Jan 5, 2025")
    start_date_display: str
    end_date_display: str
