"""Store configuration."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DATA_DIR_ENV = "SHIFT_PLANNER_DATA_DIR"


class StoreConfig(BaseModel):
    """Configuration for the domain store and its collaborators."""

    data_dir: Path | None = Field(
        default=None, description="Directory for JSON storage; None keeps data in memory"
    )
    hours_per_shift: int = Field(default=8, ge=1, le=24)
    notification_ttl_seconds: float = Field(default=5.0, gt=0)
    history_date_format: str = "%d/%m/%Y"
    seed_on_empty: bool = Field(
        default=True, description="Fall back to the demo dataset for missing keys"
    )

    @classmethod
    def from_env(cls, **overrides) -> StoreConfig:
        data_dir = os.environ.get(DATA_DIR_ENV)
        if data_dir and "data_dir" not in overrides:
            overrides["data_dir"] = Path(data_dir)
        return cls(**overrides)
