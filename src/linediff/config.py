"""Application configuration: settings schema and linediff.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from linediff.core.match import WARN_CELLS


CONFIG_FILE = "linediff.yaml"


class Settings(BaseModel):
    context:    int = Field(default=3, ge=0, description="Unchanged lines kept around each change")
    gap_marker: str = Field(default="...", description="Line printed where unchanged lines were pruned")
    warn_cells: int = Field(default=WARN_CELLS, ge=0, description="Matcher table size that logs a warning; 0 disables")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from linediff.yaml, then LINEDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"LINEDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
