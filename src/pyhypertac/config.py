"""
Configuration for Hypertac grid computation and upload processing.

Defaults come from :mod:`pyhypertac.model.constants`. A deployment can
override them through environment variables via
:meth:`HypertacSettings.from_env`:

    HYPERTAC_ROWS               grid rows (default 18)
    HYPERTAC_COLS               grid columns (default 5)
    EXCEL_UPLOAD_PATH           upload directory (default ./uploads)
    HYPERTAC_MAX_UPLOAD_BYTES   upload size limit (default 5 MiB)
    HYPERTAC_SHEET              worksheet name (default: first sheet)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pyhypertac.exceptions import ConfigurationError, GridConfigurationError
from pyhypertac.model.constants import (
    DEFAULT_GRID_COLS,
    DEFAULT_GRID_ROWS,
    DEFAULT_MAX_UPLOAD_BYTES,
    DEFAULT_UPLOAD_DIR,
)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


@dataclass(frozen=True)
class GridConfig:
    """
    Dimensions of the Hypertac slot grid.

    Attributes:
        rows: Number of grid rows (>= 1).
        cols: Number of grid columns (>= 1).
    """

    rows: int = DEFAULT_GRID_ROWS
    cols: int = DEFAULT_GRID_COLS

    @property
    def total_slots(self) -> int:
        return self.rows * self.cols

    def validate(self) -> "GridConfig":
        """Raise GridConfigurationError unless both dimensions are >= 1."""
        if not (_is_positive_int(self.rows) and _is_positive_int(self.cols)):
            raise GridConfigurationError(self.rows, self.cols)
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GridConfig":
        """
        Build from a ``{"rows": .., "cols": ..}`` mapping.

        Missing keys fall back to the defaults.
        """
        return cls(
            rows=data.get("rows", DEFAULT_GRID_ROWS),
            cols=data.get("cols", DEFAULT_GRID_COLS),
        ).validate()


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"Environment variable {key}={raw!r} is not an integer."
        ) from None


@dataclass(frozen=True)
class HypertacSettings:
    """
    Settings for processing uploaded wiring spreadsheets.

    Attributes:
        grid: Grid dimensions.
        upload_dir: Directory where uploads are stored before processing.
        max_upload_bytes: Largest accepted upload.
        sheet_name: Worksheet to read, or None for the first sheet.
    """

    grid: GridConfig = field(default_factory=GridConfig)
    upload_dir: str = DEFAULT_UPLOAD_DIR
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    sheet_name: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HypertacSettings":
        """Read settings from environment variables (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        grid = GridConfig(
            rows=_env_int(env, "HYPERTAC_ROWS", DEFAULT_GRID_ROWS),
            cols=_env_int(env, "HYPERTAC_COLS", DEFAULT_GRID_COLS),
        ).validate()
        sheet = (env.get("HYPERTAC_SHEET") or "").strip() or None
        return cls(
            grid=grid,
            upload_dir=env.get("EXCEL_UPLOAD_PATH") or DEFAULT_UPLOAD_DIR,
            max_upload_bytes=_env_int(
                env, "HYPERTAC_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES
            ),
            sheet_name=sheet,
        )
