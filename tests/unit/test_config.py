"""Tests for GridConfig and HypertacSettings."""

import dataclasses

import pytest

from pyhypertac.config import GridConfig, HypertacSettings
from pyhypertac.exceptions import ConfigurationError, GridConfigurationError


class TestGridConfig:
    def test_defaults(self):
        grid = GridConfig()
        assert (grid.rows, grid.cols) == (18, 5)
        assert grid.total_slots == 90

    def test_frozen(self):
        grid = GridConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            grid.rows = 4  # type: ignore[misc]

    def test_validate_returns_self(self):
        grid = GridConfig(2, 3)
        assert grid.validate() is grid

    @pytest.mark.parametrize("rows,cols", [(0, 1), (1, 0), ("2", 3), (None, 3)])
    def test_validate_rejects(self, rows, cols):
        with pytest.raises(GridConfigurationError) as exc_info:
            GridConfig(rows, cols).validate()
        assert exc_info.value.rows == rows

    def test_from_mapping(self):
        assert GridConfig.from_mapping({"rows": 4, "cols": 2}) == GridConfig(4, 2)

    def test_from_mapping_defaults(self):
        assert GridConfig.from_mapping({}) == GridConfig()


class TestHypertacSettings:
    def test_defaults(self):
        settings = HypertacSettings()
        assert settings.grid == GridConfig()
        assert settings.upload_dir == "./uploads"
        assert settings.max_upload_bytes == 5 * 1024 * 1024
        assert settings.sheet_name is None

    def test_from_env_empty(self):
        assert HypertacSettings.from_env({}) == HypertacSettings()

    def test_from_env_values(self):
        settings = HypertacSettings.from_env(
            {
                "HYPERTAC_ROWS": "10",
                "HYPERTAC_COLS": " 4 ",
                "EXCEL_UPLOAD_PATH": "/tmp/up",
                "HYPERTAC_MAX_UPLOAD_BYTES": "1024",
                "HYPERTAC_SHEET": "Signals",
            }
        )
        assert settings.grid == GridConfig(10, 4)
        assert settings.upload_dir == "/tmp/up"
        assert settings.max_upload_bytes == 1024
        assert settings.sheet_name == "Signals"

    def test_from_env_not_integer(self):
        with pytest.raises(ConfigurationError, match="HYPERTAC_ROWS"):
            HypertacSettings.from_env({"HYPERTAC_ROWS": "many"})

    def test_from_env_zero_rows(self):
        with pytest.raises(GridConfigurationError):
            HypertacSettings.from_env({"HYPERTAC_ROWS": "0"})

    def test_from_env_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("HYPERTAC_COLS", "3")
        monkeypatch.delenv("HYPERTAC_ROWS", raising=False)
        assert HypertacSettings.from_env().grid == GridConfig(18, 3)
