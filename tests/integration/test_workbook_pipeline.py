"""
End-to-end tests: spreadsheet on disk -> visualization -> exports.
"""

import csv
import json

from openpyxl import load_workbook

from pyhypertac import (
    GridConfig,
    HypertacSettings,
    export_grid_excel,
    export_slots_csv,
    process_workbook,
    read_signal_rows,
    success_payload,
    unique_signal_connections,
)
from pyhypertac.visualization import compute_visualization


def _harness_rows(n):
    return [[f"SIG_{i:03d}", f"ECU{i % 4}", i, "HYP01", f"A{i:02d}"] for i in range(n)]


class TestWorkbookPipeline:
    def test_full_harness(self, make_workbook, tmp_path):
        rows = _harness_rows(20) + [["SIG_000", "ECU9", 99, "HYP02", "spare"]]
        path = make_workbook(rows)

        result = process_workbook(path)

        assert result.total_slots == 90
        assert result.used_count == 21
        assert result.empty_slot_count == 69
        assert result.unused_from_source_count == 0
        assert result.slots[0].is_reused is True
        assert result.slots[20].physical_connector_id == "HYP02-spare"
        assert result.slots[20].source_row_index == 20

        payload = json.loads(json.dumps(success_payload(result)))
        assert payload["data"]["slots"][20]["id"] == "R5C1"

        csv_path = export_slots_csv(result, str(tmp_path / "slots.csv"))
        with open(csv_path, newline="") as f:
            assert len(list(csv.DictReader(f))) == 90

        xlsx_path = export_grid_excel(result, str(tmp_path / "grid.xlsx"))
        grid = load_workbook(xlsx_path)["Grid"]
        assert grid["B2"].value == "SIG_000"
        assert grid["B6"].value == "SIG_000"

    def test_overflowing_harness(self, make_workbook):
        path = make_workbook(_harness_rows(100))
        settings = HypertacSettings(grid=GridConfig(18, 5))

        result = process_workbook(path, settings)

        assert result.used_count == 90
        assert result.empty_slot_count == 0
        assert result.unused_from_source_count == 10
        assert result.slots[-1].signal_name == "SIG_089"
        assert "10 row(s) did not fit" in result.status_message

    def test_rows_with_gaps_keep_source_indices(self, make_workbook):
        path = make_workbook(
            [
                ["A", "E1", 1, "HYP01", "A01"],
                [None, "E2", 2, "HYP01", "A02"],
                ["C", "E3", 3, None, "A03"],
            ]
        )
        rows = read_signal_rows(path)
        result = compute_visualization(rows, GridConfig(1, 5))

        assert [s.signal_name for s in result.used_slots] == ["A", "C"]
        assert [s.source_row_index for s in result.used_slots] == [0, 2]
        assert result.slots[1].physical_connector_id is None
        assert unique_signal_connections(result.slots) == [
            "A -> E1 (Pin: 1) [Hypertac: HYP01-A01]",
            "C -> E3 (Pin: 3)",
        ]
