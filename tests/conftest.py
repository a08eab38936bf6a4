import pytest
from openpyxl import Workbook

from pyhypertac.model.signal import SignalRow

HEADERS = ["Signalname", "ECU Name", "ECU Pin", "HE Name", "HE Pin"]


@pytest.fixture
def make_workbook(tmp_path):
    """
    Fixture that returns a function writing an .xlsx file with the given rows.
    Usage:
        def test_something(make_workbook):
            path = make_workbook([["SIG", "ECU1", "1", "HYP01", "A01"]])
    """

    def _make(rows, headers=HEADERS, name="signals.xlsx", sheet_title=None):
        wb = Workbook()
        ws = wb.active
        if sheet_title:
            ws.title = sheet_title
        if headers is not None:
            ws.append(headers)
        for row in rows:
            ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return str(path)

    return _make


@pytest.fixture
def sample_rows():
    """Five rows: one reused signal, one without physical connector data."""
    return [
        SignalRow("CAN_H", "ECU1", "1", "HYP01", "A01"),
        SignalRow("CAN_L", "ECU1", "2", "HYP01", "A02"),
        SignalRow("KL30", "ECU2", "5", "HYP01", "B01"),
        SignalRow("KL30", "ECU3", "5"),
        SignalRow("IGN", "ECU2", None, "HYP02", None),
    ]
