"""
Signal row extraction from wiring spreadsheets.

Reads the signal-to-ECU table from an ``.xlsx`` workbook. The first row of
the worksheet holds the headers; matching is case-insensitive and ignores
surrounding whitespace:

    Signalname | ECU Name | ECU Pin | HE Name | HE Pin

``Signalname`` and ``ECU Name`` are mandatory columns. Data rows missing
either value are skipped with a warning. Source order is preserved and each
row carries its zero-based data-row index for traceability.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from openpyxl import load_workbook

from pyhypertac.exceptions import (
    EmptyWorkbookError,
    MissingColumnError,
    WorkbookReadError,
    WorksheetNotFoundError,
)
from pyhypertac.model.constants import HEADER_FIELD_MAP, MANDATORY_HEADERS
from pyhypertac.model.signal import SignalRow, clean_text

logger = logging.getLogger(__name__)

_HEADER_LOOKUP = {header.lower(): fld for header, fld in HEADER_FIELD_MAP.items()}


def map_header_columns(header_values: Iterable[Any]) -> dict[str, int]:
    """
    Map SignalRow field names to zero-based column positions.

    The first occurrence of a header wins when a header is repeated.

    Args:
        header_values: Cell values of the header row.

    Returns:
        Dict like ``{"signal_name": 0, "ecu_name": 2}``.

    Raises:
        MissingColumnError: If a mandatory header is absent.
    """
    columns: dict[str, int] = {}
    for position, value in enumerate(header_values):
        text = clean_text(value)
        if text is None:
            continue
        fld = _HEADER_LOOKUP.get(text.lower())
        if fld and fld not in columns:
            columns[fld] = position

    missing = [h for h in MANDATORY_HEADERS if HEADER_FIELD_MAP[h] not in columns]
    if missing:
        raise MissingColumnError(missing)
    return columns


def _cell(values: tuple, position: int | None) -> Any:
    if position is None or position >= len(values):
        return None
    return values[position]


def iter_signal_rows(worksheet) -> Iterator[SignalRow]:
    """
    Yield valid signal rows from an openpyxl worksheet.

    Args:
        worksheet: An openpyxl worksheet (regular or read-only).

    Yields:
        :class:`SignalRow` objects in sheet order.

    Raises:
        EmptyWorkbookError: If the sheet has no non-empty header row.
        MissingColumnError: If a mandatory header is absent.
    """
    rows = worksheet.iter_rows(values_only=True)
    header = next(rows, None)
    if header is None or all(clean_text(v) is None for v in header):
        raise EmptyWorkbookError()

    columns = map_header_columns(header)

    for index, values in enumerate(rows):
        if values is None or all(clean_text(v) is None for v in values):
            continue
        row = SignalRow.from_values(
            signal_name=_cell(values, columns.get("signal_name")),
            ecu_name=_cell(values, columns.get("ecu_name")),
            ecu_pin=_cell(values, columns.get("ecu_pin")),
            connector_name=_cell(values, columns.get("connector_name")),
            connector_pin=_cell(values, columns.get("connector_pin")),
            source_row_index=index,
        )
        if not row.is_valid:
            # +2: 1-based numbering plus the header row
            logger.warning(
                "Skipping row %d due to missing mandatory data (Signalname or ECU Name).",
                index + 2,
            )
            continue
        yield row


def read_signal_rows(path: str, sheet: str | None = None) -> list[SignalRow]:
    """
    Read all valid signal rows from an Excel workbook.

    Args:
        path: Path to an ``.xlsx``/``.xlsm`` file.
        sheet: Worksheet name, or None for the first worksheet.

    Returns:
        List of :class:`SignalRow` in sheet order. May be empty.

    Raises:
        WorkbookReadError: If the file cannot be opened as a workbook.
        WorksheetNotFoundError: If the workbook has no (matching) sheet.
        EmptyWorkbookError: If the sheet has no header row.
        MissingColumnError: If a mandatory header is absent.
    """
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except Exception as exc:
        raise WorkbookReadError(str(path), exc) from exc

    try:
        if sheet is not None:
            if sheet not in workbook.sheetnames:
                raise WorksheetNotFoundError(sheet)
            worksheet = workbook[sheet]
        else:
            if not workbook.worksheets:
                raise WorksheetNotFoundError()
            worksheet = workbook.worksheets[0]

        rows = list(iter_signal_rows(worksheet))
    finally:
        workbook.close()

    logger.info("Read %d signal row(s) from %s", len(rows), path)
    return rows


def read_signal_rows_from_records(
    records: Iterable[Mapping[str, Any]],
) -> list[SignalRow]:
    """
    Build signal rows from header-keyed dictionaries.

    Useful for CSV (``csv.DictReader``) or JSON input, which use the same
    column headers as the spreadsheet.

    Args:
        records: Iterable of mappings keyed by spreadsheet header.

    Returns:
        Valid :class:`SignalRow` objects in input order.

    Raises:
        MissingColumnError: If the first record lacks a mandatory header.
    """
    rows: list[SignalRow] = []
    columns: dict[str, str] | None = None

    for index, record in enumerate(records):
        if columns is None:
            keys = list(record.keys())
            positions = map_header_columns(keys)
            columns = {fld: keys[pos] for fld, pos in positions.items()}

        row = SignalRow.from_values(
            **{fld: record.get(key) for fld, key in columns.items()},
            source_row_index=index,
        )
        if not row.is_valid:
            logger.warning(
                "Skipping record %d due to missing mandatory data (Signalname or ECU Name).",
                index,
            )
            continue
        rows.append(row)

    return rows
