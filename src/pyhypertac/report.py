"""Connection listings and CSV/Excel exports of a Hypertac grid."""

import csv
import os

from pyhypertac.model.constants import (
    COLOR_HEADER_FILL,
    COLOR_REUSED_FILL,
    COLOR_USED_FILL,
)
from pyhypertac.model.slot import Slot, VisualizationResult

CSV_COLUMNS = [
    "slot_id",
    "row",
    "col",
    "is_used",
    "signal_name",
    "ecu_name",
    "ecu_pin",
    "physical_connector_id",
    "is_reused",
    "source_row_index",
]


def format_connection(slot: Slot) -> str:
    """Describe a used slot as ``"SIG -> ECU (Pin: P) [Hypertac: ID]"``."""
    text = f"{slot.signal_name} -> {slot.ecu_name}"
    if slot.ecu_pin:
        text += f" (Pin: {slot.ecu_pin})"
    if slot.physical_connector_id:
        text += f" [Hypertac: {slot.physical_connector_id}]"
    return text


def unique_signal_connections(slots) -> list[str]:
    """
    List the distinct signal-to-ECU connections on the used slots.

    Args:
        slots: Iterable of :class:`Slot`.

    Returns:
        Connection strings in grid order, duplicates removed.
    """
    seen: dict[str, None] = {}
    for slot in slots:
        if slot.is_used:
            seen.setdefault(format_connection(slot), None)
    return list(seen)


def _csv_row(slot: Slot) -> dict:
    return {
        "slot_id": slot.id,
        "row": slot.row,
        "col": slot.col,
        "is_used": slot.is_used,
        "signal_name": slot.signal_name or "",
        "ecu_name": slot.ecu_name or "",
        "ecu_pin": slot.ecu_pin or "",
        "physical_connector_id": slot.physical_connector_id or "",
        "is_reused": slot.is_reused,
        "source_row_index": "" if slot.source_row_index is None else slot.source_row_index,
    }


def export_slots_csv(result: VisualizationResult, output_path: str) -> str:
    """
    Write one CSV row per slot.

    Args:
        result: Computed visualization.
        output_path: Path for the output CSV file.

    Returns:
        The path written.
    """
    os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)

    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for slot in result.slots:
            writer.writerow(_csv_row(slot))

    return output_path


def export_grid_excel(result: VisualizationResult, output_path: str) -> str:
    """
    Export the grid to an Excel workbook.

    The "Grid" sheet lays the slots out as the physical block, one cell per
    slot holding the signal name. Used cells are filled green and reused
    cells amber. A summary block sits below the grid. The "Slots" sheet
    holds the full slot table.

    Args:
        result: Computed visualization.
        output_path: Path for the ``.xlsx`` file.

    Returns:
        The path written.
    """
    from openpyxl import Workbook
    from openpyxl.styles import Alignment, Font, PatternFill
    from openpyxl.utils import get_column_letter

    header_font = Font(bold=True)
    header_fill = PatternFill(
        start_color=COLOR_HEADER_FILL, end_color=COLOR_HEADER_FILL, fill_type="solid"
    )
    used_fill = PatternFill(
        start_color=COLOR_USED_FILL, end_color=COLOR_USED_FILL, fill_type="solid"
    )
    reused_fill = PatternFill(
        start_color=COLOR_REUSED_FILL, end_color=COLOR_REUSED_FILL, fill_type="solid"
    )

    wb = Workbook()
    grid_ws = wb.active
    grid_ws.title = "Grid"

    n_rows = max((s.row for s in result.slots), default=0)
    n_cols = max((s.col for s in result.slots), default=0)

    # Row/column labels around the grid
    for col in range(1, n_cols + 1):
        cell = grid_ws.cell(row=1, column=col + 1, value=f"C{col}")
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center")
    for row in range(1, n_rows + 1):
        cell = grid_ws.cell(row=row + 1, column=1, value=f"R{row}")
        cell.font = header_font
        cell.fill = header_fill

    for slot in result.slots:
        cell = grid_ws.cell(row=slot.row + 1, column=slot.col + 1)
        cell.alignment = Alignment(horizontal="center")
        if slot.is_used:
            cell.value = slot.signal_name
            cell.fill = reused_fill if slot.is_reused else used_fill

    summary_row = n_rows + 3
    summary = [
        ("Used slots", result.used_count),
        ("Empty slots", result.empty_slot_count),
        ("Unused signals", result.unused_from_source_count),
        ("Status", result.status_message),
    ]
    for offset, (label, value) in enumerate(summary):
        grid_ws.cell(row=summary_row + offset, column=1, value=label).font = header_font
        grid_ws.cell(row=summary_row + offset, column=2, value=value)

    grid_ws.column_dimensions["A"].width = 16
    for col in range(2, n_cols + 2):
        grid_ws.column_dimensions[get_column_letter(col)].width = 18

    slots_ws = wb.create_sheet("Slots")
    for col, header in enumerate(CSV_COLUMNS, 1):
        cell = slots_ws.cell(row=1, column=col, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="left")

    for row_idx, slot in enumerate(result.slots, 2):
        values = _csv_row(slot)
        for col, key in enumerate(CSV_COLUMNS, 1):
            slots_ws.cell(row=row_idx, column=col, value=values[key])

    os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
    wb.save(output_path)
    return output_path
