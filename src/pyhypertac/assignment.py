"""
Signal-to-slot assignment engine.

Places signal rows onto the conceptual Hypertac grid in input order. Each row
takes the next free slot found by a cursor that only moves forward, so the
first row lands on R1C1, the second on R1C2, and so on across each row of the
grid. Rows that are invalid or arrive after the grid is full are logged and
skipped; the engine never fails on data problems.

The physical connector id ("HE Name-HE Pin") is stored on the slot as
metadata only. It does not influence which slot a row receives.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from pyhypertac.config import GridConfig
from pyhypertac.exceptions import GridIntegrityError
from pyhypertac.model.constants import PHYSICAL_ID_SEPARATOR
from pyhypertac.model.signal import SignalRow
from pyhypertac.model.slot import Slot

logger = logging.getLogger(__name__)


@dataclass
class AssignmentOutcome:
    """
    Bookkeeping produced by :func:`assign_signals`.

    Attributes:
        usage_counts: Signal name -> number of slots it was placed on.
        placed_count: Rows that received a slot.
        skipped_invalid: Source row indices skipped for missing mandatory data.
        skipped_overflow: Source row indices dropped because the grid was full.
    """

    usage_counts: Counter = field(default_factory=Counter)
    placed_count: int = 0
    skipped_invalid: list[int] = field(default_factory=list)
    skipped_overflow: list[int] = field(default_factory=list)


def physical_connector_id(
    connector_name: str | None, connector_pin: str | None
) -> str | None:
    """
    Join connector name and pin into a physical id.

    Returns ``None`` unless both parts are non-empty after trimming.

    Examples::

        physical_connector_id("HYP01", "A01")  # "HYP01-A01"
        physical_connector_id("HYP01", None)   # None
    """
    name = (connector_name or "").strip()
    pin = (connector_pin or "").strip()
    if name and pin:
        return f"{name}{PHYSICAL_ID_SEPARATOR}{pin}"
    return None


def _check_grid(slots: list[Slot], grid: GridConfig) -> None:
    if len(slots) != grid.total_slots:
        raise GridIntegrityError(grid.total_slots, len(slots))


def assign_signals(
    slots: list[Slot],
    rows: Iterable[SignalRow],
    grid: GridConfig,
) -> AssignmentOutcome:
    """
    Assign signal rows to free slots, mutating ``slots`` in place.

    Args:
        slots: Grid from :func:`pyhypertac.grid.initialize_slots`.
        rows: Signal rows in source order.
        grid: Grid dimensions the slots were built with.

    Returns:
        An :class:`AssignmentOutcome` with per-signal usage counts and the
        indices of skipped rows.

    Raises:
        GridIntegrityError: If ``len(slots)`` differs from
            ``grid.rows * grid.cols``.
    """
    _check_grid(slots, grid)

    outcome = AssignmentOutcome()
    total = len(slots)
    cursor = 0

    for index, row in enumerate(rows):
        source_index = row.source_row_index if row.source_row_index is not None else index
        signal_name = (row.signal_name or "").strip()
        ecu_name = (row.ecu_name or "").strip()

        if not signal_name or not ecu_name:
            logger.warning(
                "Skipping row %d due to missing Signalname or ECU Name.", source_index
            )
            outcome.skipped_invalid.append(source_index)
            continue

        phys_id = physical_connector_id(row.connector_name, row.connector_pin)

        while cursor < total and slots[cursor].is_used:
            cursor += 1

        if cursor >= total:
            logger.warning(
                "No available conceptual Hypertac slot found for signal %r "
                "(row %d). Skipping.",
                signal_name,
                source_index,
            )
            outcome.skipped_overflow.append(source_index)
            continue

        slot = slots[cursor]
        slot.is_used = True
        slot.signal_name = signal_name
        slot.ecu_name = ecu_name
        slot.ecu_pin = (row.ecu_pin or "").strip() or None
        slot.physical_connector_id = phys_id
        slot.source_row_index = source_index
        cursor += 1

        outcome.usage_counts[signal_name] += 1
        outcome.placed_count += 1

    if outcome.skipped_overflow:
        logger.warning(
            "%d signal row(s) could not be assigned: all %d Hypertac slots are used.",
            len(outcome.skipped_overflow),
            total,
        )

    return outcome
