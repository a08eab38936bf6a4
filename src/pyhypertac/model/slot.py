"""
Conceptual Hypertac slots and the visualization result built from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Slot:
    """
    One fixed position in the Hypertac connector grid.

    Slots are created empty by :func:`pyhypertac.grid.initialize_slots` and
    filled in place by the assignment engine.

    Attributes:
        id: Conceptual identifier, e.g. ``"R1C1"`` (1-indexed).
        row: Grid row (1-indexed).
        col: Grid column (1-indexed).
        is_used: True once a signal is assigned to the slot.
        signal_name: Assigned signal name.
        ecu_name: ECU of the assigned signal.
        ecu_pin: ECU pin of the assigned signal.
        physical_connector_id: ``"{HE Name}-{HE Pin}"`` when both are known.
        is_reused: True if the signal name occupies more than one slot.
        source_row_index: Zero-based index of the row the signal came from.
    """

    id: str
    row: int
    col: int
    is_used: bool = False
    signal_name: str | None = None
    ecu_name: str | None = None
    ecu_pin: str | None = None
    physical_connector_id: str | None = None
    is_reused: bool = False
    source_row_index: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the slot with the camelCase keys used by the web client."""
        return {
            "id": self.id,
            "row": self.row,
            "col": self.col,
            "isUsed": self.is_used,
            "signalName": self.signal_name,
            "ecuName": self.ecu_name,
            "ecuPin": self.ecu_pin,
            "physicalConnectorId": self.physical_connector_id,
            "isReused": self.is_reused,
            "sourceRowIndex": self.source_row_index,
        }


@dataclass(frozen=True)
class VisualizationResult:
    """
    Output of a single Hypertac computation.

    Attributes:
        slots: All slots in row-major order. Length equals the grid size.
        used_count: Number of occupied slots.
        unused_from_source_count: Distinct signal names from the input that
            ended up on no slot.
        empty_slot_count: Number of free slots.
        status_message: Human-readable completion message.
    """

    slots: tuple[Slot, ...]
    used_count: int
    unused_from_source_count: int
    empty_slot_count: int
    status_message: str
    reused_signal_names: tuple[str, ...] = field(default=())

    @property
    def total_slots(self) -> int:
        return len(self.slots)

    @property
    def used_slots(self) -> list[Slot]:
        return [s for s in self.slots if s.is_used]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-ready ``data`` object of a success payload."""
        return {
            "slots": [s.to_dict() for s in self.slots],
            "usedCount": self.used_count,
            "unusedFromSourceCount": self.unused_from_source_count,
            "emptySlotCount": self.empty_slot_count,
            "statusMessage": self.status_message,
        }
