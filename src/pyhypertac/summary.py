"""
Summary statistics for a populated Hypertac grid.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pyhypertac.model.signal import SignalRow
from pyhypertac.model.slot import Slot


@dataclass(frozen=True)
class SlotSummary:
    """
    Aggregate counts for a grid.

    Attributes:
        used_count: Occupied slots.
        empty_slot_count: Free slots.
        unused_from_source_count: Distinct input signal names on no slot.
        reused_signal_names: Names placed on more than one slot, in order of
            first appearance on the grid.
    """

    used_count: int
    empty_slot_count: int
    unused_from_source_count: int
    reused_signal_names: tuple[str, ...]


def summarize(
    slots: list[Slot],
    usage_counts: Mapping[str, int],
    rows: Iterable[SignalRow],
) -> SlotSummary:
    """
    Flag reused signals and count used, empty and unplaced entries.

    Sets ``is_reused`` on every used slot whose signal name was placed more
    than once. Signal names are counted once each for
    ``unused_from_source_count``, including names from rows the assignment
    engine skipped for a missing ECU name.

    Args:
        slots: Grid after :func:`pyhypertac.assignment.assign_signals`.
        usage_counts: Signal name -> slot count from the assignment outcome.
        rows: The same rows that were passed to the assignment engine.

    Returns:
        A :class:`SlotSummary`.
    """
    used_count = 0
    placed_names: set[str] = set()
    reused: list[str] = []

    for slot in slots:
        if not slot.is_used:
            continue
        used_count += 1
        placed_names.add(slot.signal_name)
        slot.is_reused = usage_counts.get(slot.signal_name, 0) > 1
        if slot.is_reused and slot.signal_name not in reused:
            reused.append(slot.signal_name)

    source_names = {
        name
        for name in ((row.signal_name or "").strip() for row in rows)
        if name
    }

    return SlotSummary(
        used_count=used_count,
        empty_slot_count=len(slots) - used_count,
        unused_from_source_count=len(source_names - placed_names),
        reused_signal_names=tuple(reused),
    )
