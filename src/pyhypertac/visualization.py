"""
Hypertac visualization model.

:func:`compute_visualization` is the single entry point of the core: it
builds a fresh grid, assigns the signal rows, summarizes the result and
returns a :class:`~pyhypertac.model.slot.VisualizationResult`. Every call
owns its own grid, so concurrent callers never share state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pyhypertac.assignment import assign_signals
from pyhypertac.config import GridConfig
from pyhypertac.grid import initialize_slots
from pyhypertac.model.constants import STATUS_COMPLETE
from pyhypertac.model.signal import SignalRow
from pyhypertac.model.slot import VisualizationResult
from pyhypertac.summary import summarize

logger = logging.getLogger(__name__)

GridLike = GridConfig | Mapping[str, Any] | None


def _resolve_grid(grid_config: GridLike) -> GridConfig:
    if grid_config is None:
        return GridConfig()
    if isinstance(grid_config, GridConfig):
        return grid_config.validate()
    return GridConfig.from_mapping(grid_config)


def _status_message(used: int, empty: int, overflow: int) -> str:
    message = f"{STATUS_COMPLETE} {used} slot(s) used, {empty} empty."
    if overflow:
        message += f" {overflow} row(s) did not fit."
    return message


def compute_visualization(
    rows: Iterable[SignalRow],
    grid_config: GridLike = None,
) -> VisualizationResult:
    """
    Compute the Hypertac slot visualization for a sequence of signal rows.

    Data problems never raise: invalid rows and rows beyond the grid capacity
    are skipped and show up only in the counts.

    Args:
        rows: Signal rows in source order.
        grid_config: A :class:`GridConfig`, a ``{"rows": .., "cols": ..}``
            mapping, or None for the default 18x5 grid.

    Returns:
        The populated :class:`VisualizationResult`.

    Raises:
        GridConfigurationError: If the grid dimensions are invalid.
        GridIntegrityError: If the grid is built with the wrong slot count.
    """
    grid = _resolve_grid(grid_config)
    row_list = list(rows)

    slots = initialize_slots(grid.rows, grid.cols)
    outcome = assign_signals(slots, row_list, grid)
    summary = summarize(slots, outcome.usage_counts, row_list)

    logger.info(
        "Hypertac simulation: %d row(s) in, %d slot(s) used, %d empty, %d reused signal(s).",
        len(row_list),
        summary.used_count,
        summary.empty_slot_count,
        len(summary.reused_signal_names),
    )

    return VisualizationResult(
        slots=tuple(slots),
        used_count=summary.used_count,
        unused_from_source_count=summary.unused_from_source_count,
        empty_slot_count=summary.empty_slot_count,
        status_message=_status_message(
            summary.used_count,
            summary.empty_slot_count,
            len(outcome.skipped_overflow),
        ),
        reused_signal_names=summary.reused_signal_names,
    )
