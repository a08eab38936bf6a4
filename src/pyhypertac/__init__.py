"""
PyHypertac Library.

Maps wiring-spreadsheet signal rows onto the conceptual slot grid of a
Hypertac connector block and summarizes slot usage.
"""

from .assignment import AssignmentOutcome, assign_signals, physical_connector_id
from .config import GridConfig, HypertacSettings
from .exceptions import (
    ConfigurationError,
    EmptyWorkbookError,
    ExtractionError,
    GridConfigurationError,
    GridIntegrityError,
    HypertacError,
    MissingColumnError,
    NoSignalsMappedError,
    NoValidRowsError,
    ProcessingError,
    WorkbookReadError,
    WorksheetNotFoundError,
)
from .extractor import iter_signal_rows, read_signal_rows, read_signal_rows_from_records
from .grid import initialize_slots, slot_id, slot_index
from .logging_config import setup_logging
from .model.signal import SignalRow
from .model.slot import Slot, VisualizationResult
from .report import export_grid_excel, export_slots_csv, unique_signal_connections
from .service import error_payload, is_allowed_upload, process_workbook, success_payload
from .summary import SlotSummary, summarize
from .visualization import compute_visualization

__all__ = [
    "AssignmentOutcome",
    "ConfigurationError",
    "EmptyWorkbookError",
    "ExtractionError",
    "GridConfig",
    "GridConfigurationError",
    "GridIntegrityError",
    "HypertacError",
    "HypertacSettings",
    "MissingColumnError",
    "NoSignalsMappedError",
    "NoValidRowsError",
    "ProcessingError",
    "SignalRow",
    "Slot",
    "SlotSummary",
    "VisualizationResult",
    "WorkbookReadError",
    "WorksheetNotFoundError",
    "assign_signals",
    "compute_visualization",
    "error_payload",
    "export_grid_excel",
    "export_slots_csv",
    "initialize_slots",
    "is_allowed_upload",
    "iter_signal_rows",
    "physical_connector_id",
    "process_workbook",
    "read_signal_rows",
    "read_signal_rows_from_records",
    "setup_logging",
    "slot_id",
    "slot_index",
    "success_payload",
    "summarize",
    "unique_signal_connections",
]
