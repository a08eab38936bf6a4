"""
Upload processing for Hypertac visualization.

Ties the row extractor to the core computation the way a web handler uses
them: read the uploaded workbook, compute the grid, reject uploads where
nothing could be mapped, and always remove the temporary file afterwards.
The payload helpers produce the JSON bodies a transport layer returns.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from pyhypertac.config import HypertacSettings
from pyhypertac.exceptions import (
    HypertacError,
    NoSignalsMappedError,
    NoValidRowsError,
    ProcessingError,
)
from pyhypertac.extractor import read_signal_rows
from pyhypertac.model.constants import ALLOWED_UPLOAD_EXTENSIONS
from pyhypertac.model.slot import VisualizationResult
from pyhypertac.visualization import compute_visualization

logger = logging.getLogger(__name__)


def is_allowed_upload(
    filename: str, size: int | None = None, settings: HypertacSettings | None = None
) -> bool:
    """
    Check an upload's extension and size before it is processed.

    Args:
        filename: Original name of the uploaded file.
        size: Size in bytes, if known.
        settings: Settings providing the size limit (defaults used if None).

    Returns:
        True if the file is an accepted Excel workbook within the limit.
    """
    settings = settings or HypertacSettings()
    if not filename.lower().endswith(ALLOWED_UPLOAD_EXTENSIONS):
        return False
    if size is not None and size > settings.max_upload_bytes:
        return False
    return True


def _remove_upload(path: str) -> None:
    try:
        os.remove(path)
        logger.info("Cleaned up uploaded file: %s", path)
    except OSError as exc:
        logger.error("Failed to delete temporary file %s: %s", path, exc)


def process_workbook(
    path: str,
    settings: HypertacSettings | None = None,
    cleanup: bool = True,
) -> VisualizationResult:
    """
    Process an uploaded Excel file into Hypertac visualization data.

    Args:
        path: Path to the uploaded workbook.
        settings: Grid and sheet settings (defaults used if None).
        cleanup: Delete ``path`` once processing finishes, even on failure.

    Returns:
        The computed :class:`VisualizationResult`.

    Raises:
        ExtractionError: For unreadable files, missing sheets or columns, or
            a sheet with no valid rows.
        NoSignalsMappedError: If rows were read but none received a slot.
        ProcessingError: Wrapping any unexpected failure.
    """
    settings = settings or HypertacSettings()
    try:
        rows = read_signal_rows(path, sheet=settings.sheet_name)
        if not rows:
            raise NoValidRowsError()

        result = compute_visualization(rows, settings.grid)

        if result.used_count == 0:
            raise NoSignalsMappedError(len(rows))

        return result
    except HypertacError:
        raise
    except Exception as exc:
        logger.exception("Error while processing %s", path)
        raise ProcessingError(exc) from exc
    finally:
        if cleanup:
            _remove_upload(path)


def success_payload(result: VisualizationResult) -> dict[str, Any]:
    """Return the ``{"status": "success", "data": ...}`` response body."""
    return {"status": "success", "data": result.to_dict()}


def error_payload(exc: Exception, debug: bool = False) -> tuple[int, dict[str, Any]]:
    """
    Translate an exception into ``(status_code, body)``.

    Operational :class:`HypertacError` messages are passed through. Anything
    else is reported as a generic 500 so internals are not leaked, unless
    ``debug`` is set.

    Args:
        exc: The exception raised while handling a request.
        debug: Include the exception type and message for any error.

    Returns:
        Tuple of HTTP status code and JSON-ready body.
    """
    if isinstance(exc, HypertacError):
        status_code = exc.status_code
        body: dict[str, Any] = {"status": exc.status}
        operational = exc.is_operational
    else:
        status_code = 500
        body = {"status": "error"}
        operational = False

    if operational or debug:
        body["message"] = str(exc)
    else:
        logger.error("Unhandled error: %r", exc)
        body["message"] = "Something went wrong"

    if debug:
        body["error"] = type(exc).__name__
    return status_code, body
