"""Custom exceptions for PyHypertac."""


class HypertacError(Exception):
    """
    Base class for all PyHypertac errors.

    Carries an HTTP-style ``status_code`` so a web layer can translate the
    error without inspecting its type. ``is_operational`` marks errors that
    are expected and safe to show to a client.
    """

    status_code = 500
    is_operational = True

    def __init__(self, message: str, status_code: int | None = None):
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    @property
    def status(self) -> str:
        """``"fail"`` for client errors (4xx), ``"error"`` otherwise."""
        return "fail" if str(self.status_code).startswith("4") else "error"


class ConfigurationError(HypertacError):
    """Raised when a setting cannot be parsed or is out of range."""

    is_operational = False


class GridConfigurationError(ConfigurationError):
    """Raised when the grid dimensions are not positive integers."""

    def __init__(self, rows: object, cols: object):
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Invalid Hypertac grid dimensions rows={rows!r}, cols={cols!r}. "
            f"Both must be integers >= 1."
        )


class GridIntegrityError(HypertacError):
    """Raised when the slot list does not match the configured grid size."""

    is_operational = False

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Hypertac slots initialization error: expected {expected} slots, "
            f"got {actual}."
        )


class ExtractionError(HypertacError):
    """Raised when signal rows cannot be read from the input workbook."""

    status_code = 400


class WorksheetNotFoundError(ExtractionError):
    """Raised when the workbook has no (matching) worksheet."""

    def __init__(self, sheet_name: str | None = None):
        self.sheet_name = sheet_name
        if sheet_name:
            message = f"Worksheet '{sheet_name}' not found in the Excel file."
        else:
            message = "No worksheet found in the Excel file."
        super().__init__(message)


class EmptyWorkbookError(ExtractionError):
    """Raised when the worksheet has no header row."""

    def __init__(self):
        super().__init__("Excel file is empty or has no headers.")


class MissingColumnError(ExtractionError):
    """Raised when one or more mandatory header columns are absent."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        quoted = ", ".join(f'"{m}"' for m in self.missing)
        super().__init__(f"Missing mandatory column(s): {quoted} in Excel file.")


class NoValidRowsError(ExtractionError):
    """Raised when the worksheet contains no row with the mandatory fields."""

    def __init__(self):
        super().__init__(
            "No valid signal data found in the Excel file after parsing. "
            "Ensure required columns are present and data is not empty."
        )


class WorkbookReadError(ExtractionError):
    """Raised when the file cannot be opened as a workbook."""

    status_code = 500

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse Excel file '{path}': {cause}")


class NoSignalsMappedError(HypertacError):
    """Raised when valid rows were read but none landed on a slot."""

    status_code = 400

    def __init__(self, row_count: int):
        self.row_count = row_count
        super().__init__(
            f"No signals could be successfully mapped to Hypertac slots from "
            f"the {row_count} row(s) provided. Please check Excel format and data."
        )


class ProcessingError(HypertacError):
    """Wraps an unexpected failure while processing an upload."""

    is_operational = False

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(
            f"Failed to process Excel for Hypertac visualization: {cause or 'Unknown error'}"
        )
