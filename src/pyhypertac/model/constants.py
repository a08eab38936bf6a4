"""
Global constants for the Hypertac connector model.
Grid dimensions, spreadsheet headers and upload limits are defined here.
Deployment-specific overrides belong in environment variables (see config).
"""

# Grid System
DEFAULT_GRID_ROWS = 18
DEFAULT_GRID_COLS = 5
DEFAULT_TOTAL_SLOTS = DEFAULT_GRID_ROWS * DEFAULT_GRID_COLS  # 90

SLOT_ID_FORMAT = "R{row}C{col}"
PHYSICAL_ID_SEPARATOR = "-"

# Spreadsheet headers (first row of the worksheet)
HEADER_SIGNAL_NAME = "Signalname"
HEADER_ECU_NAME = "ECU Name"
HEADER_ECU_PIN = "ECU Pin"
HEADER_CONNECTOR_NAME = "HE Name"
HEADER_CONNECTOR_PIN = "HE Pin"

HEADER_FIELD_MAP = {
    HEADER_SIGNAL_NAME: "signal_name",
    HEADER_ECU_NAME: "ecu_name",
    HEADER_ECU_PIN: "ecu_pin",
    HEADER_CONNECTOR_NAME: "connector_name",
    HEADER_CONNECTOR_PIN: "connector_pin",
}

MANDATORY_HEADERS = (HEADER_SIGNAL_NAME, HEADER_ECU_NAME)

# Upload handling
DEFAULT_UPLOAD_DIR = "./uploads"
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5 MiB
ALLOWED_UPLOAD_EXTENSIONS = (".xlsx", ".xlsm")

# Status messages
STATUS_COMPLETE = "Hypertac simulation complete."

# Excel export colours (ARGB hex without alpha)
COLOR_USED_FILL = "C6EFCE"
COLOR_REUSED_FILL = "FFEB9C"
COLOR_HEADER_FILL = "D9D9D9"
