"""
Signal rows read from a wiring spreadsheet.

A ``SignalRow`` is one line of the signal-to-ECU assignment table. Values are
normalized on construction through :meth:`SignalRow.from_values`, so code
downstream of the extractor can rely on trimmed strings and ``None`` for
absent optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def clean_text(value: Any) -> str | None:
    """
    Convert a raw cell value into a trimmed string.

    Integral floats (``5.0``) are rendered without the fractional part since
    spreadsheet tools store pin numbers as floats. Empty or whitespace-only
    values become ``None``.

    Args:
        value: Any cell value (str, int, float, None, ...).

    Returns:
        The trimmed string, or ``None`` if nothing remains.

    Examples::

        clean_text("  A01 ")  # "A01"
        clean_text(12.0)      # "12"
        clean_text("   ")     # None
    """
    if value is None:
        return None
    if isinstance(value, bool):
        text = str(value)
    elif isinstance(value, float) and value.is_integer():
        text = str(int(value))
    else:
        text = str(value)
    text = text.strip()
    return text or None


@dataclass(frozen=True)
class SignalRow:
    """
    One signal-to-ECU assignment row.

    Attributes:
        signal_name: Signal name (mandatory, trimmed).
        ecu_name: ECU the signal is wired to (mandatory, trimmed).
        ecu_pin: Pin on the ECU, if given.
        connector_name: Physical Hypertac connector name ("HE Name").
        connector_pin: Physical Hypertac connector pin ("HE Pin").
        source_row_index: Zero-based index of the data row in the source
            sheet, header excluded. ``None`` when the row was built in code.
    """

    signal_name: str
    ecu_name: str
    ecu_pin: str | None = None
    connector_name: str | None = None
    connector_pin: str | None = None
    source_row_index: int | None = None

    @classmethod
    def from_values(
        cls,
        signal_name: Any,
        ecu_name: Any,
        ecu_pin: Any = None,
        connector_name: Any = None,
        connector_pin: Any = None,
        source_row_index: int | None = None,
    ) -> "SignalRow":
        """Build a row from raw cell values, trimming everything."""
        return cls(
            signal_name=clean_text(signal_name) or "",
            ecu_name=clean_text(ecu_name) or "",
            ecu_pin=clean_text(ecu_pin),
            connector_name=clean_text(connector_name),
            connector_pin=clean_text(connector_pin),
            source_row_index=source_row_index,
        )

    @property
    def is_valid(self) -> bool:
        """True when both mandatory fields are non-empty after trimming."""
        return bool(self.signal_name.strip()) and bool(self.ecu_name.strip())
