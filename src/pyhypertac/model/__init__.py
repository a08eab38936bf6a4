"""Data model for Hypertac slot visualization."""

from .signal import SignalRow
from .slot import Slot, VisualizationResult

__all__ = ["SignalRow", "Slot", "VisualizationResult"]
