"""Tests for pyhypertac.grid."""

import pytest

from pyhypertac.exceptions import GridConfigurationError
from pyhypertac.grid import initialize_slots, slot_id, slot_index


class TestSlotId:
    def test_format(self):
        assert slot_id(1, 1) == "R1C1"
        assert slot_id(18, 5) == "R18C5"


class TestSlotIndex:
    def test_first_and_last(self):
        assert slot_index(1, 1, 5) == 0
        assert slot_index(18, 5, 5) == 89

    def test_row_major(self):
        assert slot_index(2, 1, 5) == 5


class TestInitializeSlots:
    def test_default_grid_size(self):
        slots = initialize_slots(18, 5)
        assert len(slots) == 90

    def test_row_major_order(self):
        slots = initialize_slots(2, 3)
        assert [s.id for s in slots] == ["R1C1", "R1C2", "R1C3", "R2C1", "R2C2", "R2C3"]
        assert [(s.row, s.col) for s in slots][3] == (2, 1)

    def test_all_empty(self):
        for slot in initialize_slots(3, 3):
            assert slot.is_used is False
            assert slot.is_reused is False
            assert slot.signal_name is None
            assert slot.ecu_name is None
            assert slot.ecu_pin is None
            assert slot.physical_connector_id is None
            assert slot.source_row_index is None

    def test_index_matches_slot_index(self):
        slots = initialize_slots(4, 3)
        for slot in slots:
            assert slots[slot_index(slot.row, slot.col, 3)] is slot

    def test_fresh_objects_per_call(self):
        a = initialize_slots(1, 2)
        b = initialize_slots(1, 2)
        a[0].is_used = True
        assert b[0].is_used is False

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 5), (2.5, 2), (True, 2)])
    def test_invalid_dimensions(self, rows, cols):
        with pytest.raises(GridConfigurationError):
            initialize_slots(rows, cols)
