import pytest

from mujinplatformer.inventory import (
    SLOT_SIZE,
    SLOT_SPACE,
    SLOTS_PER_COLUMN,
    SLOTS_PER_ROW,
    Inventory,
)


def test_toggle_flips_state():
    inventory = Inventory()
    assert inventory.toggle() is True
    assert inventory.toggle() is False


def test_closed_panel_is_hidden_off_screen():
    inventory = Inventory(x=5.0, y=5.0)
    inventory.update(800)
    assert inventory.x == -1000.0


def test_open_panel_is_centred():
    inventory = Inventory()
    inventory.toggle()
    inventory.update(1280)
    assert inventory.x + inventory.width / 2 == pytest.approx(1280 / 2)


def test_fifteen_slots():
    assert len(Inventory().slot_positions()) == 15


def test_first_slot_offset_from_corner():
    inventory = Inventory(x=100.0, y=200.0)
    assert inventory.slot_positions()[0] == (150.0, 250.0)


def test_slots_are_laid_out_row_by_row():
    positions = Inventory(x=0.0, y=0.0).slot_positions()
    step = SLOT_SIZE + SLOT_SPACE
    first_row = positions[:SLOTS_PER_ROW]
    assert all(p[1] == first_row[0][1] for p in first_row)
    assert all(b[0] - a[0] == pytest.approx(step) for a, b in zip(first_row, first_row[1:]))
    below = positions[SLOTS_PER_ROW]
    assert below[0] == first_row[0][0]
    assert below[1] - first_row[0][1] == pytest.approx(step)
    assert len(positions) == SLOTS_PER_ROW * SLOTS_PER_COLUMN


def test_update_moves_slots_with_panel():
    inventory = Inventory(y=30.0)
    inventory.toggle()
    inventory.update(1000)
    assert inventory.slots == inventory.slot_positions()
    assert inventory.slots[0][0] > inventory.x