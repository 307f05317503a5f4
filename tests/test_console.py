"""Tests for the console front panel."""

from __future__ import annotations

from decimal import Decimal

import pytest

from vending_machine.catalog import VendingSelection
from vending_machine.console import VendingConsole
from vending_machine.engine import VendingMachine
from vending_machine.models import VendingItem


@pytest.fixture
def console(machine: VendingMachine) -> VendingConsole:
    return VendingConsole(machine)


def test_purchase_without_selection_does_nothing(console):
    assert console.purchase() is None
    assert console.machine.balance == Decimal("10.0")
    assert console.machine.state.log_history == []


def test_select_and_total_price(console):
    console.select(0)
    console.update_quantity(3)

    assert console.current_selection is VendingSelection.Soda
    assert console.total_price() == Decimal("4.50")


def test_select_resets_quantity(console):
    console.update_quantity(4)
    console.select(0)

    assert console.quantity == 1


def test_total_price_for_unstocked_item(console):
    assert console.total_price() is None
    console.select(2)
    assert console.total_price() is None


def test_successful_purchase(console):
    console.select(0)
    console.update_quantity(2)

    assert console.purchase() is None
    assert console.machine.balance == Decimal("7.0")
    assert console.quantity == 2


def test_insufficient_funds_alert(console):
    console.select(0)
    console.update_quantity(10)

    alert = console.purchase()

    assert alert.title == "Insufficient Funds"
    assert alert.message == "Additional $5.00 needed to complete the transaction"
    assert console.quantity == 1


def test_invalid_selection_alert(console):
    console.select(11)

    assert console.purchase().title == "Invalid Selection"


def test_out_of_stock_alert():
    machine = VendingMachine({VendingSelection.Soda: VendingItem(price=1, quantity=0)})
    console = VendingConsole(machine)
    console.select(0)

    alert = console.purchase()

    assert alert.title == "Out of Stock"
    assert alert.message is None


def test_deposit_funds_adds_fixed_increment(console):
    console.deposit_funds()
    console.deposit_funds()

    assert console.machine.balance == Decimal("20.00")


def test_tiles_follow_catalog_order(console):
    tiles = console.tiles(assets={"Soda", "Default"})

    assert len(tiles) == 12
    assert tiles[0] == (VendingSelection.Soda, "Soda")
    assert tiles[1] == (VendingSelection.DietSoda, "Default")


@pytest.mark.parametrize("index", [-1, 12])
def test_select_rejects_positions_off_the_grid(console, index):
    with pytest.raises(IndexError):
        console.select(index)

    assert console.current_selection is None
