"""Pytest configuration and fixtures for vending machine tests."""

from __future__ import annotations

import plistlib
from decimal import Decimal
from pathlib import Path

import pytest

from vending_machine.catalog import VendingSelection
from vending_machine.engine import VendingMachine
from vending_machine.models import VendingItem


@pytest.fixture
def soda_inventory() -> dict:
    """Single item inventory: Soda at 1.50 with 10 in stock."""
    return {VendingSelection.Soda: VendingItem(price=Decimal("1.50"), quantity=Decimal("10"))}


@pytest.fixture
def machine(soda_inventory: dict) -> VendingMachine:
    """Machine with the default starting balance of 10.0."""
    return VendingMachine(soda_inventory)


@pytest.fixture
def write_plist(tmp_path: Path):
    """Write a dict as <tmp_path>/<name>.plist and return the directory."""

    def _write(data, name: str = "VendingInventory") -> Path:
        with open(tmp_path / f"{name}.plist", "wb") as f:
            plistlib.dump(data, f)
        return tmp_path

    return _write
