# vending_machine/scorer.py
from decimal import Decimal

from .models import MachineState


def calculate_stock_value(state: MachineState) -> Decimal:
    """
    Stock_Value = sum(price * quantity) over the inventory.
    Negative stock counts as empty.
    """
    value = Decimal("0")
    for item in state.inventory.values():
        value += item.price * max(Decimal("0"), item.quantity)
    return value
