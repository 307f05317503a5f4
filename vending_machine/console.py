# vending_machine/console.py
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from .catalog import VendingSelection
from .config import DEFAULT_QUANTITY, DEPOSIT_INCREMENT
from .engine import VendingMachine
from .errors import InsufficientFunds, InvalidSelection, OutOfStock
from .models import Alert, Number, as_decimal


class VendingConsole:
    """
    Headless front panel for a VendingMachine.
    Tracks what the shopper has picked and turns vend failures into alerts.
    """

    def __init__(self, machine: VendingMachine):
        self.machine = machine
        self.current_selection: Optional[VendingSelection] = None
        self.quantity: Decimal = DEFAULT_QUANTITY

    def tiles(self, assets: Optional[Iterable[str]] = None) -> List[Tuple[VendingSelection, str]]:
        assets = None if assets is None else set(assets)
        return [(s, s.icon_key(assets)) for s in self.machine.selection]

    def select(self, index: int):
        if not 0 <= index < len(self.machine.selection):
            raise IndexError(f"No item at grid position {index}")
        self.reset()
        self.current_selection = self.machine.selection[index]

    def update_quantity(self, value: Number):
        self.quantity = as_decimal(value)

    def total_price(self) -> Optional[Decimal]:
        if self.current_selection is None:
            return None
        item = self.machine.item_for(self.current_selection)
        if item is None:
            return None
        return item.price * self.quantity

    def purchase(self) -> Optional[Alert]:
        if self.current_selection is None:
            return None

        try:
            self.machine.vend(self.current_selection, self.quantity)
            return None
        except OutOfStock:
            alert = Alert(title="Out of Stock")
        except InvalidSelection:
            alert = Alert(title="Invalid Selection")
        except InsufficientFunds as e:
            alert = Alert(
                title="Insufficient Funds",
                message=f"Additional ${e.required} needed to complete the transaction",
            )

        self.reset()
        return alert

    def deposit_funds(self):
        self.machine.deposit(DEPOSIT_INCREMENT)

    def reset(self):
        self.quantity = DEFAULT_QUANTITY
