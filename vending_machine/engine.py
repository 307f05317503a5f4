# vending_machine/engine.py
from decimal import Decimal
from typing import Optional, Tuple

from .catalog import SELECTION, VendingSelection
from .config import INITIAL_BALANCE
from .errors import InsufficientFunds, InvalidSelection, OutOfStock
from .models import Inventory, MachineState, Number, VendingItem, as_decimal


class VendingMachine:
    def __init__(self, inventory: Inventory, initial_balance: Number = INITIAL_BALANCE):
        self.state = MachineState(inventory=inventory, balance=as_decimal(initial_balance))

    @property
    def selection(self) -> Tuple[VendingSelection, ...]:
        return SELECTION

    @property
    def balance(self) -> Decimal:
        return self.state.balance

    def deposit(self, amount: Number):
        amount = as_decimal(amount)
        self.state.balance += amount
        self.state.log_history.append(
            f"DEPOSIT: Added ${amount}. Balance ${self.state.balance}."
        )

    def item_for(self, selection: VendingSelection) -> Optional[VendingItem]:
        return self.state.inventory.get(selection)

    def vend(self, selection: VendingSelection, quantity: Number):
        """
        Sells `quantity` units of `selection`, debiting the balance.

        Only a positive stock level is checked, not that it covers the
        requested quantity. Once that check passes the stock is decremented
        even if the sale is then declined for insufficient funds.
        """
        quantity = as_decimal(quantity)
        logs = self.state.log_history

        try:
            selection = VendingSelection(selection)
        except ValueError:
            logs.append(f"DECLINED: {selection} is not a product.")
            raise InvalidSelection(f"{selection} is not a product") from None

        item = self.state.inventory.get(selection)
        if item is None:
            logs.append(f"DECLINED: {selection.value} is not stocked.")
            raise InvalidSelection(f"{selection.value} is not in the inventory")

        if item.quantity <= 0:
            logs.append(f"DECLINED: {selection.value} is out of stock.")
            raise OutOfStock(f"{selection.value} is out of stock")

        item.quantity -= quantity

        total_price = item.price * quantity
        if self.state.balance >= total_price:
            self.state.balance -= total_price
            logs.append(
                f"VEND: Sold {quantity} {selection.value} for ${total_price}. "
                f"Balance ${self.state.balance}."
            )
        else:
            required = total_price - self.state.balance
            logs.append(
                f"DECLINED: {quantity} {selection.value} costs ${total_price}, "
                f"short ${required}."
            )
            raise InsufficientFunds(required=required)
