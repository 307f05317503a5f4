# vending_machine/models.py
from decimal import Decimal
from typing import Literal, Dict, List, Optional, Union
from pydantic import BaseModel, Field, model_validator

from .catalog import SELECTION, VendingSelection
from .config import INITIAL_BALANCE

Number = Union[int, float, str, Decimal]


def as_decimal(value: Number) -> Decimal:
    """Coerce caller-supplied money or quantities; floats go through str() to keep 1.5 as 1.5."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class VendingItem(BaseModel):
    price: Decimal = Field(ge=0, frozen=True)
    quantity: Decimal = Field(ge=0)  # Only checked at load time, vend may drive it negative


Inventory = Dict[VendingSelection, VendingItem]


class MachineState(BaseModel):
    inventory: Inventory
    balance: Decimal = INITIAL_BALANCE
    log_history: List[str] = []


class ShopperAction(BaseModel):
    action: Literal['select', 'quantity', 'deposit', 'purchase']
    index: Optional[int] = Field(default=None, ge=0, lt=len(SELECTION))  # Grid position, for 'select'
    quantity: Optional[Decimal] = None  # For 'quantity'

    @model_validator(mode='after')
    def check_arguments(self) -> 'ShopperAction':
        if self.action == 'select' and self.index is None:
            raise ValueError("'select' needs an index")
        if self.action == 'quantity' and self.quantity is None:
            raise ValueError("'quantity' needs a quantity")
        return self


class Alert(BaseModel):
    title: str
    message: Optional[str] = None
