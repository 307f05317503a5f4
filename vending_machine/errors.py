# vending_machine/errors.py
from decimal import Decimal


class InventoryError(Exception):
    """Raised while loading the bundled inventory. Fatal to startup."""


class ResourceNotFound(InventoryError):
    pass


class MalformedData(InventoryError):
    pass


class UnknownKey(InventoryError):
    def __init__(self, key: str):
        super().__init__(f"Unknown inventory key: {key!r}")
        self.key = key


class VendingMachineError(Exception):
    """Raised by a vend attempt. The machine stays usable afterwards."""


class InvalidSelection(VendingMachineError):
    pass


class OutOfStock(VendingMachineError):
    pass


class InsufficientFunds(VendingMachineError):
    def __init__(self, required: Decimal):
        super().__init__(f"Additional ${required} required")
        self.required = required
