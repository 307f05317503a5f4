# vending_machine/config.py
from decimal import Decimal
from pathlib import Path

# Money
INITIAL_BALANCE = Decimal("10.0")
DEPOSIT_INCREMENT = Decimal("5.00")

# Purchase defaults
DEFAULT_QUANTITY = Decimal("1")

# Bundled inventory resource
DATA_DIR = Path(__file__).parent / "data"
INVENTORY_RESOURCE = "VendingInventory"
INVENTORY_TYPE = "plist"

# Icon asset used when an item has no artwork of its own
DEFAULT_ICON = "Default"
