# vending_machine/loader.py
import json
import plistlib
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from .catalog import VendingSelection
from .config import DATA_DIR, INVENTORY_RESOURCE, INVENTORY_TYPE
from .errors import MalformedData, ResourceNotFound, UnknownKey
from .models import Inventory, VendingItem

PARSERS = {
    'plist': plistlib.load,
    'json': json.load,
}


def dictionary_from_file(resource: str,
                         of_type: str,
                         bundle_dir: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Reads `<bundle_dir>/<resource>.<of_type>` into a plain dict.
    Raises ResourceNotFound if the file is missing and MalformedData if it
    cannot be parsed into a mapping.
    """
    path = Path(bundle_dir or DATA_DIR) / f"{resource}.{of_type}"
    if not path.is_file():
        raise ResourceNotFound(f"No resource {path.name} in {path.parent}")

    parser = PARSERS.get(of_type)
    if parser is None:
        raise MalformedData(f"Unsupported resource type: {of_type}")

    with open(path, 'rb') as f:
        try:
            data = parser(f)
        except Exception as e:
            # plistlib surfaces bad element content as arbitrary errors
            raise MalformedData(f"Could not parse {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise MalformedData(f"{path.name} does not contain a dictionary")
    return data


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def vending_inventory_from_dictionary(dictionary: Dict[str, Any]) -> Inventory:
    """
    Builds the inventory from `{name: {'price': ..., 'quantity': ...}}`.

    Entries without a valid price and quantity, or with any non-numeric
    field, are skipped, so one bad record does not abort the load. An
    unknown item name on an otherwise valid entry raises UnknownKey.
    """
    inventory: Inventory = {}

    for key, value in dictionary.items():
        if not isinstance(value, dict) or not all(_is_number(v) for v in value.values()):
            continue
        try:
            item = VendingItem(price=value['price'], quantity=value['quantity'])
        except (KeyError, ValidationError):
            continue

        try:
            selection = VendingSelection(key)
        except ValueError:
            raise UnknownKey(key) from None

        inventory[selection] = item

    return inventory


def load_inventory(resource: str = INVENTORY_RESOURCE,
                   of_type: str = INVENTORY_TYPE,
                   bundle_dir: Optional[Union[str, Path]] = None) -> Inventory:
    dictionary = dictionary_from_file(resource, of_type, bundle_dir)
    return vending_inventory_from_dictionary(dictionary)
