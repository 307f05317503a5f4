# vending_machine/catalog.py
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from .config import DEFAULT_ICON


class VendingSelection(str, Enum):
    Soda = 'Soda'
    DietSoda = 'DietSoda'
    Chips = 'Chips'
    Cookie = 'Cookie'
    Sandwich = 'Sandwich'
    Wrap = 'Wrap'
    CandyBar = 'CandyBar'
    PopTart = 'PopTart'
    Water = 'Water'
    FruitJuice = 'FruitJuice'
    SportsDrink = 'SportsDrink'
    Gum = 'Gum'

    def icon_key(self, assets: Optional[Iterable[str]] = None) -> str:
        """
        Name of the icon asset for this item.
        Falls back to the default icon when the item has no table entry,
        or when `assets` is given and does not contain the item's icon.
        """
        key = ICON_KEYS.get(self, DEFAULT_ICON)
        if assets is not None and key not in set(assets):
            return DEFAULT_ICON
        return key


# Display order of the item grid
SELECTION: Tuple[VendingSelection, ...] = tuple(VendingSelection)

ICON_KEYS: Dict[VendingSelection, str] = {s: s.value for s in VendingSelection}


def display_index(selection: VendingSelection) -> int:
    return SELECTION.index(selection)
