"""Fixed catalog enumerations shared by the seller wizard."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping


SIZES: Final[tuple[str, ...]] = (
    "XS",
    "S",
    "M",
    "L",
    "XL",
    "XXL",
    "3XL",
    "4XL",
    "5XL",
    "6XL",
    "7XL",
    "8XL",
    "9XL",
    "10XL",
)

CATEGORIES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "Men": ("Shirts", "T-Shirts", "Jeans", "Trousers", "Jackets"),
        "Women": ("Dresses", "Tops", "Jeans", "Skirts", "Jackets"),
        "Kids": ("T-Shirts", "Jeans", "Dresses", "Tops", "Sets"),
        "Accessories": ("Belts", "Hats", "Scarf", "Gloves", "Socks"),
        "Footwear": ("Shoes", "Boots", "Sandals", "Slippers", "Sneakers"),
    }
)


@dataclass(frozen=True)
class PaletteColor:
    name: str
    hex: str


COLORS: Final[tuple[PaletteColor, ...]] = (
    PaletteColor("Black", "#000000"),
    PaletteColor("White", "#FFFFFF"),
    PaletteColor("Red", "#FF0000"),
    PaletteColor("Green", "#008000"),
    PaletteColor("Blue", "#0000FF"),
    PaletteColor("Yellow", "#FFFF00"),
    PaletteColor("Purple", "#800080"),
    PaletteColor("Orange", "#FFA500"),
    PaletteColor("Pink", "#FFC0CB"),
    PaletteColor("Brown", "#A52A2A"),
    PaletteColor("Gray", "#808080"),
    PaletteColor("Navy", "#000080"),
    PaletteColor("Teal", "#008080"),
    PaletteColor("Olive", "#808000"),
    PaletteColor("Maroon", "#800000"),
    PaletteColor("Lime", "#00FF00"),
    PaletteColor("Cyan", "#00FFFF"),
    PaletteColor("Magenta", "#FF00FF"),
    PaletteColor("Silver", "#C0C0C0"),
    PaletteColor("Gold", "#FFD700"),
    PaletteColor("Indigo", "#4B0082"),
    PaletteColor("Violet", "#EE82EE"),
    PaletteColor("Beige", "#F5F5DC"),
    PaletteColor("Coral", "#FF7F50"),
)

_COLOR_CODES: Final[Mapping[str, str]] = MappingProxyType({color.name: color.hex for color in COLORS})
_SIZE_ORDER: Final[Mapping[str, int]] = MappingProxyType({size: index for index, size in enumerate(SIZES)})


def subcategories_for(category: str | None) -> tuple[str, ...]:
    """Return the subcategories of ``category`` (empty for unknown values)."""

    if not category:
        return ()
    return CATEGORIES.get(category, ())


def is_valid_subcategory(category: str | None, subcategory: str | None) -> bool:
    return bool(subcategory) and subcategory in subcategories_for(category)


def color_code_for(name: str | None) -> str:
    """Return the palette hex code for ``name`` or ``""`` when unknown."""

    if not name:
        return ""
    return _COLOR_CODES.get(name, "")


def size_sort_key(size: str) -> int:
    """Sort key following :data:`SIZES`; unknown sizes sort last."""

    return _SIZE_ORDER.get(size, len(SIZES))


__all__ = [
    "CATEGORIES",
    "COLORS",
    "PaletteColor",
    "SIZES",
    "color_code_for",
    "is_valid_subcategory",
    "size_sort_key",
    "subcategories_for",
]
