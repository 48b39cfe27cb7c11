from constants.catalog import (
    CATEGORIES,
    COLORS,
    SIZES,
    color_code_for,
    is_valid_subcategory,
    size_sort_key,
    subcategories_for,
)


def test_catalog_enumerations() -> None:
    assert SIZES[0] == "XS"
    assert SIZES[-1] == "10XL"
    assert len(SIZES) == 14
    assert set(CATEGORIES) == {"Men", "Women", "Kids", "Accessories", "Footwear"}
    assert len({color.name for color in COLORS}) == len(COLORS) == 24


def test_subcategory_lookup() -> None:
    assert "T-Shirts" in subcategories_for("Men")
    assert subcategories_for("") == ()
    assert subcategories_for("Garden") == ()
    assert is_valid_subcategory("Women", "Skirts")
    assert not is_valid_subcategory("Men", "Skirts")
    assert not is_valid_subcategory("Men", "")


def test_colour_codes_and_size_order() -> None:
    assert color_code_for("White") == "#FFFFFF"
    assert color_code_for("Unlisted") == ""
    assert color_code_for(None) == ""
    assert sorted(["XL", "XS", "M", "3XL"], key=size_sort_key) == ["XS", "M", "XL", "3XL"]
    assert size_sort_key("huge") == len(SIZES)
