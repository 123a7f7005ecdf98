"""Tests for allergen normalization."""

from food_normalizer.domain.allergens import AllergenTable, build_allergen_table
from food_normalizer.services.allergens import (
    extract_ingredient_allergen,
    normalize_allergen,
)


def test_normalize_allergen_known_tags(allergen_table: AllergenTable) -> None:
    assert normalize_allergen(allergen_table, "EN:Milk") == "milk"
    assert normalize_allergen(allergen_table, " en:soybeans ") == "soy"
    assert normalize_allergen(allergen_table, "Tree Nuts") == "tree_nuts"


def test_normalize_allergen_unknown_is_lowercased_raw(
    allergen_table: AllergenTable,
) -> None:
    assert normalize_allergen(allergen_table, "unknown_thing") == "unknown_thing"
    assert normalize_allergen(allergen_table, "EN:Lait") == "en:lait"
    assert normalize_allergen(allergen_table, " Foo") == " foo"


def test_normalize_allergen_on_canonical_tokens(allergen_table: AllergenTable) -> None:
    assert normalize_allergen(allergen_table, "tree_nuts") == "tree_nuts"
    assert normalize_allergen(allergen_table, "brazil_nuts") == "brazil_nuts"


def test_extract_ingredient_allergen(allergen_table: AllergenTable) -> None:
    assert extract_ingredient_allergen(allergen_table, "en:peanut") == "peanuts"
    assert extract_ingredient_allergen(allergen_table, "en:hazelnuts") == "hazelnuts"
    assert extract_ingredient_allergen(allergen_table, "en:unknown_thing") == ""
    assert extract_ingredient_allergen(allergen_table, "en:sugar") == ""


def test_custom_table_keys_are_uppercased() -> None:
    table = build_allergen_table({"lactose": "milk"})

    assert table.lookup("LACTOSE") == "milk"
    assert normalize_allergen(table, "en:lactose") == "milk"
    assert normalize_allergen(table, "EN:Eggs") == "en:eggs"
