"""Tests for serving size parsing."""

import pytest

from food_normalizer.domain.food import UnitClass
from food_normalizer.services.serving_size import (
    SERVING_PATTERNS,
    ParsedServingSize,
    ServingCandidate,
    ServingPattern,
    clean_serving_text,
    convert_fractions,
    display_unit,
    drop_extra_parentheticals,
    estimate_weight,
    parse_serving_size,
    strip_descriptors,
    weight_from_label,
)


def _pattern(name: str) -> ServingPattern:
    return next(pattern for pattern in SERVING_PATTERNS if pattern.name == name)


def test_patterns_are_tried_in_priority_order() -> None:
    assert [pattern.name for pattern in SERVING_PATTERNS] == [
        "bare_weight",
        "labelled",
        "counted",
        "counted_with_weight",
        "dual_disclosure",
        "weight_first",
        "gram_parenthetical",
        "gram_confirmation",
        "trailing_unit",
        "quantity_unit",
    ]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("200g", ParsedServingSize(1.0, "Serving", 200.0, UnitClass.OTHER)),
        ("250 ml|", ParsedServingSize(1.0, "Serving", 250.0, UnitClass.OTHER)),
        ("2 SLICES (57 g)", ParsedServingSize(2.0, "Slices", 57.0, UnitClass.OTHER)),
        ("1 BOTTLE (295 ml)", ParsedServingSize(1.0, "Bottle", 295.0, UnitClass.OTHER)),
        ("30 g (30 GRM)", ParsedServingSize(30.0, "g", 30.0, UnitClass.METRIC)),
        ("1.5 g (1 TEA BAG)", ParsedServingSize(1.0, "Tea bag", 1.5, UnitClass.OTHER)),
        ("1 ONZ (28 g)", ParsedServingSize(1.0, "Oz", 28.0, UnitClass.IMPERIAL)),
        (
            "1 biscuit (25 g) (2 pieces)",
            ParsedServingSize(1.0, "Biscuit", 25.0, UnitClass.OTHER),
        ),
        ("1 bar 45g", ParsedServingSize(1.0, "Bar 45g", 45.0, UnitClass.OTHER)),
        ("bottle 330 ml", ParsedServingSize(1.0, "Serving", 330.0, UnitClass.OTHER)),
    ],
)
def test_parse_serving_size(text: str, expected: ParsedServingSize) -> None:
    assert parse_serving_size(text) == expected


def test_parse_estimates_household_units() -> None:
    assert parse_serving_size("1 cup") == ParsedServingSize(
        1.0, "Cup", 240.0, UnitClass.OTHER
    )
    assert parse_serving_size("1/2 cup") == ParsedServingSize(
        0.5, "Cup", 120.0, UnitClass.OTHER
    )
    assert parse_serving_size("2 tbsp") == ParsedServingSize(
        2.0, "Tbsp", 30.0, UnitClass.OTHER
    )


def test_parse_leaves_unknown_weight_at_zero() -> None:
    assert parse_serving_size("1,5 oz") == ParsedServingSize(
        1.5, "Oz", 0.0, UnitClass.IMPERIAL
    )
    assert parse_serving_size("1 kg") == ParsedServingSize(
        1.0, "Kg", 0.0, UnitClass.METRIC
    )


@pytest.mark.parametrize(
    ("text", "unit"),
    [
        ("", ""),
        ("abc (def)", "Abc (def)"),
        ("PORTION (VOIR EMBALLAGE)", "Portion (voir emballage)"),
        ("cuillère (à soupe)", "cuillère (à soupe)"),
    ],
)
def test_parse_unmatched_text_becomes_unit(text: str, unit: str) -> None:
    assert parse_serving_size(text) == ParsedServingSize(
        1.0, unit, 0.0, UnitClass.OTHER
    )


def test_bare_weight_only_collapses_unconverted_units() -> None:
    pattern = _pattern("bare_weight")

    assert pattern.apply("200g") == ServingCandidate(1.0, "Serving", 200.0)
    assert pattern.apply("500mg") is None
    assert pattern.apply("1kg") is None
    assert pattern.apply("200G") is None


def test_labelled_pattern() -> None:
    pattern = _pattern("labelled")

    assert pattern.apply("2 SLICES (57 g)") == ServingCandidate(2.0, "SLICES", 57.0)
    assert pattern.apply("Portion e") == ServingCandidate(1.0, "Portion", 0.0)
    assert pattern.apply("1 cup (1 cups)") == ServingCandidate(1.0, "cup", 0.0)
    assert pattern.apply("1 sachet (1 TEA BAG)") is None


def test_counted_patterns_require_quantity() -> None:
    assert _pattern("counted").apply("cup") is None
    assert _pattern("counted").apply("3 cookies") == ServingCandidate(
        3.0, "cookies", 0.0
    )
    assert _pattern("counted_with_weight").apply("1 Tbsp (15 ml)") == (
        ServingCandidate(1.0, "Tbsp", 15.0)
    )
    assert _pattern("counted_with_weight").apply("1 cup (1 cups)") is None
    assert _pattern("counted_with_weight").apply("1 cup") is None


def test_dual_disclosure_trusts_grams() -> None:
    pattern = _pattern("dual_disclosure")

    assert pattern.apply("1 slice 1 oz / 28 g") == ServingCandidate(
        1.0, "slice", 28.0
    )
    assert pattern.apply("1 slice 28 g") is None


def test_weight_first_pattern() -> None:
    pattern = _pattern("weight_first")

    assert pattern.apply("1.5 g (1 TEA BAG)") == ServingCandidate(1.0, "TEA BAG", 1.5)
    assert pattern.apply("2 oz (sachet)") == ServingCandidate(
        1.0, "sachet", 2 * 28.3495
    )


def test_gram_parenthetical_patterns() -> None:
    assert _pattern("gram_parenthetical").apply("2 SLICES (57 g)") == (
        ServingCandidate(2.0, "SLICES", 57.0)
    )
    assert _pattern("gram_parenthetical").apply("2 SLICES (57 ml)") is None
    assert _pattern("gram_confirmation").apply("30 g (30 GRM)") == ServingCandidate(
        30.0, "g", 30.0
    )


def test_trailing_and_bare_unit_patterns() -> None:
    assert _pattern("trailing_unit").apply("Serving 30 g") == ServingCandidate(
        30.0, "Serving", 30.0
    )
    assert _pattern("quantity_unit").apply("2 oz") == ServingCandidate(
        2.0, "oz", 2.0
    )
    assert _pattern("quantity_unit").apply("2 cups") is None


def test_clean_serving_text() -> None:
    assert clean_serving_text("12,5 g") == "12.5 g"
    assert clean_serving_text("1  FL.OZ") == "1 FL OZ"
    assert clean_serving_text("1 OZA") == "1 OZ"
    assert clean_serving_text("Amount per serving") == "Serving"
    assert clean_serving_text("chips 1/4 bag") == "0.2500 bag"


def test_cleaning_helpers() -> None:
    assert strip_descriptors("Slices 2 (50 g)") == "2 (50 g)"
    assert strip_descriptors("2 slices") == "2 slices"
    assert convert_fractions("1/3 cup") == "0.3333 cup"
    assert convert_fractions("3/0 cup") == "3/0 cup"
    assert drop_extra_parentheticals("1 bar (40 g) (1.4 oz)") == "1 bar (40 g)"
    assert drop_extra_parentheticals("1 bar (40 g)") == "1 bar (40 g)"


def test_weight_helpers() -> None:
    assert weight_from_label("bar 45g") == 45
    assert weight_from_label("sachet 0.5 kg") == 500
    assert weight_from_label("sachet") == 0
    assert estimate_weight(2, "Slices") == 56
    assert estimate_weight(2, "portion") == 0


def test_display_unit() -> None:
    assert display_unit("SLICES") == "Slices"
    assert display_unit("g") == "g"
    assert display_unit("fl oz") == "Fl oz"
    assert display_unit("TEA BAG") == "Tea bag"
    assert display_unit("CUP (240ML) ea") == "Cup (240ml) ea"
    assert display_unit("cuillère") == "cuillère"
