"""Unit conversion and classification helpers."""

from food_normalizer.domain.food import UnitClass

_GRAMS_PER_UNIT: dict[str, float] = {
    "g": 1,
    "gram": 1,
    "grams": 1,
    "gr": 1,
    "grm": 1,
    "g.": 1,
    "gr.": 1,
    "grm.": 1,
    "kg": 1000,
    "kilogram": 1000,
    "kilograms": 1000,
    "oz": 28.3495,
    "oz.": 28.3495,
    "ounce": 28.3495,
    "ounces": 28.3495,
    "onz": 28.3495,
    "ozn": 28.3495,
    "oza": 28.3495,
    "lb": 453.592,
    "pound": 453.592,
    "pounds": 453.592,
    # Density of water assumed for volumes.
    "ml": 1,
    "milliliter": 1,
    "milliliters": 1,
    "millilitre": 1,
    "millilitres": 1,
    "l": 1000,
    "liter": 1000,
    "litre": 1000,
    "liters": 1000,
    "litres": 1000,
}

_MILLIGRAM_UNITS = frozenset({"mg", "milligram", "milligrams"})

_METRIC_UNITS = frozenset(
    {
        "g",
        "gram",
        "grams",
        "gr",
        "grm",
        "g.",
        "gr.",
        "grm.",
        "kg",
        "kilogram",
        "kilograms",
        "ml",
        "l",
        "liter",
        "litre",
        "liters",
        "litres",
    }
)

_IMPERIAL_UNITS = frozenset(
    {"oz", "ounce", "ounces", "onz", "ozn", "oza", "lb", "pound", "pounds", "fl oz"}
)


def grams_per_unit(quantity: float, unit: str) -> float:
    """Convert a quantity of a unit to grams; unknown units yield 0."""
    token = unit.lower()
    if token in _MILLIGRAM_UNITS:
        return quantity / 1000
    factor = _GRAMS_PER_UNIT.get(token)
    if factor is None:
        return 0.0
    return quantity * factor


def is_metric(unit: str) -> bool:
    """Return True for metric unit labels."""
    return unit.lower() in _METRIC_UNITS


def is_imperial(unit: str) -> bool:
    """Return True for imperial unit labels."""
    return unit.lower() in _IMPERIAL_UNITS


def classify_unit(unit: str) -> UnitClass:
    """Classify a resolved unit label."""
    if is_metric(unit):
        return UnitClass.METRIC
    if is_imperial(unit):
        return UnitClass.IMPERIAL
    return UnitClass.OTHER
