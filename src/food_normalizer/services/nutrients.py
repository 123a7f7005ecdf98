"""Nutrient extraction from raw nutriment mappings."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from food_normalizer.domain.food import NutrientProfile


class UnitConversion(Enum):
    """Conversion applied to a raw nutrient value."""

    IDENTITY = 1
    GRAM_TO_MILLIGRAM = 1000
    GRAM_TO_MICROGRAM = 1e6

    def apply(self, value: float) -> float:
        """Convert a raw value."""
        if self is UnitConversion.IDENTITY:
            return value
        return value * self.value


@dataclass(frozen=True)
class NutrientField:
    """Maps a profile field to its source keys and unit conversion."""

    name: str
    source_keys: tuple[str, ...]
    conversion: UnitConversion = UnitConversion.IDENTITY

    def keys_for(self, basis: str) -> tuple[str, ...]:
        """Return the raw keys for a basis such as ``100g`` or ``serving``."""
        return tuple(f"{key}_{basis}" for key in self.source_keys)


_MG = UnitConversion.GRAM_TO_MILLIGRAM
_UG = UnitConversion.GRAM_TO_MICROGRAM

NUTRIENT_FIELDS: tuple[NutrientField, ...] = (
    NutrientField("calories", ("energy-kcal",)),
    NutrientField("protein", ("proteins",)),
    NutrientField("fat", ("fat",)),
    NutrientField("carbs", ("carbohydrates",)),
    NutrientField("fiber", ("fiber",)),
    NutrientField("sugar", ("sugars",)),
    NutrientField("sodium", ("sodium",), _MG),
    NutrientField("cholesterol", ("cholesterol",), _MG),
    NutrientField("calcium", ("calcium",), _MG),
    NutrientField("iron", ("iron",), _MG),
    NutrientField("potassium", ("potassium",), _MG),
    NutrientField("magnesium", ("magnesium",), _MG),
    NutrientField("zinc", ("zinc",), _MG),
    NutrientField("vitamin_a_iu", ("vitamin-a_iu",)),
    NutrientField("vitamin_c", ("vitamin-c",), _MG),
    NutrientField("vitamin_d", ("vitamin-d",), _UG),
    NutrientField("vitamin_d_iu", ("vitamin-d_iu",)),
    NutrientField("vitamin_e", ("vitamin-e",), _MG),
    NutrientField("vitamin_k", ("vitamin-k",), _UG),
    NutrientField("thiamin", ("thiamin",), _MG),
    NutrientField("riboflavin", ("riboflavin",), _MG),
    NutrientField("niacin", ("niacin",), _MG),
    NutrientField("vitamin_b6", ("vitamin-b6",), _MG),
    NutrientField("folate", ("folate",), _UG),
    NutrientField("vitamin_b12", ("vitamin-b12",), _UG),
    NutrientField("phosphorus", ("phosphorus",), _MG),
    NutrientField("copper", ("copper",), _MG),
    NutrientField("manganese", ("manganese",), _MG),
    NutrientField("selenium", ("selenium",), _UG),
    NutrientField("water", ("water",)),
    NutrientField("ash", ("ash",)),
    NutrientField("saturated_fat", ("saturated-fat",)),
    NutrientField("monounsaturated_fat", ("monounsaturated-fat",)),
    NutrientField("polyunsaturated_fat", ("polyunsaturated-fat",)),
    NutrientField("trans_fat", ("trans-fat",)),
)


@dataclass(frozen=True)
class Found:
    """A nutrient value matched under ``key``."""

    value: float
    key: str


@dataclass(frozen=True)
class Default:
    """No candidate key produced a usable value."""

    value: float = 0.0


NutrientLookup = Found | Default


def to_float(value: object) -> float | None:
    """Coerce a finite native number or numeric string; anything else yields None."""
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def lookup_nutrient(
    nutriments: Mapping[str, object],
    conversion: UnitConversion,
    *candidate_keys: str,
) -> NutrientLookup:
    """Return the first candidate key whose value coerces to a number."""
    for key in candidate_keys:
        if key not in nutriments:
            continue
        number = to_float(nutriments[key])
        if number is None:
            continue
        return Found(value=conversion.apply(number), key=key)
    return Default()


def extract_nutrient(
    nutriments: Mapping[str, object],
    conversion: UnitConversion,
    *candidate_keys: str,
) -> float:
    """Return the converted nutrient value, or 0 when absent."""
    return lookup_nutrient(nutriments, conversion, *candidate_keys).value


def atwater_calories(protein: float, fat: float, carbs: float) -> float:
    """Estimate kcal from macronutrient grams."""
    return protein * 4 + fat * 9 + carbs * 4


def extract_profile(nutriments: Mapping[str, object], basis: str) -> NutrientProfile:
    """Build a nutrient profile for ``basis`` (``100g`` or ``serving``).

    Calories fall back to the Atwater estimate when the source reports none.
    """
    values = {
        nutrient.name: extract_nutrient(
            nutriments, nutrient.conversion, *nutrient.keys_for(basis)
        )
        for nutrient in NUTRIENT_FIELDS
    }
    if values["calories"] == 0:
        values["calories"] = atwater_calories(
            values["protein"], values["fat"], values["carbs"]
        )
    return NutrientProfile(**values)
