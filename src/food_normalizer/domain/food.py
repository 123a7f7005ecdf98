"""Normalized food domain models."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class UnitClass(IntEnum):
    """Coarse classification of a serving-size unit label."""

    METRIC = 1
    IMPERIAL = 2
    OTHER = 3


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient amounts for one serving size; 0 means not reported."""

    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    cholesterol: float = 0.0
    calcium: float = 0.0
    iron: float = 0.0
    potassium: float = 0.0
    magnesium: float = 0.0
    zinc: float = 0.0
    vitamin_a_iu: float = 0.0
    vitamin_c: float = 0.0
    vitamin_d: float = 0.0
    vitamin_d_iu: float = 0.0
    vitamin_e: float = 0.0
    vitamin_k: float = 0.0
    thiamin: float = 0.0
    riboflavin: float = 0.0
    niacin: float = 0.0
    vitamin_b6: float = 0.0
    folate: float = 0.0
    vitamin_b12: float = 0.0
    phosphorus: float = 0.0
    copper: float = 0.0
    manganese: float = 0.0
    selenium: float = 0.0
    water: float = 0.0
    ash: float = 0.0
    saturated_fat: float = 0.0
    monounsaturated_fat: float = 0.0
    polyunsaturated_fat: float = 0.0
    trans_fat: float = 0.0


@dataclass(frozen=True)
class ServingSize:
    """A serving size with its weight and nutrients."""

    measurement_unit: str
    unit_class: UnitClass
    quantity: float
    weight_in_grams: float
    nutrients: NutrientProfile = field(default_factory=NutrientProfile)


@dataclass(frozen=True)
class NormalizedFoodItem:
    """Food item ready to be written for the consumer app."""

    name: str
    off_id: str
    brand: str
    barcode: str
    serving_sizes: tuple[ServingSize, ...]
    allergens: tuple[str, ...]
    ingredient_allergens: tuple[str, ...]
    translations: dict[str, str]


class RejectionReason(Enum):
    """Why a raw product could not be normalized."""

    EMPTY_KEY_FIELDS = "product ID or code is empty"
    EMPTY_NAME_AND_BARCODE = "product name and barcode are empty"


@dataclass(frozen=True)
class Rejection:
    """A raw product that was dropped during normalization."""

    reason: RejectionReason
    product_id: str

    @property
    def message(self) -> str:
        """Human readable reason string."""
        return self.reason.value
