"""Normalization of raw Open Food Facts products into food items."""

import logging
from dataclasses import dataclass

from food_normalizer.adapters.off_models import NAME_LANGUAGES, RawProduct
from food_normalizer.domain.allergens import AllergenTable
from food_normalizer.domain.food import (
    NormalizedFoodItem,
    Rejection,
    RejectionReason,
    ServingSize,
    UnitClass,
)
from food_normalizer.services.allergens import (
    extract_ingredient_allergen,
    normalize_allergen,
)
from food_normalizer.services.nutrients import extract_profile
from food_normalizer.services.serving_size import parse_serving_size
from food_normalizer.services.units import grams_per_unit

_logger = logging.getLogger(__name__)

# Labels that restate the per-100g reference serving.
_HUNDRED_GRAM_UNITS = frozenset({"", "100g", "100 g", "100grams", "100 grams"})

NormalizationResult = NormalizedFoodItem | Rejection


@dataclass(frozen=True)
class ProductNormalizer:
    """Turns one raw product into a normalized food item or a rejection."""

    allergen_table: AllergenTable

    def normalize(self, product: RawProduct) -> NormalizationResult:
        """Normalize a raw product."""
        if not product.id or not product.code:
            return Rejection(RejectionReason.EMPTY_KEY_FIELDS, product.id)

        translations = collect_translations(product)
        name = choose_name(product, translations)
        if not name and not product.code:
            return Rejection(RejectionReason.EMPTY_NAME_AND_BARCODE, product.id)

        per_100g = ServingSize(
            measurement_unit="g",
            unit_class=UnitClass.METRIC,
            quantity=100.0,
            weight_in_grams=100.0,
            nutrients=extract_profile(product.nutriments, "100g"),
        )
        natural = self._natural_serving(product)
        serving_sizes = (per_100g,) if natural is None else (natural, per_100g)

        return NormalizedFoodItem(
            name=name,
            off_id=product.id,
            brand=extract_brand(product.brands),
            barcode=product.code,
            serving_sizes=serving_sizes,
            allergens=self._allergens(product),
            ingredient_allergens=self._ingredient_allergens(product),
            translations=translations,
        )

    def _allergens(self, product: RawProduct) -> tuple[str, ...]:
        raw_allergens = list(product.allergens_tags)
        if not raw_allergens and product.allergens:
            raw_allergens = product.allergens.split(",")
        normalized = (
            normalize_allergen(self.allergen_table, allergen)
            for allergen in raw_allergens
        )
        return tuple(dict.fromkeys(normalized))

    def _ingredient_allergens(self, product: RawProduct) -> tuple[str, ...]:
        found = (
            extract_ingredient_allergen(self.allergen_table, tag)
            for tag in product.ingredients_tags
        )
        return tuple(allergen for allergen in found if allergen)

    def _natural_serving(self, product: RawProduct) -> ServingSize | None:
        if not product.serving_size:
            return None
        parsed = parse_serving_size(product.serving_size)
        weight = parsed.weight_in_grams
        if weight == 0 and parsed.quantity > 0:
            weight = grams_per_unit(parsed.quantity, parsed.measurement_unit)
        if (
            parsed.measurement_unit.lower() in _HUNDRED_GRAM_UNITS
            or parsed.quantity <= 0
            or weight == 100
        ):
            _logger.debug(
                "Dropping serving size %r for %s", product.serving_size, product.id
            )
            return None
        return ServingSize(
            measurement_unit=parsed.measurement_unit,
            unit_class=parsed.unit_class,
            quantity=parsed.quantity,
            weight_in_grams=weight,
            nutrients=extract_profile(product.nutriments, "serving"),
        )


def collect_translations(product: RawProduct) -> dict[str, str]:
    """Collect localized names in language priority order.

    A product that only carries the default name gets it registered under its
    declared language.
    """
    translations = {
        language: product.localized_name(language)
        for language in NAME_LANGUAGES
        if product.localized_name(language)
    }
    if product.product_name and not translations and product.lang:
        translations[product.lang.lower()] = product.product_name
    return translations


def choose_name(product: RawProduct, translations: dict[str, str]) -> str:
    """Pick the display name: English, default, declared language, then any."""
    name = translations.get("en") or product.product_name
    if not name and product.lang:
        name = translations.get(product.lang.lower(), "")
    if not name and translations:
        name = next(iter(translations.values()))
    return name


def extract_brand(brands: str) -> str:
    """Return the first brand of a comma separated brand list."""
    return brands.strip().split(",")[0].strip()
