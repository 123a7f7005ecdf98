"""Allergen tag canonicalization."""

from food_normalizer.domain.allergens import AllergenTable

_TAG_PREFIX = "EN:"


def _lookup_key(raw: str) -> str:
    return raw.strip().upper().removeprefix(_TAG_PREFIX)


def normalize_allergen(table: AllergenTable, raw: str) -> str:
    """Map a raw allergen to its canonical token.

    Unknown allergens are kept as the lowercased raw string.
    """
    canonical = table.lookup(_lookup_key(raw))
    if canonical is not None:
        return canonical
    return raw.lower()


def extract_ingredient_allergen(table: AllergenTable, ingredient_tag: str) -> str:
    """Return the canonical allergen named by an ingredient tag, or ``""``."""
    return table.lookup(_lookup_key(ingredient_tag)) or ""
