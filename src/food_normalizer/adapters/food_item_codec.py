"""JSON encoding of normalized food items."""

import json
from dataclasses import asdict

from food_normalizer.domain.food import NormalizedFoodItem, ServingSize

_MAX_PLAIN_INTEGER = 1e21


def _number(value: float) -> float | int:
    """Write integral floats without a trailing ``.0``."""
    if (
        isinstance(value, float)
        and value.is_integer()
        and abs(value) < _MAX_PLAIN_INTEGER
    ):
        return int(value)
    return value


def serving_size_to_dict(serving: ServingSize) -> dict[str, object]:
    """Serialize a serving size, omitting nutrients that are 0."""
    payload: dict[str, object] = {
        "measurement_unit": serving.measurement_unit,
        "type": int(serving.unit_class),
        "quantity": _number(serving.quantity),
        "weight_in_grams": _number(serving.weight_in_grams),
    }
    for name, amount in asdict(serving.nutrients).items():
        if amount:
            payload[name] = _number(amount)
    return payload


def food_item_to_dict(item: NormalizedFoodItem) -> dict[str, object]:
    """Serialize a food item to plain JSON types."""
    return {
        "name": item.name,
        "off_id": item.off_id,
        "brand": item.brand,
        "barcode": item.barcode,
        "serving_sizes": [serving_size_to_dict(s) for s in item.serving_sizes],
        "allergens": list(item.allergens),
        "ingredient_allergens": list(item.ingredient_allergens),
        "translations": dict(item.translations),
    }


def encode_food_item(item: NormalizedFoodItem) -> str:
    """Encode a food item as one compact JSON line without a newline.

    Raises ``ValueError`` when a number is NaN or infinite.
    """
    return json.dumps(
        food_item_to_dict(item),
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )
