"""Allergen vocabulary."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_ALLERGEN_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        # Major allergens
        "MILK": "milk",
        "EGGS": "eggs",
        "EGG": "eggs",
        "FISH": "fish",
        "SHELLFISH": "shellfish",
        "CRUSTACEAN SHELLFISH": "crustacean_shellfish",
        "CRUSTACEAN_SHELLFISH": "crustacean_shellfish",
        "TREE NUTS": "tree_nuts",
        "TREE_NUTS": "tree_nuts",
        "PEANUTS": "peanuts",
        "PEANUT": "peanuts",
        "WHEAT": "wheat",
        "SOY": "soy",
        "SOYBEAN": "soy",
        "SOYBEANS": "soy",
        "SESAME": "sesame",
        # Tree nuts
        "ALMONDS": "almonds",
        "ALMOND": "almonds",
        "NUTS": "nuts",
        "BRAZIL NUT": "brazil_nuts",
        "BRAZIL_NUT": "brazil_nuts",
        "BRAZIL NUTS": "brazil_nuts",
        "BRAZIL_NUTS": "brazil_nuts",
        "CASHEWS": "cashews",
        "HAZELNUTS": "hazelnuts",
        "MACADAMIA NUTS": "macadamia_nuts",
        "MACADAMIA_NUTS": "macadamia_nuts",
        "PECANS": "pecans",
        "PINE NUTS": "pine_nuts",
        "PINE_NUTS": "pine_nuts",
        "PISTACHIOS": "pistachios",
        "WALNUTS": "walnuts",
        # Fish
        "ANCHOVY": "anchovy",
        "COD": "cod",
        "MAHI MAHI": "mahi_mahi",
        "MAHI_MAHI": "mahi_mahi",
        "SALMON": "salmon",
        "TUNA": "tuna",
        # Shellfish
        "CRAB": "crab",
        "CRABS": "crab",
        "LOBSTER": "lobster",
        "LOBSTERS": "lobster",
        "SHRIMP": "shrimp",
        "SHRIMPS": "shrimp",
        "CLAMS": "clams",
        "CLAM": "clams",
        "MUSSELS": "mussels",
        "MUSSEL": "mussels",
        "OYSTERS": "oysters",
        "OYSTER": "oysters",
        "SCALLOPS": "scallops",
        "SCALLOP": "scallops",
        # Gluten grains
        "BARLEY": "barley",
        "RYE": "rye",
        "OATS": "oats",
        "TRITICALE": "triticale",
        "GLUTEN": "gluten",
        # Other allergens and sensitivities
        "CELERY": "celery",
        "MUSTARD": "mustard",
        "SULFITES": "sulfites",
        "LUPIN": "lupin",
        "MOLLUSKS": "mollusks",
        "CORN": "corn",
        "GELATIN": "gelatin",
        "SEEDS": "seeds",
        "SUNFLOWER SEEDS": "sunflower_seeds",
        "SUNFLOWER_SEEDS": "sunflower_seeds",
        "POPPY SEEDS": "poppy_seeds",
        "POPPY_SEEDS": "poppy_seeds",
        "COTTONSEED": "cottonseed",
        "COCONUT": "coconut",
        "PALM": "palm",
        "BUCKWHEAT": "buckwheat",
        "BEEF": "beef",
        "PORK": "pork",
        "CHICKEN": "chicken",
        "GARLIC": "garlic",
        "ONION": "onion",
        "TOMATO": "tomato",
        "LATEX": "latex",
        "CARMINE": "carmine",
        "COCHINEAL": "cochineal",
        "ANNATTO": "annatto",
        "MSG": "msg",
        "SULFUR DIOXIDE": "sulfur_dioxide",
        "SULFUR_DIOXIDE": "sulfur_dioxide",
        "BENZOATES": "benzoates",
        "FOOD COLORS": "food_colors",
        "FOOD_COLORS": "food_colors",
        "YELLOW 5": "yellow_5",
        "YELLOW_5": "yellow_5",
        "RED 40": "red_40",
        "RED_40": "red_40",
    }
)


@dataclass(frozen=True)
class AllergenTable:
    """Read-only mapping of uppercase raw tokens to canonical allergen tokens."""

    aliases: Mapping[str, str]

    def lookup(self, key: str) -> str | None:
        """Return the canonical token for an uppercased, prefix-stripped key."""
        return self.aliases.get(key)


def build_allergen_table(
    aliases: Mapping[str, str] | None = None,
) -> AllergenTable:
    """Create an allergen table, defaulting to the built-in vocabulary."""
    source = DEFAULT_ALLERGEN_ALIASES if aliases is None else aliases
    return AllergenTable(
        aliases=MappingProxyType({key.upper(): value for key, value in source.items()})
    )
