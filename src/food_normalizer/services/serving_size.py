"""Free-text serving size parsing.

Serving sizes in the source data are written by hand with no shared format
("1 BOTTLE (295 ml)", "30 g (30 GRM)", "1.5 g (1 TEA BAG)", ...). The text is
cleaned once and then tried against ``SERVING_PATTERNS`` in order; the first
pattern that yields a candidate wins. A candidate without a weight gets one
from an embedded weight in its label or from a table of rough unit weights.
Text that no pattern accepts becomes the unit label itself with weight 0.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from food_normalizer.domain.food import UnitClass
from food_normalizer.services.units import classify_unit, grams_per_unit

_logger = logging.getLogger(__name__)

_TYPO_REPLACEMENTS = (
    ("OZA", "OZ"),
    ("OZN", "OZ"),
    ("ONZ", "OZ"),
    ("Amount per serving", "Serving"),
    ("FL.OZ", "FL OZ"),
)

_DESCRIPTORS = (
    "chips",
    "slice",
    "slices",
    "cookie",
    "cookies",
    "pouch",
    "pouches",
    "can",
    "cans",
    "bottle",
    "bottles",
    "box",
    "boxes",
    "bag",
    "bags",
    "piece",
    "pieces",
)
_DESCRIPTOR_PREFIXES = tuple(
    re.compile(rf"^{descriptor}\s+", re.IGNORECASE) for descriptor in _DESCRIPTORS
)

_WHITESPACE = re.compile(r"\s+")
_FRACTION = re.compile(r"(\d+)\s*/\s*(\d+)")
_PARENTHETICAL = re.compile(r"\([^()]*\)")
_EMBEDDED_WEIGHT = re.compile(
    r"(\d*\.?\d+)\s*(g|gr|grm|gram|kg|mg|ml|l|oz|ounces|fl oz)", re.IGNORECASE
)

# Rough grams per unit for household measures.
_ESTIMATED_GRAMS = {
    "cup": 240,
    "cups": 240,
    "tbsp": 15,
    "tablespoon": 15,
    "tablespoons": 15,
    "tsp": 5,
    "teaspoon": 5,
    "teaspoons": 5,
    "slice": 28,
    "slices": 28,
    "cookie": 15,
    "cookies": 15,
}

_SERVING_LABEL = "Serving"


@dataclass(frozen=True)
class ParsedServingSize:
    """Structured result of parsing a serving size description."""

    quantity: float
    measurement_unit: str
    weight_in_grams: float
    unit_class: UnitClass


@dataclass(frozen=True)
class ServingCandidate:
    """Quantity, label and weight read directly from the text."""

    quantity: float
    measurement_unit: str
    weight_in_grams: float = 0.0


@dataclass(frozen=True)
class ServingPattern:
    """A named regular expression and the extractor for its match."""

    name: str
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], ServingCandidate | None]

    def apply(self, text: str) -> ServingCandidate | None:
        """Return a candidate when the pattern accepts ``text``."""
        match = self.regex.match(text)
        if match is None:
            return None
        return self.extract(match)


def _quantity(raw: str | None) -> float:
    if not raw:
        return 1.0
    return float(raw)


def _weight(raw: str | None, unit: str | None) -> float:
    if not raw or not unit:
        return 0.0
    return grams_per_unit(float(raw), unit)


def _bare_weight(match: re.Match[str]) -> ServingCandidate | None:
    amount = float(match.group(1))
    weight = grams_per_unit(amount, match.group(2))
    if weight != amount:
        return None
    return ServingCandidate(1.0, _SERVING_LABEL, weight)


def _labelled(match: re.Match[str]) -> ServingCandidate:
    label = match.group(2).strip().removesuffix(" e")
    return ServingCandidate(
        _quantity(match.group(1)), label, _weight(match.group(3), match.group(4))
    )


def _counted(match: re.Match[str]) -> ServingCandidate:
    return ServingCandidate(
        _quantity(match.group(1)),
        match.group(2).strip(),
        _weight(match.group(3), match.group(4)),
    )


def _dual_disclosure(match: re.Match[str]) -> ServingCandidate:
    # Grams are used as written; the ounce figure is ignored.
    return ServingCandidate(
        _quantity(match.group(1)), match.group(2).strip(), float(match.group(5))
    )


def _weight_first(match: re.Match[str]) -> ServingCandidate:
    return ServingCandidate(
        _quantity(match.group(3)),
        match.group(4).strip(),
        _weight(match.group(1), match.group(2)),
    )


def _gram_parenthetical(match: re.Match[str]) -> ServingCandidate:
    return ServingCandidate(
        _quantity(match.group(1)), match.group(2).strip(), float(match.group(3))
    )


def _trailing_unit(match: re.Match[str]) -> ServingCandidate:
    quantity = float(match.group(2))
    return ServingCandidate(
        quantity, match.group(1), grams_per_unit(quantity, match.group(3))
    )


def _quantity_unit(match: re.Match[str]) -> ServingCandidate:
    quantity = float(match.group(1))
    return ServingCandidate(quantity, match.group(2), quantity)


SERVING_PATTERNS: tuple[ServingPattern, ...] = (
    ServingPattern(
        "bare_weight",
        re.compile(r"^(\d*\.?\d+)\s*(g|gr|grm|gram|kg|mg|ml|l)$"),
        _bare_weight,
    ),
    ServingPattern(
        "labelled",
        re.compile(
            r"^(?:(\d*\.?\d+)\s+)?([^\(]+?)\s*"
            r"(?:\(\s*(\d*\.?\d+)\s*"
            r"(g|gr|grm|gram|kg|mg|ml|l|oz|fl oz|ounces|cup|cups)\s*\))?$",
            re.IGNORECASE,
        ),
        _labelled,
    ),
    ServingPattern(
        "counted",
        re.compile(
            r"^(?:(\d*\.?\d+)\s+([^\(]+?))\s*"
            r"(?:\(\s*(\d*\.?\d+)\s*(g|gr|grm|gram|kg|mg|ml|l|oz|fl oz|ounces)\s*\))?$",
            re.IGNORECASE,
        ),
        _counted,
    ),
    ServingPattern(
        "counted_with_weight",
        re.compile(
            r"^(?:(\d*\.?\d+)\s+([^\(]+?))\s*"
            r"\(\s*(\d*\.?\d+)\s*(g|gr|grm|gram|kg|ml|l|oz|fl oz|ounces)\s*\)$",
            re.IGNORECASE,
        ),
        _counted,
    ),
    ServingPattern(
        "dual_disclosure",
        re.compile(
            r"^(?:(\d*\.?\d+)\s+([^\(]+?))\s+(\d*\.?\d+)\s*(oz|ounces)"
            r"\s*/\s*(\d*\.?\d+)\s*(g|gr|grm|gram)$",
            re.IGNORECASE,
        ),
        _dual_disclosure,
    ),
    ServingPattern(
        "weight_first",
        re.compile(
            r"^(?:(\d*\.?\d+)\s*(g|gr|grm|gram|ml|l|oz|fl oz))\s*"
            r"\(\s*(\d*\.?\d+)?\s*([^\)]+)\s*\)$",
            re.IGNORECASE,
        ),
        _weight_first,
    ),
    ServingPattern(
        "gram_parenthetical",
        re.compile(
            r"^(?:(\d*\.?\d+)\s+([^\(]+))\s*\(\s*(\d*\.?\d+)\s*(?:g|gr|grm|gram)\s*\)$",
            re.IGNORECASE,
        ),
        _gram_parenthetical,
    ),
    ServingPattern(
        "gram_confirmation",
        re.compile(
            r"^(?:(\d*\.?\d+)\s*(g|gr|grm|gram|ml|oz|fl oz))\s*"
            r"\(\s*(\d*\.?\d+)\s*(?:g|gr|grm|gram)\s*\)$",
            re.IGNORECASE,
        ),
        _gram_parenthetical,
    ),
    ServingPattern(
        "trailing_unit",
        re.compile(
            r"^([^\s]+)\s+(\d*\.?\d+)\s*(g|gr|grm|gram|ml|oz|fl oz)$", re.IGNORECASE
        ),
        _trailing_unit,
    ),
    ServingPattern(
        "quantity_unit",
        re.compile(r"^(\d*\.?\d+)\s*(g|gr|grm|gram|ml|oz|fl oz)$", re.IGNORECASE),
        _quantity_unit,
    ),
)


def strip_descriptors(text: str) -> str:
    """Drop leading package descriptors such as ``slice`` or ``bottle``."""
    for prefix in _DESCRIPTOR_PREFIXES:
        text = prefix.sub("", text)
    return text


def convert_fractions(text: str) -> str:
    """Rewrite ``a/b`` as a four-decimal number."""
    for match in _FRACTION.finditer(text):
        denominator = float(match.group(2))
        if denominator == 0:
            continue
        decimal = float(match.group(1)) / denominator
        text = text.replace(match.group(0), f"{decimal:.4f}")
    return text


def drop_extra_parentheticals(text: str) -> str:
    """Cut everything after the first parenthetical group when there are several."""
    groups = list(_PARENTHETICAL.finditer(text))
    if len(groups) > 1:
        return text[: groups[0].end()]
    return text


def clean_serving_text(text: str) -> str:
    """Normalize typos, decimals, spacing, descriptors and fractions."""
    cleaned = text.strip().removesuffix("|")
    for typo, replacement in _TYPO_REPLACEMENTS:
        cleaned = cleaned.replace(typo, replacement)
    cleaned = cleaned.replace(",", ".")
    cleaned = _WHITESPACE.sub(" ", cleaned).strip("|")
    cleaned = strip_descriptors(cleaned)
    cleaned = convert_fractions(cleaned)
    return drop_extra_parentheticals(cleaned)


def weight_from_label(label: str) -> float:
    """Read a weight written inside a unit label, e.g. ``bar 45g``."""
    match = _EMBEDDED_WEIGHT.search(label)
    if match is None:
        return 0.0
    return grams_per_unit(float(match.group(1)), match.group(2))


def estimate_weight(quantity: float, unit: str) -> float:
    """Estimate grams for common household units, 0 when unknown."""
    grams = _ESTIMATED_GRAMS.get(unit.lower())
    if grams is None:
        return 0.0
    return quantity * grams


def display_unit(label: str) -> str:
    """Title-case ASCII labels longer than one character."""
    if len(label) > 1 and label.isascii():
        return label[0].upper() + label[1:].lower()
    return label


def _finalize(candidate: ServingCandidate) -> ParsedServingSize:
    weight = candidate.weight_in_grams
    if weight == 0:
        weight = weight_from_label(candidate.measurement_unit)
    if weight == 0:
        weight = estimate_weight(candidate.quantity, candidate.measurement_unit)
    unit = display_unit(candidate.measurement_unit)
    return ParsedServingSize(
        quantity=candidate.quantity,
        measurement_unit=unit,
        weight_in_grams=weight,
        unit_class=classify_unit(unit),
    )


def parse_serving_size(text: str) -> ParsedServingSize:
    """Parse a free-text serving size into quantity, unit, grams and unit class."""
    cleaned = clean_serving_text(text)
    for pattern in SERVING_PATTERNS:
        candidate = pattern.apply(cleaned)
        if candidate is not None:
            return _finalize(candidate)
    _logger.debug("Unparsed serving size: %r", text)
    return ParsedServingSize(
        quantity=1.0,
        measurement_unit=display_unit(cleaned),
        weight_in_grams=0.0,
        unit_class=UnitClass.OTHER,
    )
