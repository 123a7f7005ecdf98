"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from food_normalizer.adapters.chunked_writer import FoodItemSink
from food_normalizer.adapters.jsonl_reader import DecodeFailure, ProductSource
from food_normalizer.adapters.off_models import RawProduct
from food_normalizer.config import Settings
from food_normalizer.domain.allergens import AllergenTable, build_allergen_table
from food_normalizer.services.normalizer import ProductNormalizer


@dataclass
class InMemoryProductSource(ProductSource):
    """Product source backed by a list."""

    items: list[RawProduct | DecodeFailure] = field(default_factory=list)

    def records(self) -> Iterator[RawProduct | DecodeFailure]:
        yield from self.items


@dataclass
class InMemorySink(FoodItemSink):
    """Sink that keeps written lines in memory."""

    lines: list[str] = field(default_factory=list)
    chunks_created: int = 0
    closed: bool = False

    def write(self, line: str) -> None:
        if not self.lines:
            self.chunks_created = 1
        self.lines.append(line)

    def close(self) -> None:
        self.closed = True


def make_product(**fields: object) -> RawProduct:
    """Build a raw product with valid key fields unless overridden."""
    payload: dict[str, object] = {"_id": "3017620422003", "code": "3017620422003"}
    if "id" in fields:
        payload["_id"] = fields.pop("id")
    payload.update(fields)
    return RawProduct.model_validate(payload)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        input_file=tmp_path / "products.jsonl.gz",
        output_dir=tmp_path / "output",
        chunk_size=2,
        progress_every=1,
    )


@pytest.fixture
def allergen_table() -> AllergenTable:
    return build_allergen_table()


@pytest.fixture
def normalizer(allergen_table: AllergenTable) -> ProductNormalizer:
    return ProductNormalizer(allergen_table)
