"""Dependency container wiring for the ingest job."""

from dataclasses import dataclass

from food_normalizer.adapters.chunked_writer import ChunkedJsonlWriter
from food_normalizer.adapters.jsonl_reader import JsonlProductSource
from food_normalizer.config import Settings
from food_normalizer.domain.allergens import AllergenTable, build_allergen_table
from food_normalizer.services.normalizer import ProductNormalizer
from food_normalizer.services.pipeline import IngestPipeline


@dataclass
class AppContainer:
    """Holds job-wide dependencies."""

    settings: Settings
    allergen_table: AllergenTable
    normalizer: ProductNormalizer
    pipeline: IngestPipeline


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    allergen_table = build_allergen_table()
    normalizer = ProductNormalizer(allergen_table)
    source = JsonlProductSource(resolved_settings.input_file)
    writer = ChunkedJsonlWriter(
        output_dir=resolved_settings.output_dir,
        prefix=resolved_settings.output_prefix,
        chunk_size=resolved_settings.chunk_size,
    )
    pipeline = IngestPipeline(
        source=source,
        normalizer=normalizer,
        sink=writer,
        progress_every=resolved_settings.progress_every,
    )
    return AppContainer(
        settings=resolved_settings,
        allergen_table=allergen_table,
        normalizer=normalizer,
        pipeline=pipeline,
    )
