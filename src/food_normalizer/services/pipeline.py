"""Batch ingest of raw products into chunked normalized output."""

import logging
from dataclasses import dataclass

from food_normalizer.adapters.chunked_writer import FoodItemSink
from food_normalizer.adapters.food_item_codec import encode_food_item
from food_normalizer.adapters.jsonl_reader import DecodeFailure, ProductSource
from food_normalizer.domain.food import Rejection
from food_normalizer.services.normalizer import ProductNormalizer

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestStats:
    """Counters for one ingest run."""

    lines: int
    processed: int
    skipped: int
    decode_errors: int
    chunks: int


@dataclass
class IngestPipeline:
    """Reads raw products, normalizes them and writes the accepted ones."""

    source: ProductSource
    normalizer: ProductNormalizer
    sink: FoodItemSink
    progress_every: int = 10000

    def run(self) -> IngestStats:
        """Process every record from the source."""
        lines = processed = skipped = decode_errors = 0
        try:
            for record in self.source.records():
                lines += 1
                if isinstance(record, DecodeFailure):
                    decode_errors += 1
                    _logger.warning(
                        "Error decoding line %s: %s", record.line_number, record.error
                    )
                    continue

                result = self.normalizer.normalize(record)
                if isinstance(result, Rejection):
                    skipped += 1
                    _logger.info(
                        "Skipping product %s: %s", result.product_id, result.message
                    )
                    continue

                try:
                    line = encode_food_item(result)
                except ValueError as exc:
                    skipped += 1
                    _logger.warning(
                        "Error encoding product %s: %s", result.off_id, exc
                    )
                    continue

                self.sink.write(line)
                processed += 1
                if processed % self.progress_every == 0:
                    _logger.info("Processed %s products", processed)
        finally:
            self.sink.close()

        stats = IngestStats(
            lines=lines,
            processed=processed,
            skipped=skipped,
            decode_errors=decode_errors,
            chunks=self.sink.chunks_created,
        )
        _logger.info(
            "Completed processing. Total lines: %s, Products processed: %s, "
            "Skipped: %s, Decode errors: %s, Chunks created: %s",
            stats.lines,
            stats.processed,
            stats.skipped,
            stats.decode_errors,
            stats.chunks,
        )
        return stats
