"""Line-delimited JSON product source."""

import gzip
import json
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Protocol

from pydantic import ValidationError

from food_normalizer.adapters.off_models import RawProduct


@dataclass(frozen=True)
class DecodeFailure:
    """A line that could not be decoded into a raw product."""

    line_number: int
    error: str


class ProductSource(Protocol):
    """Interface for sources of raw products."""

    def records(self) -> Iterator[RawProduct | DecodeFailure]:
        """Yield decoded products, or failures for undecodable lines."""


def _open_text(path: Path) -> IO[str]:
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding="utf-8")
    return path.open("r", encoding="utf-8")


def decode_line(line: str, line_number: int) -> RawProduct | DecodeFailure:
    """Decode one JSON line into a raw product."""
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as exc:
        return DecodeFailure(line_number=line_number, error=str(exc))
    if not isinstance(payload, dict):
        return DecodeFailure(line_number=line_number, error="expected a JSON object")
    try:
        return RawProduct.model_validate(payload)
    except ValidationError as exc:
        return DecodeFailure(line_number=line_number, error=str(exc))


@dataclass
class JsonlProductSource(ProductSource):
    """Reads products from a JSONL file, gzip-compressed when it ends in .gz."""

    path: Path

    def records(self) -> Iterator[RawProduct | DecodeFailure]:
        """Yield one item per non-blank line."""
        with _open_text(self.path) as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                yield decode_line(line, line_number)
