"""Chunked JSONL output files."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Protocol


class FoodItemSink(Protocol):
    """Interface for destinations of encoded food items."""

    chunks_created: int

    def write(self, line: str) -> None:
        """Write one encoded item."""

    def close(self) -> None:
        """Flush and release resources."""


@dataclass
class ChunkedJsonlWriter(FoodItemSink):
    """Writes lines to ``<prefix>_<n>.jsonl`` files of at most ``chunk_size`` lines."""

    output_dir: Path
    prefix: str
    chunk_size: int
    chunks_created: int = 0
    _handle: IO[str] | None = field(default=None, repr=False)
    _lines_in_chunk: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

    def chunk_path(self, index: int) -> Path:
        """Return the path of chunk ``index``."""
        return self.output_dir / f"{self.prefix}_{index}.jsonl"

    def write(self, line: str) -> None:
        """Write a line, starting a new chunk file when the current one is full."""
        handle = self._handle
        if handle is None or self._lines_in_chunk >= self.chunk_size:
            handle = self._open_next_chunk()
        handle.write(line)
        handle.write("\n")
        self._lines_in_chunk += 1

    def close(self) -> None:
        """Close the current chunk file."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _open_next_chunk(self) -> IO[str]:
        self.close()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        handle = self.chunk_path(self.chunks_created).open("w", encoding="utf-8")
        self._handle = handle
        self.chunks_created += 1
        self._lines_in_chunk = 0
        return handle

    def __enter__(self) -> "ChunkedJsonlWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
