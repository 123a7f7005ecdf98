"""Tests for chunked JSONL output."""

from pathlib import Path

import pytest

from food_normalizer.adapters.chunked_writer import ChunkedJsonlWriter


def test_splits_lines_into_chunks(tmp_path: Path) -> None:
    output_dir = tmp_path / "out"

    with ChunkedJsonlWriter(output_dir, "foods", chunk_size=2) as writer:
        for index in range(5):
            writer.write(f'{{"n":{index}}}')

    assert writer.chunks_created == 3
    assert sorted(path.name for path in output_dir.iterdir()) == [
        "foods_0.jsonl",
        "foods_1.jsonl",
        "foods_2.jsonl",
    ]
    assert (output_dir / "foods_0.jsonl").read_text(encoding="utf-8") == (
        '{"n":0}\n{"n":1}\n'
    )
    assert (output_dir / "foods_2.jsonl").read_text(encoding="utf-8") == '{"n":4}\n'


def test_exact_multiple_leaves_no_empty_chunk(tmp_path: Path) -> None:
    with ChunkedJsonlWriter(tmp_path, "foods", chunk_size=2) as writer:
        writer.write("{}")
        writer.write("{}")

    assert writer.chunks_created == 1
    assert not writer.chunk_path(1).exists()


def test_no_output_without_writes(tmp_path: Path) -> None:
    output_dir = tmp_path / "out"

    ChunkedJsonlWriter(output_dir, "foods", chunk_size=2).close()

    assert not output_dir.exists()


def test_rejects_non_positive_chunk_size(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ChunkedJsonlWriter(tmp_path, "foods", chunk_size=0)
