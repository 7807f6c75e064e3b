"""Extraction of single-file compressed streams (.gz, .bz2, .xz)."""

from __future__ import annotations

import bz2
import gzip
import lzma
import os
import shutil
from pathlib import Path
from typing import BinaryIO, Callable

from tqdm import tqdm

from archr.messages import translate

_Opener = Callable[[Path], BinaryIO]


def _decompress(
    file_path: str | os.PathLike[str],
    extract_dir: str | os.PathLike[str],
    opener: _Opener,
    message_key: str,
) -> Path:
    source_path = Path(file_path)
    target_dir = Path(extract_dir)
    with opener(source_path) as decoder:
        target_dir.mkdir(parents=True, exist_ok=True)
        with tqdm(
            total=None,
            desc=translate(message_key),
            bar_format="{desc} {elapsed}",
            disable=None,
            leave=False,
        ):
            output_path = target_dir / (source_path.stem or "extracted")
            with output_path.open("wb") as output_file:
                shutil.copyfileobj(decoder, output_file)
    return output_path


def extract_gz(file_path, extract_dir) -> Path:
    """Decompress a .gz file into extract_dir, named after the file's stem."""
    return _decompress(
        file_path, extract_dir, lambda p: gzip.open(p, "rb"), "progress.extracting_gz"
    )


def extract_bz2(file_path, extract_dir) -> Path:
    """Decompress a .bz2 file into extract_dir, named after the file's stem."""
    return _decompress(
        file_path, extract_dir, lambda p: bz2.open(p, "rb"), "progress.extracting_bz2"
    )


def extract_xz(file_path, extract_dir) -> Path:
    """Decompress a .xz file into extract_dir, named after the file's stem."""
    return _decompress(
        file_path, extract_dir, lambda p: lzma.open(p, "rb"), "progress.extracting_xz"
    )