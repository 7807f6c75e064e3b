"""Extraction of ZIP archives with Japanese file-name support."""

from __future__ import annotations

import os
import shutil
import stat
import zipfile
from pathlib import Path

from tqdm import tqdm

from archr.filenames import decode_filename
from archr.messages import translate

_UTF8_FLAG = 0x800
_SYSTEM_DOS = 0
_SYSTEM_UNIX = 3


def _raw_name(info: zipfile.ZipInfo) -> bytes:
    encoding = "utf-8" if info.flag_bits & _UTF8_FLAG else "cp437"
    return info.orig_filename.encode(encoding)


def _unix_mode(info: zipfile.ZipInfo) -> int | None:
    attributes = info.external_attr
    if attributes == 0:
        return None
    if info.create_system == _SYSTEM_UNIX:
        return attributes >> 16
    if info.create_system == _SYSTEM_DOS:
        if attributes & 0x10:
            mode = stat.S_IFDIR | 0o775
        else:
            mode = stat.S_IFREG | 0o664
        if attributes & 0x01:
            mode &= 0o555
        return mode
    return None


def extract_zip(file_path, extract_dir) -> None:
    """Extract a ZIP archive into extract_dir, restoring Unix permissions."""
    target_dir = Path(extract_dir)
    with zipfile.ZipFile(Path(file_path)) as archive:
        target_dir.mkdir(parents=True, exist_ok=True)
        members = archive.infolist()
        with tqdm(
            total=len(members),
            desc=translate("progress.extracting_zip"),
            unit="file",
            disable=None,
            leave=False,
        ) as bar:
            for info in members:
                relative = Path(decode_filename(_raw_name(info)))
                output_path = target_dir / relative
                if relative.name:
                    bar.set_description(
                        translate("progress.extracting_file", file=relative.name)
                    )

                if info.orig_filename.endswith("/"):
                    output_path.mkdir(parents=True, exist_ok=True)
                else:
                    output_path.parent.mkdir(parents=True, exist_ok=True)
                    with archive.open(info) as source, output_path.open("wb") as target:
                        shutil.copyfileobj(source, target)

                mode = _unix_mode(info)
                if mode is not None and os.name == "posix":
                    os.chmod(output_path, stat.S_IMODE(mode))
                bar.update(1)