"""Extraction of tar archives, plain or compressed."""

from __future__ import annotations

import os
import shutil
import tarfile
from pathlib import Path

from tqdm import tqdm

from archr.filenames import decode_filename_as_path
from archr.messages import translate

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _raw(name: str) -> bytes:
    return name.encode(_ENCODING, _ERRORS)


def _set_mode(path: Path, mode: int) -> None:
    if os.name == "posix":
        os.chmod(path, mode & 0o777)


def _unpack(
    archive: tarfile.TarFile,
    member: tarfile.TarInfo,
    output_path: Path,
    extract_dir: Path,
) -> None:
    if member.isdir():
        output_path.mkdir(parents=True, exist_ok=True)
        _set_mode(output_path, member.mode)
    elif member.issym():
        output_path.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(decode_filename_as_path(_raw(member.linkname)), output_path)
    elif member.islnk():
        output_path.parent.mkdir(parents=True, exist_ok=True)
        target = extract_dir / decode_filename_as_path(_raw(member.linkname))
        os.link(target, output_path)
    elif member.isreg():
        output_path.parent.mkdir(parents=True, exist_ok=True)
        source = archive.extractfile(member)
        with output_path.open("wb") as output_file:
            if source is not None:
                shutil.copyfileobj(source, output_file)
        _set_mode(output_path, member.mode)
        mtime = int(member.mtime) or 1
        os.utime(output_path, (mtime, mtime))
    # Device files and FIFOs are skipped.


def _extract(file_path, extract_dir, mode: str, message_key: str) -> None:
    target_dir = Path(extract_dir)
    with tarfile.open(
        Path(file_path), mode, encoding=_ENCODING, errors=_ERRORS
    ) as archive:
        target_dir.mkdir(parents=True, exist_ok=True)
        with tqdm(
            total=None,
            desc=translate(message_key),
            unit="file",
            disable=None,
            leave=False,
        ) as bar:
            for member in archive:
                relative = decode_filename_as_path(_raw(member.name))
                if relative.name:
                    bar.set_description(
                        translate("progress.extracting_file", file=relative.name)
                    )
                _unpack(archive, member, target_dir / relative, target_dir)
                bar.update(1)


def extract_tar(file_path, extract_dir) -> None:
    """Extract an uncompressed tar archive into extract_dir."""
    _extract(file_path, extract_dir, "r|", "progress.extracting_tar")


def extract_tar_gz(file_path, extract_dir) -> None:
    """Extract a gzip-compressed tar archive into extract_dir."""
    _extract(file_path, extract_dir, "r|gz", "progress.extracting_tar_gz")


def extract_tar_xz(file_path, extract_dir) -> None:
    """Extract an xz-compressed tar archive into extract_dir."""
    _extract(file_path, extract_dir, "r|xz", "progress.extracting_tar_xz")


def extract_tar_bz2(file_path, extract_dir) -> None:
    """Extract a bzip2-compressed tar archive into extract_dir."""
    _extract(file_path, extract_dir, "r|bz2", "progress.extracting_tar_bz2")