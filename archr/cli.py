"""Command-line entry point: pick archives and extract each next to itself."""

from __future__ import annotations

import argparse
import bz2
import logging
import lzma
import os
import sys
import tarfile
import zipfile
import zlib
from collections.abc import Callable, Sequence
from pathlib import Path

from archr.messages import detect_locale, set_locale, translate
from archr.single import extract_bz2, extract_gz, extract_xz
from archr.tarball import extract_tar, extract_tar_bz2, extract_tar_gz, extract_tar_xz
from archr.zipped import extract_zip

logger = logging.getLogger(__name__)

_Extractor = Callable[[Path, Path], object]

_EXTRACTORS: dict[str, _Extractor] = {
    "zip": extract_zip,
    "tar": extract_tar,
    "tar.gz": extract_tar_gz,
    "tgz": extract_tar_gz,
    "tar.xz": extract_tar_xz,
    "tar.bz2": extract_tar_bz2,
    "gz": extract_gz,
    "xz": extract_xz,
    "bz2": extract_bz2,
}

_COMPOUND_SUFFIXES = (
    (".tar.gz", "tar.gz"),
    (".tgz", "tar.gz"),
    (".tar.xz", "tar.xz"),
    (".tar.bz2", "tar.bz2"),
)

_EXTRACTION_ERRORS = (
    OSError,
    EOFError,
    ValueError,
    zipfile.BadZipFile,
    tarfile.TarError,
    lzma.LZMAError,
    zlib.error,
)


class ExtractionError(Exception):
    """Raised when an archive cannot be extracted."""


def get_full_extension(path: str | os.PathLike[str]) -> str:
    """Return the archive extension, recognising compound tar suffixes."""
    path = Path(path)
    name = path.name
    for suffix, extension in _COMPOUND_SUFFIXES:
        if name.endswith(suffix):
            return extension
    return path.suffix[1:].lower()


def get_unique_path(path: str | os.PathLike[str]) -> Path:
    """Return path, or "name (n)" with the smallest n that does not exist yet."""
    original = Path(path)
    candidate = original
    base_name = original.name or "extracted"
    counter = 1
    while candidate.exists():
        candidate = original.with_name(f"{base_name} ({counter})")
        counter += 1
    return candidate


def extract_archive(file_path: str | os.PathLike[str]) -> Path:
    """Extract an archive into a new directory beside it and return that directory."""
    source = Path(file_path)
    if not source.exists():
        raise ExtractionError(translate("ui.error_file_not_found", file=source))

    parent_dir = source.parent
    stem = source.stem
    if not stem:
        raise ExtractionError(translate("ui.error_no_filename"))

    dir_name = stem[: -len(".tar")] if stem.endswith(".tar") else stem
    extract_dir = get_unique_path(parent_dir / dir_name)

    logger.info(translate("status.extraction_start", source=source, dest=extract_dir))

    extension = get_full_extension(source)
    extractor = _EXTRACTORS.get(extension)
    if extractor is None:
        raise ExtractionError(translate("ui.error_unsupported_format", format=extension))
    extractor(source, extract_dir)
    return extract_dir


def select_files() -> list[Path] | None:
    """Ask for archives in a file dialog; None when nothing is chosen."""
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError:
        return None

    patterns = " ".join(f"*.{extension}" for extension in _EXTRACTORS)
    try:
        root = tkinter.Tk()
    except tkinter.TclError:
        return None
    try:
        root.withdraw()
        chosen = filedialog.askopenfilenames(
            parent=root,
            title=translate("ui.select_files_title"),
            filetypes=[(translate("app.description"), patterns)],
        )
    finally:
        root.destroy()
    files = [Path(name) for name in chosen or ()]
    return files or None


def show_error_dialog(message: str) -> None:
    """Show an error dialog, or print to stderr when no display is available."""
    title = translate("ui.error_dialog_title")
    try:
        import tkinter
        from tkinter import messagebox
    except ImportError:
        print(f"{title}: {message}", file=sys.stderr)
        return

    try:
        root = tkinter.Tk()
    except tkinter.TclError:
        print(f"{title}: {message}", file=sys.stderr)
        return
    try:
        root.withdraw()
        messagebox.showerror(title, message, parent=root)
    finally:
        root.destroy()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="archr", description="Extract archives next to themselves."
    )
    parser.add_argument("files", nargs="*", type=Path, help="archive files to extract")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Extract every given archive, or those chosen in a dialog when none are given."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")
    set_locale(detect_locale())

    args = _parse_args(argv)
    files = args.files
    if not files:
        selected = select_files()
        if selected is None:
            logger.info(translate("ui.no_files_selected"))
            return 0
        files = selected

    for file_path in files:
        try:
            extract_archive(file_path)
        except (ExtractionError, *_EXTRACTION_ERRORS) as error:
            message = translate("ui.extraction_failed", file=file_path, error=error)
            logger.error(message)
            show_error_dialog(message)
        else:
            logger.info(translate("ui.extraction_complete", file=file_path))
    return 0


if __name__ == "__main__":
    sys.exit(main())