# archr

A small archive extractor that unpacks each archive into a new directory
next to it, named after the archive. If that directory already exists, a
numbered one such as `photos (1)` is used instead, so an earlier extraction
is never overwritten.

## Supported formats

- `.zip`
- `.tar`
- `.tar.gz` / `.tgz`
- `.tar.xz`
- `.tar.bz2`
- `.gz`, `.xz`, `.bz2` (single compressed files)

Member names stored in the legacy Japanese encoding (Shift_JIS / CP932),
common in archives made on older Windows systems, are decoded correctly:
a name is read as UTF-8 first, then as CP932, and as UTF-8 with replacement
characters if neither works.

For ZIP archives, Unix permission bits recorded in the archive are restored
on POSIX systems. For tar archives, directories, regular files, symbolic
links and hard links are recreated, with their permission bits and
modification times; device files and FIFOs are skipped.

## Installation

```
pip install .
```

## Usage

Extract one or more archives:

```
archr photos.zip backup.tar.gz notes.txt.bz2
```

`photos.zip` is extracted to `photos/`, `backup.tar.gz` to `backup/`, and
`notes.txt.bz2` to `notes.txt/notes.txt`, each in the same directory as the
archive.

Run `archr` with no arguments to choose archives in a file dialog instead.
The dialog needs `tkinter` and a display; without them, or when nothing is
chosen, `archr` exits without doing anything.

When an archive cannot be extracted, the error is logged on the console and
shown in an error dialog (or printed to standard error when no dialog can be
opened); the remaining archives are still processed. The command always
exits with status 0.

Progress is shown on the terminal while each archive is unpacked.

## Language

Messages are shown in Japanese when `LANG`, `LC_ALL` or `LANGUAGE` contains
`ja`, and in English otherwise. The catalogue can also be used directly:

```python
from archr.messages import detect_locale, set_locale, translate

set_locale(detect_locale())
print(translate("ui.error_file_not_found", file="photos.zip"))
```

`translate` falls back to English, and then to the key itself, when a
message is missing.

## Using it from Python

```python
from pathlib import Path
from archr.cli import extract_archive, ExtractionError

try:
    destination = extract_archive(Path("photos.zip"))
    print(f"extracted to {destination}")
except ExtractionError as exc:
    # missing file or unsupported format
    print(exc)
except OSError as exc:
    print(exc)
```

`extract_archive` raises `ExtractionError` when the file does not exist or
its format is not supported; errors from reading a damaged archive
(`zipfile.BadZipFile`, `tarfile.TarError`, `OSError` and the like) are
passed through unchanged.

Other helpers in `archr.cli`:

- `get_full_extension(path)` returns the archive extension, recognising
  `tar.gz`, `tgz`, `tar.xz` and `tar.bz2`.
- `get_unique_path(path)` returns the path itself, or `name (n)` with the
  smallest `n` that does not exist yet.

The individual extractors can be called with a source file and a target
directory:

- `archr.zipped.extract_zip(file_path, extract_dir)`
- `archr.tarball.extract_tar`, `extract_tar_gz`, `extract_tar_xz`,
  `extract_tar_bz2`
- `archr.single.extract_gz`, `extract_bz2`, `extract_xz`, which return the
  path of the file they wrote

`archr.filenames.decode_filename(raw_bytes)` and
`decode_filename_as_path(raw_bytes)` expose the file-name decoding.

## What it does not do

- `.7z`, `.rar`, `.lha` and `.lzh` archives are not extracted; they are
  reported as an unsupported format.
- Encrypted or password-protected archives are not supported.
- There is no option to choose the destination directory or to overwrite
  an existing one.

## Development

```
pip install -e ".[test]"
pytest
```