"""User-facing message catalogue and locale selection."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

DEFAULT_LOCALE = "en"

_LOCALE_VARIABLES = ("LANG", "LC_ALL", "LANGUAGE")
_PLACEHOLDER = re.compile(r"%\{(\w+)\}")

_CATALOGUE: dict[str, dict[str, str]] = {
    "en": {
        "app.description": "Archive files",
        "ui.no_files_selected": "No files were selected.",
        "ui.select_files_title": "Select archives to extract",
        "ui.extraction_failed": "Failed to extract %{file}: %{error}",
        "ui.extraction_complete": "Extracted %{file}",
        "ui.error_file_not_found": "File not found: %{file}",
        "ui.error_no_parent_dir": "Could not determine the parent directory",
        "ui.error_no_filename": "Could not determine the file name",
        "ui.error_unsupported_format": "Unsupported format: %{format}",
        "ui.error_dialog_title": "Extraction error",
        "status.extraction_start": "Extracting %{source} to %{dest}",
        "progress.extracting_zip": "Extracting ZIP archive...",
        "progress.extracting_7z": "Extracting 7z archive...",
        "progress.extracting_rar": "Extracting RAR archive...",
        "progress.extracting_tar": "Extracting TAR archive...",
        "progress.extracting_tar_gz": "Extracting TAR.GZ archive...",
        "progress.extracting_tar_xz": "Extracting TAR.XZ archive...",
        "progress.extracting_tar_bz2": "Extracting TAR.BZ2 archive...",
        "progress.extracting_gz": "Extracting GZ file...",
        "progress.extracting_xz": "Extracting XZ file...",
        "progress.extracting_bz2": "Extracting BZ2 file...",
        "progress.extracting_lha": "Extracting LHA archive...",
        "progress.extracting_file": "Extracting: %{file}",
    },
    "ja": {
        "app.description": "圧縮ファイル",
        "ui.no_files_selected": "ファイルが選択されませんでした。",
        "ui.select_files_title": "解凍するファイルを選択",
        "ui.extraction_failed": "%{file} の解凍に失敗しました: %{error}",
        "ui.extraction_complete": "%{file} の解凍が完了しました",
        "ui.error_file_not_found": "ファイルが見つかりません: %{file}",
        "ui.error_no_parent_dir": "親ディレクトリを取得できませんでした",
        "ui.error_no_filename": "ファイル名を取得できませんでした",
        "ui.error_unsupported_format": "未対応の形式です: %{format}",
        "ui.error_dialog_title": "解凍エラー",
        "status.extraction_start": "%{source} を %{dest} に解凍しています",
        "progress.extracting_zip": "ZIPアーカイブを解凍中...",
        "progress.extracting_7z": "7zアーカイブを解凍中...",
        "progress.extracting_rar": "RARアーカイブを解凍中...",
        "progress.extracting_tar": "TARアーカイブを解凍中...",
        "progress.extracting_tar_gz": "TAR.GZアーカイブを解凍中...",
        "progress.extracting_tar_xz": "TAR.XZアーカイブを解凍中...",
        "progress.extracting_tar_bz2": "TAR.BZ2アーカイブを解凍中...",
        "progress.extracting_gz": "GZファイルを解凍中...",
        "progress.extracting_xz": "XZファイルを解凍中...",
        "progress.extracting_bz2": "BZ2ファイルを解凍中...",
        "progress.extracting_lha": "LHAアーカイブを解凍中...",
        "progress.extracting_file": "解凍中: %{file}",
    },
}

_state = {"locale": DEFAULT_LOCALE}


def detect_locale(environ: Mapping[str, str] | None = None) -> str:
    """Return "ja" when any locale variable mentions Japanese, else "en"."""
    env = os.environ if environ is None else environ
    if any("ja" in env.get(name, "") for name in _LOCALE_VARIABLES):
        return "ja"
    return "en"


def set_locale(locale: str) -> None:
    """Select the locale used by translate()."""
    _state["locale"] = locale


def get_locale() -> str:
    """Return the currently selected locale."""
    return _state["locale"]


def translate(key: str, **kwargs: object) -> str:
    """Look up a message, falling back to English and then to the key itself.

    Placeholders of the form %{name} are replaced by the matching keyword
    argument; placeholders without a value are left as they are.
    """
    template = _CATALOGUE.get(get_locale(), {}).get(key)
    if template is None:
        template = _CATALOGUE[DEFAULT_LOCALE].get(key)
    if template is None:
        return key

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(kwargs[name]) if name in kwargs else match.group(0)

    return _PLACEHOLDER.sub(substitute, template)