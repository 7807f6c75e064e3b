import io
import tarfile

import pytest

from archr.tarball import extract_tar, extract_tar_bz2, extract_tar_gz, extract_tar_xz


def _add_file(archive, name, data, mtime=1_000_000_000):
    info = tarfile.TarInfo(name)
    info.size = len(data)
    info.mtime = mtime
    info.mode = 0o644
    archive.addfile(info, io.BytesIO(data))


def _add_dir(archive, name):
    info = tarfile.TarInfo(name)
    info.type = tarfile.DIRTYPE
    info.mode = 0o755
    archive.addfile(info)


def _build(path, mode, **kwargs):
    with tarfile.open(path, mode, **kwargs) as archive:
        _add_dir(archive, "docs")
        _add_file(archive, "docs/readme.txt", b"hello")
        _add_file(archive, "top.bin", b"\x00\x01\x02")
    return path


def _build_timed(path, mode):
    with tarfile.open(path, mode) as archive:
        _add_file(archive, "old.txt", b"x", mtime=1_000_000_000)
    return path


def _assert_bundle(out_dir):
    assert (out_dir / "docs").is_dir()
    assert (out_dir / "docs" / "readme.txt").read_bytes() == b"hello"
    assert (out_dir / "top.bin").read_bytes() == b"\x00\x01\x02"


def test_tar_round_trip(tmp_path):
    archive_path = _build(tmp_path / "bundle.tar", "w")
    out_dir = tmp_path / "out"
    extract_tar(archive_path, out_dir)
    _assert_bundle(out_dir)


def test_tar_gz_round_trip(tmp_path):
    archive_path = _build(tmp_path / "bundle.tar.gz", "w:gz")
    out_dir = tmp_path / "out"
    extract_tar_gz(archive_path, out_dir)
    _assert_bundle(out_dir)


def test_tar_xz_round_trip(tmp_path):
    archive_path = _build(tmp_path / "bundle.tar.xz", "w:xz")
    out_dir = tmp_path / "out"
    extract_tar_xz(archive_path, out_dir)
    _assert_bundle(out_dir)


def test_tar_bz2_round_trip(tmp_path):
    archive_path = _build(tmp_path / "bundle.tar.bz2", "w:bz2")
    out_dir = tmp_path / "out"
    extract_tar_bz2(archive_path, out_dir)
    _assert_bundle(out_dir)


def test_tar_modification_time_is_preserved(tmp_path):
    archive_path = _build_timed(tmp_path / "timed.tar", "w")
    out_dir = tmp_path / "out"
    extract_tar(archive_path, out_dir)
    assert int((out_dir / "old.txt").stat().st_mtime) == 1_000_000_000


def test_tar_gz_modification_time_is_preserved(tmp_path):
    archive_path = _build_timed(tmp_path / "timed.tar.gz", "w:gz")
    out_dir = tmp_path / "out"
    extract_tar_gz(archive_path, out_dir)
    assert int((out_dir / "old.txt").stat().st_mtime) == 1_000_000_000


def test_tar_xz_modification_time_is_preserved(tmp_path):
    archive_path = _build_timed(tmp_path / "timed.tar.xz", "w:xz")
    out_dir = tmp_path / "out"
    extract_tar_xz(archive_path, out_dir)
    assert int((out_dir / "old.txt").stat().st_mtime) == 1_000_000_000


def test_tar_bz2_modification_time_is_preserved(tmp_path):
    archive_path = _build_timed(tmp_path / "timed.tar.bz2", "w:bz2")
    out_dir = tmp_path / "out"
    extract_tar_bz2(archive_path, out_dir)
    assert int((out_dir / "old.txt").stat().st_mtime) == 1_000_000_000


def test_file_without_directory_entry(tmp_path):
    archive_path = tmp_path / "flat.tar"
    with tarfile.open(archive_path, "w") as archive:
        _add_file(archive, "a/b/c.txt", b"deep")
    extract_tar(archive_path, tmp_path / "out")
    assert (tmp_path / "out" / "a" / "b" / "c.txt").read_bytes() == b"deep"


def test_shift_jis_member_name_is_decoded(tmp_path):
    archive_path = tmp_path / "sjis.tar"
    with tarfile.open(
        archive_path, "w", format=tarfile.GNU_FORMAT, encoding="cp932"
    ) as archive:
        _add_file(archive, "日本語.txt", b"nihongo")
    out_dir = tmp_path / "out"
    extract_tar(archive_path, out_dir)
    assert (out_dir / "日本語.txt").read_bytes() == b"nihongo"


def test_hard_link_points_into_extract_dir(tmp_path):
    archive_path = tmp_path / "links.tar"
    with tarfile.open(archive_path, "w") as archive:
        _add_file(archive, "original.txt", b"shared")
        link = tarfile.TarInfo("copy.txt")
        link.type = tarfile.LNKTYPE
        link.linkname = "original.txt"
        archive.addfile(link)
    out_dir = tmp_path / "out"
    extract_tar(archive_path, out_dir)
    assert (out_dir / "copy.txt").read_bytes() == b"shared"
    assert (out_dir / "copy.txt").stat().st_ino == (out_dir / "original.txt").stat().st_ino


def test_missing_archive_raises(tmp_path):
    out_dir = tmp_path / "out"
    with pytest.raises(FileNotFoundError):
        extract_tar_gz(tmp_path / "missing.tar.gz", out_dir)
    assert not out_dir.exists()


def test_corrupt_compressed_archive_raises(tmp_path):
    archive_path = tmp_path / "bad.tar.gz"
    archive_path.write_bytes(b"definitely not gzip")
    with pytest.raises(tarfile.ReadError):
        extract_tar_gz(archive_path, tmp_path / "out")