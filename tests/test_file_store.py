"""Tests for FileContactStore (real files under tmp_path)."""

import os
import stat

import pytest

from addressbook.domain import Contact
from addressbook.infrastructure import DATA_FILE, CodecError, FileContactStore


def _alice() -> Contact:
    return Contact(full_name="Alice Smith", phone="5551234567", email="alice@example.com")


def test_default_path_is_contacts_dat() -> None:
    assert DATA_FILE == "contacts.dat"
    assert FileContactStore().location == "contacts.dat"


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "contacts.dat"
    store = FileContactStore(path)
    assert not store.exists()

    store.save([_alice()])
    assert store.exists()
    assert FileContactStore(path).load() == [_alice()]


def test_save_overwrites_and_leaves_no_temp_files(tmp_path) -> None:
    path = tmp_path / "contacts.dat"
    store = FileContactStore(path)
    store.save([_alice()])
    store.save([])
    assert store.load() == []
    assert [p.name for p in tmp_path.iterdir()] == ["contacts.dat"]


def test_load_corrupt_file_raises_codec_error(tmp_path) -> None:
    path = tmp_path / "contacts.dat"
    path.write_bytes(b"not an address book")
    with pytest.raises(CodecError):
        FileContactStore(path).load()


def test_save_into_missing_directory_raises_os_error(tmp_path) -> None:
    store = FileContactStore(tmp_path / "missing" / "contacts.dat")
    with pytest.raises(OSError):
        store.save([_alice()])


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_save_keeps_existing_file_mode(tmp_path) -> None:
    path = tmp_path / "contacts.dat"
    store = FileContactStore(path)
    store.save([_alice()])
    os.chmod(path, 0o644)

    store.save([])
    assert stat.S_IMODE(path.stat().st_mode) == 0o644
    os.chmod(path, 0o640)
    store.save([_alice()])
    assert stat.S_IMODE(path.stat().st_mode) == 0o640


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_new_file_follows_umask(tmp_path) -> None:
    path = tmp_path / "contacts.dat"
    umask = os.umask(0o022)
    try:
        FileContactStore(path).save([_alice()])
    finally:
        os.umask(umask)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_save_through_symlink_updates_target(tmp_path) -> None:
    real = tmp_path / "real.dat"
    link = tmp_path / "contacts.dat"
    FileContactStore(real).save([])
    link.symlink_to(real)

    FileContactStore(link).save([_alice()])
    assert link.is_symlink()
    assert FileContactStore(real).load() == [_alice()]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["contacts.dat", "real.dat"]


def test_failed_write_removes_temp_file_and_keeps_old_data(tmp_path, monkeypatch) -> None:
    path = tmp_path / "contacts.dat"
    store = FileContactStore(path)
    store.save([_alice()])

    def failing_fsync(fd):
        raise OSError("disk full")

    monkeypatch.setattr(os, "fsync", failing_fsync)
    with pytest.raises(OSError, match="disk full"):
        store.save([])
    monkeypatch.undo()

    assert [p.name for p in tmp_path.iterdir()] == ["contacts.dat"]
    assert store.load() == [_alice()]
