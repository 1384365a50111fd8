"""Tests for the File resource."""

from pathlib import Path

import pytest

from mediares import DiskManager, File, InMemoryDisk, InvalidResourceError, StorageTarget


def test_make_from_path(tmp_path: Path) -> None:
    source = tmp_path / "report.pdf"
    source.write_bytes(b"%PDF-1.7 fake")

    file = File.make(source)

    assert file.filename == "report.pdf"
    assert file.extension == "pdf"
    assert file.mime == "application/pdf"
    assert file.size == 13
    assert file.data() == b"%PDF-1.7 fake"


def test_make_from_bytes_defaults_to_octet_stream() -> None:
    file = File.make(b"\x00\x01")
    assert file.filename is None
    assert file.extension is None
    assert file.mime == "application/octet-stream"


def test_make_rejects_unsupported_input() -> None:
    with pytest.raises(InvalidResourceError, match="Unsupported resource input type: int"):
        File.make(3)


def test_set_filename_refreshes_mime_and_extension() -> None:
    file = File.make(b"a,b\n1,2\n").set_filename("table.csv")
    assert file.mime == "text/csv"
    assert file.extension == "csv"


def test_set_filename_keeps_known_mime_for_unknown_suffix() -> None:
    file = File.make(b"x").set_filename("blob.qzx")
    assert file.mime == "application/octet-stream"
    assert file.extension == "qzx"


def test_attributes_only_contain_base_fields() -> None:
    assert set(File.make(b"x").attributes()) == {"filename", "size", "mime", "extension"}


def test_encode_and_store_return_raw_bytes() -> None:
    disk = InMemoryDisk()
    file = File.make(b"raw payload")
    assert file.encode("png") == b"raw payload"
    file.store(StorageTarget(disk="files", relative_path="a/b.bin"), DiskManager({"files": disk}))
    assert disk.get("a/b.bin") == b"raw payload"
