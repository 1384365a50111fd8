"""Tests for upload sources."""

from mediares import MappingUploadSource, UploadSource


def test_mapping_upload_source() -> None:
    source = MappingUploadSource({"avatar": b"bytes"})
    assert isinstance(source, UploadSource)
    assert source.get_uploaded_value("avatar") == b"bytes"
    assert source.get_uploaded_value("missing") is None
