"""File: generic binary resource type."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from mediares.contracts import Resource
from mediares.resources._inputs import read_source

DEFAULT_MIME = "application/octet-stream"


class File(Resource):
    """Resource holding raw bytes of any kind.

    Accepts every input ``read_source`` understands, so it is meant to be
    registered last as a catch-all.
    """

    def __init__(self, data: bytes, *, filename: str | None, extension: str | None) -> None:
        """Initialize from raw bytes and naming hints."""
        self._data = data
        mime, _ = mimetypes.guess_type(filename) if filename else (None, None)
        super().__init__(
            filename=filename,
            size=len(data),
            mime=mime or DEFAULT_MIME,
            extension=extension,
        )

    @classmethod
    def make(cls, data: object) -> File:
        """Read raw input as an opaque file."""
        source = read_source(data)
        return cls(source.data, filename=source.filename, extension=source.suffix)

    def set_filename(self, filename: str | None) -> File:
        """Override the filename, refreshing a guessed MIME type, and return the resource."""
        super().set_filename(filename)
        if filename:
            mime, _ = mimetypes.guess_type(filename)
            self._mime = mime or self._mime
            self._extension = Path(filename).suffix.lstrip(".").lower() or self._extension
        return self

    def data(self) -> bytes:
        """Return the raw bytes."""
        return self._data

    def encode(self, format: str | None = None) -> bytes:  # noqa: A002, ARG002
        """Return the raw bytes; files are stored as read."""
        return self._data
