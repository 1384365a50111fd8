"""Normalize raw resource input into bytes plus naming hints."""

from __future__ import annotations

import base64
import binascii
import errno
import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote_to_bytes

from mediares.errors import InvalidResourceError

_DATA_URI_PREFIX = "data:"


@dataclass(frozen=True, slots=True)
class SourcePayload:
    """Raw bytes read from an input, with the path and filename when known."""

    data: bytes
    path: Path | None = None
    filename: str | None = None

    @property
    def suffix(self) -> str | None:
        """Return the lowercase extension of the known filename, without the dot."""
        name = self.filename or (self.path.name if self.path is not None else None)
        if not name:
            return None
        suffix = Path(name).suffix.lstrip(".").lower()
        return suffix or None


def _decode_data_uri(value: str) -> bytes:
    """Decode an RFC 2397 ``data:`` URI."""
    header, sep, payload = value[len(_DATA_URI_PREFIX) :].partition(",")
    if not sep:
        msg = "Malformed data URI: missing ',' separator."
        raise InvalidResourceError(msg)
    if header.endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=True)
        except binascii.Error as exc:
            msg = f"Malformed data URI: {exc}"
            raise InvalidResourceError(msg) from exc
    return unquote_to_bytes(payload)


def _upload_name(value: object) -> str | None:
    """Return the base name carried by a file-like object, if any."""
    for attr in ("filename", "name"):
        name = getattr(value, attr, None)
        if isinstance(name, str) and name:
            return os.path.basename(name)
    return None


def _tell(stream: object) -> int | None:
    """Return the current stream position when the stream is seekable."""
    seekable = getattr(stream, "seekable", None)
    if callable(seekable) and not seekable():
        return None
    tell = getattr(stream, "tell", None)
    if not callable(tell) or not callable(getattr(stream, "seek", None)):
        return None
    try:
        return tell()
    except OSError:
        return None


def _exists(path: Path) -> bool:
    """Return whether a path exists; strings too long to be file names do not."""
    try:
        return path.exists()
    except OSError as exc:
        if exc.errno == errno.ENAMETOOLONG:
            return False
        raise


def read_source(data: object) -> SourcePayload:
    """Read raw input into a SourcePayload.

    Accepted inputs: bytes-like values, ``data:`` URIs, filesystem paths and
    objects with a ``read()`` method. Unsupported input kinds and strings or
    paths that name no existing file raise InvalidResourceError; I/O errors
    reading an existing file propagate.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return SourcePayload(data=bytes(data))

    if isinstance(data, str) and data.startswith(_DATA_URI_PREFIX):
        return SourcePayload(data=_decode_data_uri(data))

    if isinstance(data, (str, os.PathLike)):
        path = Path(data)
        if not _exists(path):
            msg = f"Resource input is neither a data URI nor an existing file: {os.fspath(data)!r}."
            raise InvalidResourceError(msg)
        return SourcePayload(data=path.read_bytes(), path=path, filename=path.name)

    read = getattr(data, "read", None)
    if callable(read):
        # Rewind afterwards so the next resource type in a dispatch loop sees the same bytes.
        start = _tell(data)
        content = read()
        if start is not None:
            data.seek(start)  # type: ignore[attr-defined]
        if isinstance(content, str):
            content = content.encode("utf-8")
        if not isinstance(content, (bytes, bytearray)):
            msg = f"File-like input returned {type(content).__name__} from read()."
            raise InvalidResourceError(msg)
        return SourcePayload(data=bytes(content), filename=_upload_name(data))

    msg = f"Unsupported resource input type: {type(data).__name__}."
    raise InvalidResourceError(msg)
