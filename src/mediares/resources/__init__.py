"""Built-in resource types."""

from mediares.resources._file import File
from mediares.resources._image import Image
from mediares.resources._inputs import SourcePayload, read_source

__all__ = [
    "File",
    "Image",
    "SourcePayload",
    "read_source",
]
