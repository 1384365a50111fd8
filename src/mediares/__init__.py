"""mediares: typed media resources resolved from raw input."""

import importlib.metadata as importlib_metadata

from mediares.color import Area, Color, ColorThiefQuantizer, Quantizer
from mediares.contracts import ColorSource, ImageSource, PersistenceTarget, Resource
from mediares.errors import (
    DiskFileNotFoundError,
    DiskNotFoundError,
    InvalidResourceError,
    MediaresError,
    ResourceConfigurationError,
    UndefinedAttributeError,
    UndefinedMethodError,
    UnresolvableInputError,
)
from mediares.exif import ExifData
from mediares.factory import DEFAULT_RESOURCES, ResourceFactory
from mediares.resources import File, Image
from mediares.storage import Disk, DiskManager, InMemoryDisk, LocalDisk, StorageTarget
from mediares.uploads import MappingUploadSource, UploadSource


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("mediares")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "DEFAULT_RESOURCES",
    "Area",
    "Color",
    "ColorSource",
    "ColorThiefQuantizer",
    "Disk",
    "DiskFileNotFoundError",
    "DiskManager",
    "DiskNotFoundError",
    "ExifData",
    "File",
    "Image",
    "ImageSource",
    "InMemoryDisk",
    "InvalidResourceError",
    "LocalDisk",
    "MappingUploadSource",
    "MediaresError",
    "PersistenceTarget",
    "Quantizer",
    "Resource",
    "ResourceConfigurationError",
    "ResourceFactory",
    "StorageTarget",
    "UndefinedAttributeError",
    "UndefinedMethodError",
    "UnresolvableInputError",
    "UploadSource",
]
