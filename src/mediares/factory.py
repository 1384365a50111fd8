"""ResourceFactory: resolve raw input into a Resource by ordered type trial."""

from __future__ import annotations

import importlib
import logging
import os
from types import MappingProxyType
from typing import TYPE_CHECKING

from mediares.contracts import Resource
from mediares.errors import InvalidResourceError, ResourceConfigurationError, UnresolvableInputError
from mediares.resources import Image
from mediares.serde import as_str_object_dict, string_tuple

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from mediares.uploads import UploadSource

logger = logging.getLogger(__name__)

ResourceType = type[Resource]

DEFAULT_RESOURCES: Mapping[str, ResourceType] = MappingProxyType({"image": Image})


def _import_resource(path: str) -> object:
    """Import an object from ``package.module:Name`` or ``package.module.Name``."""
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        msg = f"Resource import path {path!r} must look like 'package.module:ClassName'."
        raise ResourceConfigurationError(msg)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module {module_name!r} for resource {path!r}."
        raise ResourceConfigurationError(msg) from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        msg = f"Module {module_name!r} has no attribute {attr!r}."
        raise ResourceConfigurationError(msg) from exc


def _resolve_resource(key: object, value: object) -> ResourceType:
    """Validate one registry entry and resolve import strings to classes."""
    if not isinstance(key, str) or not key:
        msg = f"Resource keys must be non-empty strings; got {key!r}."
        raise ResourceConfigurationError(msg)
    resolved = _import_resource(value) if isinstance(value, str) else value
    if not isinstance(resolved, type) or not issubclass(resolved, Resource):
        msg = f"Resource {key!r} must be a Resource subclass; got {resolved!r}."
        raise ResourceConfigurationError(msg)
    return resolved


class ResourceFactory:
    """Create resources by trying registered resource types in order.

    The registry maps logical keys to Resource subclasses. Registration order
    is trial order: the first type whose ``make`` succeeds wins, and types
    that raise InvalidResourceError are skipped.

    The registry is meant to be configured once at startup. Calling
    ``make`` concurrently is safe; calling ``configure`` while another
    thread is inside ``make`` is not supported.
    """

    def __init__(
        self,
        resources: Mapping[str, ResourceType | str] | None = None,
        *,
        uploads: UploadSource | None = None,
    ) -> None:
        """Initialize with resource types (``DEFAULT_RESOURCES`` when omitted) and an optional upload source."""
        self._order: list[str] = []
        self._resources: dict[str, ResourceType] = {}
        self._uploads = uploads
        self.configure(DEFAULT_RESOURCES if resources is None else resources)

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, uploads: UploadSource | None = None) -> ResourceFactory:
        """Build a factory from plain configuration, e.g. ``{"resources": {"image": "mediares:Image"}}``."""
        config = as_str_object_dict(data, field_name="config")
        unknown = sorted(set(config) - {"resources"})
        if unknown:
            msg = f"Unknown factory configuration keys: {', '.join(unknown)}"
            raise ResourceConfigurationError(msg)
        if "resources" not in config:
            return cls(uploads=uploads)
        resources = as_str_object_dict(config["resources"], field_name="config.resources")
        return cls(resources, uploads=uploads)  # type: ignore[arg-type]

    def configure(self, resources: Mapping[str, ResourceType | str]) -> ResourceFactory:
        """Merge resource types into the registry.

        Existing keys keep their trial position and take the new type; new
        keys are appended. Nothing is applied if any entry is invalid.
        """
        resolved = {key: _resolve_resource(key, value) for key, value in resources.items()}
        for key, resource_type in resolved.items():
            if key not in self._resources:
                self._order.append(key)
            self._resources[key] = resource_type
        return self

    def make(self, data: object) -> Resource:
        """Create a resource from raw input using the first type that accepts it."""
        rejections: list[tuple[str, InvalidResourceError]] = []
        for key in tuple(self._order):
            resource_type = self._resources[key]
            try:
                resource = resource_type.make(data)
            except InvalidResourceError as exc:
                logger.debug("Resource type %r rejected input: %s", key, exc)
                rejections.append((key, exc))
                continue
            logger.debug("Resolved input as %r (%s)", key, resource_type.__name__)
            return resource

        logger.info("No resource type accepted the input; tried %s", [key for key, _ in rejections] or "nothing")
        raise UnresolvableInputError(rejections=rejections)

    def path(self, path: str | os.PathLike[str], filename: str | None = None) -> Resource:
        """Create a resource from a file path, naming it ``filename`` or the path's base name."""
        resource = self.make(path)
        return resource.set_filename(filename if filename is not None else os.path.basename(os.fspath(path)))

    def request(self, key: str, *, uploads: UploadSource | None = None) -> Resource:
        """Create a resource from an uploaded value.

        The ``uploads`` argument takes precedence over the source given at
        construction.
        """
        source = uploads if uploads is not None else self._uploads
        if source is None:
            msg = "No upload source configured; pass uploads= to ResourceFactory or request()."
            raise ResourceConfigurationError(msg)
        value = source.get_uploaded_value(key)
        if value is None:
            msg = f"No uploaded value for input key {key!r}."
            raise UnresolvableInputError(msg)
        return self.make(value)

    def is_type(self, resource: Resource, keys: str | Iterable[str]) -> bool:
        """Return whether the resource's exact type is registered under any of the keys."""
        for key in string_tuple(keys, field_name="keys"):
            if self._resources.get(key) is type(resource):
                return True
        return False

    def resource(self, key: str | ResourceType) -> ResourceType | None:
        """Return the type registered under a key, or the key itself if it is a Resource subclass."""
        if isinstance(key, type) and issubclass(key, Resource):
            return key
        if not isinstance(key, str):
            return None
        return self._resources.get(key)

    def resources(self) -> Mapping[str, ResourceType]:
        """Return a read-only snapshot of the registry in trial order."""
        return MappingProxyType({key: self._resources[key] for key in self._order})
