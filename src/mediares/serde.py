"""Validation helpers for plain-dict configuration payloads."""

from collections.abc import Iterable, Mapping


def as_str_object_dict(value: object, *, field_name: str) -> dict[str, object]:
    """Validate and normalize a mapping value into ``dict[str, object]``."""
    if not isinstance(value, Mapping):
        msg = f"{field_name} must be a mapping."
        raise TypeError(msg)
    return {str(key): item for key, item in value.items()}


def string_tuple(value: object, *, field_name: str) -> tuple[str, ...]:
    """Validate and normalize a single string or a sequence of strings into ``tuple[str, ...]``."""
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, Iterable) or isinstance(value, (bytes, Mapping)):
        msg = f"{field_name} must be a string or a sequence of strings."
        raise TypeError(msg)

    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            msg = f"{field_name}[{index}] must be a string."
            raise TypeError(msg)
        result.append(item)
    return tuple(result)
