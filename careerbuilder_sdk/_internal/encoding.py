"""Form and JSON encoding helpers for request parameters and bodies."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel


def to_plain(value: Any) -> Any:
    """Convert pydantic models to plain JSON-compatible data.

    Anything that is not a model is returned unchanged, so dict bodies are
    passed through verbatim.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return value


def encode_form(data: Any) -> str:
    """Serialize a mapping using application/x-www-form-urlencoded rules.

    Sequences expand to repeated keys and booleans become "true"/"false".
    None and non-scalar values (nested mappings, sets, models) become an
    empty value.

    Args:
        data: A mapping or pydantic model.

    Returns:
        The encoded string, without a leading "?" or "&".
    """
    data = to_plain(data)
    if not isinstance(data, Mapping):
        raise TypeError(f"Cannot form-encode {type(data).__name__}, expected a mapping")

    pairs: list[tuple[str, str]] = []
    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((str(key), _scalar(item)) for item in value)
        else:
            pairs.append((str(key), _scalar(value)))
    return urlencode(pairs)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""
