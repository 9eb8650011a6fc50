"""Raw form input normalization helpers."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound="BaseModel")

_TRUE_STRINGS = frozenset({"true", "1"})
_FALSE_STRINGS = frozenset({"false", "0"})


def coerce_text(value: Any) -> str | None:
    """Coerce a raw input into text.

    Numbers are rendered as decimal strings. Values that have no textual form
    (booleans, mappings, sequences) become ``None``.

    Args:
        value: Raw input value.

    Returns:
        str | None: Text value, or None when absent or malformed.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float | Decimal):
        try:
            return str(value)
        except ValueError:
            return None
    return None


def coerce_number(value: Any) -> int | float | None:
    """Coerce a raw input into a number.

    Args:
        value: Raw input value.

    Returns:
        int | float | None: Parsed number, or None when absent or not numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        return None if value.is_nan() else float(value)
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if not isinstance(value, str):
        return None
    return _parse_number(value.strip())


def _parse_number(text: str) -> int | float | None:
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if number.is_nan():
        return None
    return float(number)


def coerce_flag(value: Any) -> bool | None:
    """Coerce a raw input into a boolean.

    Accepts booleans, ``0``/``1`` and the strings ``true``/``false``/``1``/``0``
    in any case.

    Args:
        value: Raw input value.

    Returns:
        bool | None: Parsed flag, or None when absent or not a boolean.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, int) and value in {0, 1}:
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def coerce_text_list(value: Any) -> list[str] | None:
    """Coerce a raw selection input into a list of strings.

    A raw empty string is an empty selection and becomes ``[]``; any other
    single string is a one-item selection.

    Args:
        value: Raw input value.

    Returns:
        list[str] | None: Selected items, or None when absent or malformed.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list | tuple):
        return [_element_text(item) for item in value]
    return None


def _element_text(item: Any) -> str:
    text = coerce_text(item)
    if text is not None:
        return text
    try:
        return str(item)
    except ValueError:
        return repr(type(item))


def coerce_upload(value: Any) -> Any:
    """Coerce a raw file input.

    Any file reference is kept as-is; an empty string is treated as no file.

    Args:
        value: Raw input value (file handle, path, bytes...).

    Returns:
        Any: File reference, or None when absent.
    """
    if isinstance(value, str) and not value:
        return None
    return value


def build_step_record(record_type: type[RecordT], state: Mapping[str, Any]) -> RecordT:
    """Build the typed record of one step from a raw form state.

    Args:
        record_type (type[RecordT]): Step record model.
        state (Mapping[str, Any]): Raw form state keyed by form field names.

    Returns:
        RecordT: Typed step record. Unknown keys are ignored.
    """
    return record_type.model_validate(dict(state))
