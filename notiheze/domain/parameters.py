"""Decoding and normalization of positional message parameters."""

from __future__ import annotations

import json
from typing import Any, Final, Mapping

from .exceptions import DataFormatError


class _MissingParameter:
    """Placeholder for a positional slot that has no stored value."""

    _instance: "_MissingParameter | None" = None

    def __new__(cls) -> "_MissingParameter":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING_PARAMETER"

    def __str__(self) -> str:
        return ""

    def __bool__(self) -> bool:
        return False


MISSING_PARAMETER: Final = _MissingParameter()

MAX_SLOT_KEY: Final = 500


def _coerce_slot_key(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        return int(raw.strip())
    raise ValueError(raw)


def decode_message_parameters(message: str) -> dict[int, Any]:
    """Decode an encoded ``[[position, value], ...]`` list.

    The returned mapping is ordered by ascending numeric slot key, so slot 2
    precedes slot 10. Later duplicates of a slot overwrite earlier ones.
    Positions above :data:`MAX_SLOT_KEY` are rejected.
    """

    try:
        decoded = json.loads(message)
    except (TypeError, ValueError) as exc:
        raise DataFormatError(f"Message parameters are not valid JSON: {exc}") from exc

    if not isinstance(decoded, list):
        raise DataFormatError(
            f"Message parameters must be a list, got {type(decoded).__name__}"
        )

    parameters: dict[int, Any] = {}
    for index, entry in enumerate(decoded):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise DataFormatError(
                f"Message parameter #{index} is not a [position, value] pair: {entry!r}"
            )
        try:
            key = _coerce_slot_key(entry[0])
        except ValueError as exc:
            raise DataFormatError(
                f"Message parameter #{index} has a non-integer position: {entry[0]!r}"
            ) from exc
        if key > MAX_SLOT_KEY:
            raise DataFormatError(
                f"Message parameter #{index} position {key} exceeds {MAX_SLOT_KEY}"
            )
        parameters[key] = entry[1]

    return dict(sorted(parameters.items()))


def normalize_array_keys(parameters: Mapping[int, Any]) -> dict[int, Any]:
    """Make sure the first positional slot consumed by a message is slot 1.

    Some legacy records were written with parameters starting at 0 or further
    along than 1. When the lowest key is not 1, every slot from 1 up to the
    highest key is materialized, using :data:`MISSING_PARAMETER` for slots
    without a value, and the result is re-sorted. A mapping already starting
    at 1 is returned as is, gaps included. A legacy slot 0 is kept ahead of
    slot 1, so its value is still consumed as the first parameter.
    """

    if not parameters or min(parameters) == 1:
        return dict(parameters)

    normalized = dict(parameters)
    for slot in range(1, max(parameters) + 1):
        normalized.setdefault(slot, MISSING_PARAMETER)
    return dict(sorted(normalized.items()))


__all__ = [
    "MAX_SLOT_KEY",
    "MISSING_PARAMETER",
    "decode_message_parameters",
    "normalize_array_keys",
]
