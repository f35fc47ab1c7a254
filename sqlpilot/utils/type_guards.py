"""Type guard functions for runtime type checking in SQLPilot.

These replace ad hoc ``isinstance`` chains at call sites so that the rules for
"what counts as a sequence" live in one place.
"""

from collections import UserString
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from sqlpilot.typing import BindingMap, ScalarValue

__all__ = ("is_binding_map", "is_sequence_value")

_ATOMIC_SEQUENCE_TYPES = (str, UserString, bytes, bytearray, memoryview)


def is_sequence_value(obj: Any) -> "TypeGuard[Sequence[ScalarValue]]":
    """Check if a bound value should be expanded into a ``(?, ?, ...)`` group.

    Strings and binary buffers are sequences to Python but bind as a single value,
    so they are excluded. Unordered collections (sets) and mappings are not
    sequences and therefore bind as opaque scalars.

    Args:
        obj: The bound value to check

    Returns:
        True if the value is an ordered, expandable sequence, False otherwise
    """
    return isinstance(obj, Sequence) and not isinstance(obj, _ATOMIC_SEQUENCE_TYPES)


def is_binding_map(obj: Any) -> "TypeGuard[BindingMap]":
    """Check if an object can be used as named parameter bindings.

    Args:
        obj: The object to check

    Returns:
        True if the object is a mapping, False otherwise
    """
    return isinstance(obj, Mapping)
