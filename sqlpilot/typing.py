from collections.abc import Mapping, Sequence
from typing import Any, Union

from typing_extensions import TypeAlias

__all__ = ("BindingMap", "BoundValue", "ParameterList", "ScalarValue")

ScalarValue: TypeAlias = Any
"""A single bound value. Passed to the driver untouched, whatever its type."""

BoundValue: TypeAlias = Union[ScalarValue, Sequence[ScalarValue]]
"""What a named parameter may be bound to: a scalar or a flat sequence of scalars."""

BindingMap: TypeAlias = Mapping[str, BoundValue]
"""Named parameters keyed by placeholder name (without the colon)."""

ParameterList: TypeAlias = list[ScalarValue]
"""Positional parameters in the order their ``?`` marks appear."""
