"""Core parameter types used by the extractor and converter."""

from typing import NamedTuple

from sqlpilot.typing import ParameterList

__all__ = ("ParameterInfo", "RewriteResult")


class ParameterInfo:
    """Immutable information about one ``:name`` placeholder found in SQL."""

    __slots__ = ("name", "ordinal", "placeholder_text", "position")

    def __init__(self, name: str, position: int, ordinal: int, placeholder_text: str) -> None:
        self.name = name
        self.position = position
        self.ordinal = ordinal
        self.placeholder_text = placeholder_text

    @property
    def end(self) -> int:
        """Offset just past the placeholder text."""
        return self.position + len(self.placeholder_text)

    def __eq__(self, other: object) -> bool:
        """Equality comparison for ParameterInfo objects."""
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name and self.position == other.position

    def __repr__(self) -> str:
        """String representation compatible with dataclass.__repr__."""
        return f"{type(self).__name__}({', '.join([f'name={self.name!r}', f'ordinal={self.ordinal!r}', f'placeholder_text={self.placeholder_text!r}', f'position={self.position!r}'])})"

    def __hash__(self) -> int:
        """Make ParameterInfo hashable.

        Returns:
            Hash value based on name and position attributes.
        """
        return hash((self.name, self.position))


class RewriteResult(NamedTuple):
    """Rewritten SQL together with the positional parameters it expects.

    Unpacks as ``sql, parameters = rewrite(...)``.
    """

    sql: str
    parameters: ParameterList
