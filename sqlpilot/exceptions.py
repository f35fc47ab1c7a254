from typing import Any, Optional

__all__ = (
    "BindingTypeError",
    "ImproperConfigurationError",
    "NestedSequenceError",
    "ParameterError",
    "SQLPilotError",
    "SerializationError",
)


class SQLPilotError(Exception):
    """Base exception class from which all SQLPilot exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLPilotError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()

    def __reduce__(self) -> "tuple[Any, ...]":
        # Subclass constructors take structured arguments, so rebuild without calling __init__.
        return _restore_error, (type(self), self.args, self.__dict__)


def _restore_error(cls: "type[SQLPilotError]", args: "tuple[Any, ...]", state: "dict[str, Any]") -> "SQLPilotError":
    error = cls.__new__(cls, *args)
    error.args = args
    error.__dict__.update(state)
    return error


class ImproperConfigurationError(SQLPilotError):
    """Improper Configuration error.

    This exception is raised when a configuration object is built with values it cannot honour.
    """


class SerializationError(SQLPilotError):
    """Encoding or decoding of an object failed."""


# -- SQL Parameter Errors --
class ParameterError(SQLPilotError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class NestedSequenceError(ParameterError, TypeError):
    """Raised when a bound sequence contains another sequence.

    Only one level of expansion is supported: ``{"ids": [1, 2]}`` becomes ``(?, ?)``,
    but ``{"ids": [[1, 2], [3]]}`` has no unambiguous positional form.
    """

    key: str
    index: int

    def __init__(self, key: str, index: int, sql: Optional[str] = None) -> None:
        super().__init__(
            f"Parameter {key!r} is bound to a sequence whose element at index {index} is itself a sequence; "
            "nested sequences cannot be expanded",
            sql,
        )
        self.key = key
        self.index = index


class BindingTypeError(ParameterError, TypeError):
    """Raised when bindings are supplied as something other than a mapping."""

    def __init__(self, provided: Any, sql: Optional[str] = None) -> None:
        super().__init__(f"Named parameters must be a mapping, got {type(provided).__name__}", sql)
