"""Public entry points for rewriting named SQL parameters."""

from collections import ChainMap
from typing import Any, Optional

from sqlpilot.config import RewriterConfig
from sqlpilot.exceptions import BindingTypeError
from sqlpilot.parameters.converter import ParameterConverter
from sqlpilot.parameters.extractor import ParameterExtractor
from sqlpilot.parameters.types import ParameterInfo, RewriteResult
from sqlpilot.typing import BindingMap
from sqlpilot.utils.type_guards import is_binding_map

__all__ = ("Rewriter", "extract_parameters", "merge_bindings", "rewrite")


def merge_bindings(sql: str, parameters: Optional[Any], kwargs: dict[str, Any]) -> BindingMap:
    """Combine a bindings mapping with keyword bindings.

    Keyword bindings take precedence. Neither source is copied or mutated.

    Args:
        sql: The SQL being rewritten, for error context
        parameters: Mapping of named parameters, or None
        kwargs: Keyword bindings

    Raises:
        BindingTypeError: If ``parameters`` is not a mapping.

    Returns:
        A mapping view over both sources
    """
    if parameters is None:
        return kwargs
    if not is_binding_map(parameters):
        raise BindingTypeError(parameters, sql)
    if not kwargs:
        return parameters
    return ChainMap(kwargs, parameters)  # type: ignore[arg-type]


class Rewriter:
    """Rewrites ``:name`` placeholders into ``?`` marks.

    Example:
        >>> rewriter = Rewriter()
        >>> rewriter.rewrite("SELECT * FROM t WHERE id IN :ids", {"ids": [1, 2]})
        RewriteResult(sql='SELECT * FROM t WHERE id IN (?, ?)', parameters=[1, 2])
    """

    __slots__ = ("_converter", "_extractor", "config")

    def __init__(self, config: Optional[RewriterConfig] = None) -> None:
        self.config = config.copy() if config else RewriterConfig()
        self._extractor = ParameterExtractor()
        self._converter = ParameterConverter(self.config, self._extractor)

    def rewrite(self, sql: str, parameters: Optional[BindingMap] = None, /, **kwargs: Any) -> RewriteResult:
        """Rewrite SQL and flatten its bound values.

        Args:
            sql: SQL with ``:name`` placeholders
            parameters: Mapping of placeholder names to scalars or sequences
            **kwargs: Additional bindings, overriding ``parameters``

        Raises:
            BindingTypeError: If ``parameters`` is not a mapping.
            NestedSequenceError: If a bound sequence contains another sequence.

        Returns:
            The qmark SQL and its positional parameter list
        """
        bindings = merge_bindings(sql, parameters, kwargs)
        return self._converter.convert(sql, bindings)

    def extract_parameters(self, sql: str) -> list[ParameterInfo]:
        return self._extractor.extract_parameters(sql)

    def parameter_names(self, sql: str) -> list[str]:
        return self._extractor.parameter_names(sql)

    def count_parameters(self, sql: str) -> int:
        return self._extractor.count_parameters(sql)

    def has_parameters(self, sql: str) -> bool:
        return self._extractor.has_parameters(sql)


_default_rewriter = Rewriter()


def rewrite(sql: str, parameters: Optional[BindingMap] = None, /, **kwargs: Any) -> RewriteResult:
    """Rewrite named placeholders to qmark style.

    Args:
        sql: SQL with ``:name`` placeholders
        parameters: Mapping of placeholder names to scalars or sequences
        **kwargs: Additional bindings, overriding ``parameters``

    Returns:
        The qmark SQL and its positional parameter list

    Example:
        >>> rewrite("SELECT * FROM t WHERE id = :id", {"id": 5})
        RewriteResult(sql='SELECT * FROM t WHERE id = ?', parameters=[5])
    """
    return _default_rewriter.rewrite(sql, parameters, **kwargs)


def extract_parameters(sql: str) -> list[ParameterInfo]:
    """Locate every ``:name`` placeholder in ``sql``."""
    return _default_rewriter.extract_parameters(sql)
