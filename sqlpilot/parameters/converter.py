"""Named to qmark conversion.

This module replaces ``:name`` placeholders with ``?`` marks and flattens the
bound values into the positional order a qmark driver expects.
"""

import logging
from typing import Any, Optional

from mypy_extensions import mypyc_attr

from sqlpilot.config import RewriterConfig
from sqlpilot.exceptions import NestedSequenceError
from sqlpilot.parameters.extractor import ParameterExtractor
from sqlpilot.parameters.types import ParameterInfo, RewriteResult
from sqlpilot.typing import BindingMap, ParameterList
from sqlpilot.utils.logging import get_logger, log_with_context
from sqlpilot.utils.type_guards import is_sequence_value

__all__ = ("QMARK", "SEQUENCE_SEPARATOR", "ParameterConverter")

logger = get_logger("parameters.converter")

QMARK = "?"
SEQUENCE_SEPARATOR = ", "


@mypyc_attr(allow_interpreted_subclasses=True)
class ParameterConverter:
    """Rewrites named placeholders to qmark style and collects positional values."""

    __slots__ = ("config", "extractor")

    def __init__(self, config: Optional[RewriterConfig] = None, extractor: Optional[ParameterExtractor] = None) -> None:
        self.config = config or RewriterConfig()
        self.extractor = extractor or ParameterExtractor()

    def convert(
        self, sql: str, bindings: BindingMap, parameter_info: Optional[list[ParameterInfo]] = None
    ) -> RewriteResult:
        """Convert SQL placeholders to qmark style.

        Scalars become a single ``?``. Sequences become a parenthesised group with one
        ``?`` per element, and an empty sequence becomes ``()``. Placeholders whose
        name is not in ``bindings`` are left exactly as written.

        Args:
            sql: The SQL string with ``:name`` placeholders
            bindings: Mapping of placeholder names to values
            parameter_info: Optional list of parameter info (will be extracted if not provided)

        Raises:
            NestedSequenceError: If a bound sequence contains another sequence.

        Returns:
            The rewritten SQL and its positional parameters
        """
        if parameter_info is None:
            parameter_info = self.extractor.extract_parameters(sql)

        if not parameter_info:
            return RewriteResult(sql, [])

        result_parts: list[str] = []
        parameters: ParameterList = []
        unresolved: list[str] = []
        current_pos = 0

        for param in parameter_info:
            result_parts.append(sql[current_pos : param.position])
            current_pos = param.end

            if param.name not in bindings:
                result_parts.append(param.placeholder_text)
                unresolved.append(param.name)
                continue

            value = bindings[param.name]
            if is_sequence_value(value):
                result_parts.append(self._expand_sequence(param.name, value, parameters, sql))
            else:
                result_parts.append(QMARK)
                parameters.append(value)

        result_parts.append(sql[current_pos:])
        converted_sql = "".join(result_parts)

        if self.config.log_rewrites:
            self._log_rewrite(sql, converted_sql, parameter_info, parameters, unresolved)

        return RewriteResult(converted_sql, parameters)

    def _expand_sequence(self, name: str, values: Any, parameters: ParameterList, sql: str) -> str:
        """Append every element of ``values`` and return the matching ``(?, ...)`` group."""
        count = 0
        for index, item in enumerate(values):
            if is_sequence_value(item):
                raise NestedSequenceError(name, index, sql)
            parameters.append(item)
            count += 1
        return f"({SEQUENCE_SEPARATOR.join([QMARK] * count)})"

    def _log_rewrite(
        self,
        sql: str,
        converted_sql: str,
        parameter_info: list[ParameterInfo],
        parameters: ParameterList,
        unresolved: list[str],
    ) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return

        limit = self.config.sql_truncation_length
        extra: dict[str, Any] = {
            "sql": _truncate(sql, limit),
            "converted_sql": _truncate(converted_sql, limit),
            "placeholder_count": len(parameter_info),
            "parameter_count": len(parameters),
            "unresolved": sorted(set(unresolved)),
        }
        if self.config.log_parameters:
            extra["parameters"] = parameters[: self.config.parameter_truncation_count]
            extra["parameters_truncated"] = len(parameters) > self.config.parameter_truncation_count
        log_with_context(logger, logging.DEBUG, "Rewrote named parameters to qmark style", **extra)


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
