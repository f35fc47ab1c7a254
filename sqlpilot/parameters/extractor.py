"""Named placeholder extraction.

Placeholders are found with a single regular expression. The scanner has no
knowledge of SQL: ``:name`` inside string literals, comments, or after a
PostgreSQL ``::`` cast is reported like any other token.
"""

import re
from typing import Final

from mypy_extensions import mypyc_attr

from sqlpilot.parameters.types import ParameterInfo

__all__ = ("NAMED_PLACEHOLDER_REGEX", "ParameterExtractor")


# ASCII only: ``\w`` would also accept Unicode letters.
NAMED_PLACEHOLDER_REGEX: Final = re.compile(r":(?P<name>[A-Za-z0-9_]+)")


@mypyc_attr(allow_interpreted_subclasses=True)
class ParameterExtractor:
    """Locates ``:name`` placeholders in SQL text."""

    __slots__ = ()

    def extract_parameters(self, sql: str) -> list[ParameterInfo]:
        """Extract placeholder information from a SQL string.

        Args:
            sql: SQL string to analyze

        Returns:
            List of ParameterInfo objects in left-to-right order
        """
        return [
            ParameterInfo(
                name=match.group("name"), position=match.start(), ordinal=ordinal, placeholder_text=match.group(0)
            )
            for ordinal, match in enumerate(NAMED_PLACEHOLDER_REGEX.finditer(sql))
        ]

    def has_parameters(self, sql: str) -> bool:
        """Quick check if SQL contains any placeholders."""
        return NAMED_PLACEHOLDER_REGEX.search(sql) is not None

    def count_parameters(self, sql: str) -> int:
        """Count placeholder occurrences, repeats included."""
        return sum(1 for _ in NAMED_PLACEHOLDER_REGEX.finditer(sql))

    def parameter_names(self, sql: str) -> list[str]:
        """Distinct placeholder names in order of first appearance.

        Args:
            sql: SQL string to analyze

        Returns:
            Names without the leading colon
        """
        return list(dict.fromkeys(match.group("name") for match in NAMED_PLACEHOLDER_REGEX.finditer(sql)))
