"""Placeholder extraction and named-to-qmark conversion."""

from sqlpilot.parameters.converter import QMARK, SEQUENCE_SEPARATOR, ParameterConverter
from sqlpilot.parameters.extractor import NAMED_PLACEHOLDER_REGEX, ParameterExtractor
from sqlpilot.parameters.types import ParameterInfo, RewriteResult

__all__ = (
    "NAMED_PLACEHOLDER_REGEX",
    "QMARK",
    "SEQUENCE_SEPARATOR",
    "ParameterConverter",
    "ParameterExtractor",
    "ParameterInfo",
    "RewriteResult",
)
