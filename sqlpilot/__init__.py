"""SQLPilot: write SQL with named parameters, execute it with qmark drivers."""

from sqlpilot import config, exceptions, parameters, typing, utils
from sqlpilot.__metadata__ import __version__
from sqlpilot.config import RewriterConfig
from sqlpilot.exceptions import (
    BindingTypeError,
    ImproperConfigurationError,
    NestedSequenceError,
    ParameterError,
    SQLPilotError,
)
from sqlpilot.parameters import ParameterInfo, RewriteResult
from sqlpilot.rewriter import Rewriter, extract_parameters, rewrite

__all__ = (
    "BindingTypeError",
    "ImproperConfigurationError",
    "NestedSequenceError",
    "ParameterError",
    "ParameterInfo",
    "RewriteResult",
    "Rewriter",
    "RewriterConfig",
    "SQLPilotError",
    "__version__",
    "config",
    "exceptions",
    "extract_parameters",
    "parameters",
    "rewrite",
    "typing",
    "utils",
)
