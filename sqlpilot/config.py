"""Configuration for the rewriter's diagnostics."""

from dataclasses import dataclass

from sqlpilot.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_PARAMETER_TRUNCATION_COUNT", "DEFAULT_SQL_TRUNCATION_LENGTH", "RewriterConfig")

DEFAULT_SQL_TRUNCATION_LENGTH = 2000
DEFAULT_PARAMETER_TRUNCATION_COUNT = 100


@dataclass(slots=True)
class RewriterConfig:
    """Controls what the rewriter reports through logging.

    None of these settings change the rewritten SQL or the parameter list.
    """

    log_rewrites: bool = True
    log_parameters: bool = False
    sql_truncation_length: int = DEFAULT_SQL_TRUNCATION_LENGTH
    parameter_truncation_count: int = DEFAULT_PARAMETER_TRUNCATION_COUNT

    def __post_init__(self) -> None:
        if self.sql_truncation_length <= 0:
            msg = f"sql_truncation_length must be positive, got {self.sql_truncation_length}"
            raise ImproperConfigurationError(msg)
        if self.parameter_truncation_count < 0:
            msg = f"parameter_truncation_count must not be negative, got {self.parameter_truncation_count}"
            raise ImproperConfigurationError(msg)

    def copy(self) -> "RewriterConfig":
        """Return a copy to avoid sharing mutable state."""

        return RewriterConfig(
            log_rewrites=self.log_rewrites,
            log_parameters=self.log_parameters,
            sql_truncation_length=self.sql_truncation_length,
            parameter_truncation_count=self.parameter_truncation_count,
        )
