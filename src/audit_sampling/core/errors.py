"""Custom exception classes for the audit sampling package.

The sampling engine itself never raises for bad input; these errors belong
to the outer surfaces (config loading, control intake, the CLI).
"""

from typing import Optional


class AuditSamplingError(Exception):
    """Base exception for all audit sampling errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(AuditSamplingError):
    """Sampling configuration could not be read or parsed."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        field: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, error_code="CONFIG", **kwargs)
        self.source = source
        self.field = field
        self.details.update({
            "source": source,
            "field": field,
        })


class SamplingValidationError(AuditSamplingError):
    """Sampling configuration failed validation."""

    def __init__(
        self,
        message: str,
        control_id: Optional[str] = None,
        failed_checks: Optional[list] = None,
        **kwargs,
    ):
        super().__init__(message, error_code="VALIDATION", **kwargs)
        self.control_id = control_id
        self.failed_checks = failed_checks or []
        self.details.update({
            "control_id": control_id,
            "failed_checks": self.failed_checks,
        })


class ControlRecordError(AuditSamplingError):
    """A control record cannot be turned into a sampling configuration."""

    def __init__(
        self,
        message: str,
        control_id: Optional[str] = None,
        frequency: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, error_code="CONTROL_RECORD", **kwargs)
        self.control_id = control_id
        self.frequency = frequency
        self.details.update({
            "control_id": control_id,
            "frequency": frequency,
        })
