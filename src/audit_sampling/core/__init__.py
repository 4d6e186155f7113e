"""Core utilities for the audit sampling package."""

from audit_sampling.core.logging import get_logger, configure_logging
from audit_sampling.core.errors import (
    AuditSamplingError,
    ConfigurationError,
    SamplingValidationError,
    ControlRecordError,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    # Errors
    "AuditSamplingError",
    "ConfigurationError",
    "SamplingValidationError",
    "ControlRecordError",
]
