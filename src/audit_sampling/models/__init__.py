"""Data models for the audit sampling engine."""

from audit_sampling.models.sampling import (
    AuditPeriod,
    ControlFrequency,
    RiskLevel,
    SampleDate,
    SamplePeriod,
    SampleStatus,
    SamplingConfig,
    SamplingMetadata,
    SamplingResult,
)

__all__ = [
    "AuditPeriod",
    "ControlFrequency",
    "RiskLevel",
    "SampleDate",
    "SamplePeriod",
    "SampleStatus",
    "SamplingConfig",
    "SamplingMetadata",
    "SamplingResult",
]
