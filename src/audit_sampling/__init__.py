"""Audit sample date generator.

Produces reproducible, quarter-distributed test dates for audit controls.

Usage:
    from audit_sampling import export_to_csv, generate_samples, validate_config

    errors = validate_config(config)
    if not errors:
        result = generate_samples(config)
        print(export_to_csv(result))
"""

from audit_sampling.engine import (
    AuditSamplingEngine,
    export_to_csv,
    export_to_json,
    generate_samples,
    require_valid_config,
    validate_config,
)
from audit_sampling.models import (
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

__version__ = "1.0.0"

__all__ = [
    "AuditSamplingEngine",
    "AuditPeriod",
    "ControlFrequency",
    "RiskLevel",
    "SampleDate",
    "SamplePeriod",
    "SampleStatus",
    "SamplingConfig",
    "SamplingMetadata",
    "SamplingResult",
    "export_to_csv",
    "export_to_json",
    "generate_samples",
    "require_valid_config",
    "validate_config",
]
