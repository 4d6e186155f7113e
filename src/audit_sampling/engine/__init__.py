"""Audit sample date generation engine."""

from audit_sampling.engine.defaults import (
    ALGORITHM_NAME,
    ALGORITHM_VERSION,
    DEFAULT_SAMPLES_PER_QUARTER,
    MIN_INTERVAL_DAYS,
    resolve_frequency,
    resolve_risk_level,
)
from audit_sampling.engine.export import export_to_csv, export_to_json
from audit_sampling.engine.periods import candidate_dates, partition_quarters
from audit_sampling.engine.rng import SeededRandom, generate_seed
from audit_sampling.engine.sampler import (
    AuditSamplingEngine,
    generate_samples,
    select_dates,
)
from audit_sampling.engine.validation import require_valid_config, validate_config

__all__ = [
    "ALGORITHM_NAME",
    "ALGORITHM_VERSION",
    "DEFAULT_SAMPLES_PER_QUARTER",
    "MIN_INTERVAL_DAYS",
    "AuditSamplingEngine",
    "SeededRandom",
    "candidate_dates",
    "export_to_csv",
    "export_to_json",
    "generate_samples",
    "generate_seed",
    "partition_quarters",
    "require_valid_config",
    "resolve_frequency",
    "resolve_risk_level",
    "select_dates",
    "validate_config",
]
