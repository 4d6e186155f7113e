"""Intake of imported control records into sampling configurations."""

from audit_sampling.intake.classification import (
    config_from_control_record,
    normalize_frequency,
    normalize_risk_rating,
    requires_sampling,
)

__all__ = [
    "config_from_control_record",
    "normalize_frequency",
    "normalize_risk_rating",
    "requires_sampling",
]
