"""Default sampling parameters and lenient parameter resolution."""

from types import MappingProxyType
from typing import Union

from audit_sampling.models.sampling import ControlFrequency, RiskLevel

ALGORITHM_NAME = "time-based-random"
ALGORITHM_VERSION = "1.0"

# Samples drawn per quarter when the config does not override the count
DEFAULT_SAMPLES_PER_QUARTER = MappingProxyType({
    RiskLevel.LOW: MappingProxyType({
        ControlFrequency.DAILY: 2,
        ControlFrequency.WEEKLY: 3,
        ControlFrequency.MONTHLY: 2,
    }),
    RiskLevel.MODERATE: MappingProxyType({
        ControlFrequency.DAILY: 3,
        ControlFrequency.WEEKLY: 4,
        ControlFrequency.MONTHLY: 3,
    }),
    RiskLevel.HIGH: MappingProxyType({
        ControlFrequency.DAILY: 4,
        ControlFrequency.WEEKLY: 5,
        ControlFrequency.MONTHLY: 4,
    }),
})

# Minimum days between two samples of the same quarter
MIN_INTERVAL_DAYS = MappingProxyType({
    ControlFrequency.DAILY: 7,
    ControlFrequency.WEEKLY: 14,
    ControlFrequency.MONTHLY: 30,
})

FALLBACK_RISK_LEVEL = RiskLevel.LOW
FALLBACK_FREQUENCY = ControlFrequency.MONTHLY


def resolve_risk_level(value: Union[RiskLevel, str, None]) -> RiskLevel:
    """Coerce a risk level, falling back to ``low`` for unknown values.

    The fallback is silent: callers that want unknown values reported
    must check before generating.
    """
    try:
        risk = RiskLevel(value)
    except ValueError:
        return FALLBACK_RISK_LEVEL
    if risk not in DEFAULT_SAMPLES_PER_QUARTER:
        return FALLBACK_RISK_LEVEL
    return risk


def resolve_frequency(
    value: Union[ControlFrequency, str, None],
    risk_level: RiskLevel = FALLBACK_RISK_LEVEL,
) -> ControlFrequency:
    """Coerce a control frequency, falling back to ``monthly``.

    A frequency is known when the resolved risk level's table has a count
    for it.
    """
    try:
        frequency = ControlFrequency(value)
    except ValueError:
        return FALLBACK_FREQUENCY
    if frequency not in DEFAULT_SAMPLES_PER_QUARTER[risk_level]:
        return FALLBACK_FREQUENCY
    return frequency


def default_sample_count(risk_level: RiskLevel, frequency: ControlFrequency) -> int:
    return DEFAULT_SAMPLES_PER_QUARTER[risk_level][frequency]


def default_minimum_interval(frequency: ControlFrequency) -> int:
    return MIN_INTERVAL_DAYS[frequency]
