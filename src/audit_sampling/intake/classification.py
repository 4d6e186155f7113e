"""Mapping of imported control records onto sampling configurations.

Control sheets describe frequency and risk in free text ("Daily",
"every week", "H"). These helpers decide whether a control needs sampling
at all and translate the text into the engine's enums.
"""

from datetime import date
from typing import Any, Mapping, Optional

from audit_sampling.core.errors import ControlRecordError
from audit_sampling.core.logging import get_logger
from audit_sampling.models.sampling import (
    AuditPeriod,
    ControlFrequency,
    RiskLevel,
    SamplingConfig,
)

logger = get_logger(__name__)

# Frequencies for which testing covers the whole population instead
NO_SAMPLING_TERMS = (
    "continuous",
    "ongoing",
    "real-time",
    "as needed",
    "ad hoc",
    "event-driven",
    "one-time",
    "single event",
)

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# Checked in order: weekday names and "7 days" resolve to weekly before daily terms
FREQUENCY_TERMS = (
    (ControlFrequency.WEEKLY, ("weekly", "week", "biweekly", "7 days") + WEEKDAYS),
    (ControlFrequency.MONTHLY, ("monthly", "month", "30 days")),
    (ControlFrequency.DAILY, (
        "daily", "every day", "each day", "business day", "24 hours", "24-hour",
    )),
)

# Frequencies that need sampling but that the quarterly engine cannot draw
UNSUPPORTED_FREQUENCY_TERMS = (
    "quarter",
    "annual",
    "yearly",
    "semi-annual",
)

RISK_RATINGS = {
    "h": RiskLevel.HIGH,
    "high": RiskLevel.HIGH,
    "m": RiskLevel.MODERATE,
    "medium": RiskLevel.MODERATE,
    "moderate": RiskLevel.MODERATE,
    "l": RiskLevel.LOW,
    "low": RiskLevel.LOW,
}

FREQUENCY_FIELDS = ("Control frequency", "control_frequency", "frequency")
RISK_FIELDS = ("PwC risk rating (H/M/L)", "Risk rating", "risk_rating", "riskRating", "risk_level")
CONTROL_ID_FIELDS = ("Control ID", "control_id", "id")

DEFAULT_FREQUENCY_TEXT = "Annually"


def requires_sampling(frequency_text: Optional[str]) -> bool:
    """Return whether a control with this frequency is tested by sampling.

    Unknown or empty frequencies default to requiring sampling.
    """
    text = (frequency_text or "").lower().strip()
    return not any(term in text for term in NO_SAMPLING_TERMS)


def normalize_frequency(frequency_text: Optional[str]) -> Optional[ControlFrequency]:
    """Translate free-text frequency into a sampled control frequency.

    Returns:
        The matching ControlFrequency, or None when the text names a
        frequency the engine does not sample (quarterly, annual,
        continuous) or nothing recognisable
    """
    text = (frequency_text or "").lower().strip()
    if not text:
        return None
    if any(term in text for term in UNSUPPORTED_FREQUENCY_TERMS):
        return None
    for frequency, terms in FREQUENCY_TERMS:
        if any(term in text for term in terms):
            return frequency
    return None


def normalize_risk_rating(rating_text: Optional[str]) -> RiskLevel:
    """Translate an H/M/L style risk rating; unknown ratings are moderate."""
    text = (rating_text or "").lower().strip()
    return RISK_RATINGS.get(text, RiskLevel.MODERATE)


def _first_value(record: Mapping[str, Any], fields: tuple) -> Optional[str]:
    for name in fields:
        value = record.get(name)
        if value not in (None, ""):
            return str(value)
    return None


def config_from_control_record(
    record: Mapping[str, Any],
    start_date: date,
    end_date: date,
    seed: Optional[str] = None,
    control_id: Optional[str] = None,
) -> Optional[SamplingConfig]:
    """Build a sampling config from one imported control record.

    Args:
        record: Row of an imported control sheet
        start_date: First day of the audit period
        end_date: Last day of the audit period
        seed: Optional seed for reproducible samples
        control_id: Identifier to use when the record carries none

    Returns:
        SamplingConfig, or None when the control needs no sampling

    Raises:
        ControlRecordError: If the record has no identifier, or its
            frequency needs sampling the quarterly engine cannot provide
    """
    resolved_id = control_id or _first_value(record, CONTROL_ID_FIELDS)
    if not resolved_id:
        raise ControlRecordError("Control record has no identifier")

    frequency_text = _first_value(record, FREQUENCY_FIELDS) or DEFAULT_FREQUENCY_TEXT

    if not requires_sampling(frequency_text):
        logger.info("sampling_not_required", control_id=resolved_id, frequency=frequency_text)
        return None

    frequency = normalize_frequency(frequency_text)
    if frequency is None:
        raise ControlRecordError(
            f"Frequency '{frequency_text}' cannot be sampled per quarter",
            control_id=resolved_id,
            frequency=frequency_text,
        )

    risk_level = normalize_risk_rating(_first_value(record, RISK_FIELDS))

    logger.debug(
        "control_record_mapped",
        control_id=resolved_id,
        frequency=frequency.value,
        risk_level=risk_level.value,
    )

    return SamplingConfig(
        control_id=resolved_id,
        control_frequency=frequency,
        risk_level=risk_level,
        audit_period=AuditPeriod(start_date=start_date, end_date=end_date),
        seed=seed,
    )
