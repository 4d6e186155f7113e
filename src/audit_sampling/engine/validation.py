"""Advisory validation of sampling configurations."""

from audit_sampling.core.errors import SamplingValidationError
from audit_sampling.core.logging import get_logger
from audit_sampling.models.sampling import SamplingConfig

logger = get_logger(__name__)


def validate_config(config: SamplingConfig) -> list[str]:
    """Check a sampling configuration for mistakes.

    Never raises and never modifies the config. Generation does not call
    this itself; callers are expected to validate first.

    Args:
        config: Sampling configuration to check

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    period = config.audit_period
    if period.start_date >= period.end_date:
        errors.append("Start date must be before end date")

    if config.samples_per_quarter is not None and config.samples_per_quarter < 1:
        errors.append("Samples per quarter must be at least 1")

    if config.minimum_interval is not None and config.minimum_interval < 1:
        errors.append("Minimum interval must be at least 1 day")

    return errors


def require_valid_config(config: SamplingConfig) -> SamplingConfig:
    """Return the config unchanged, or raise if it fails validation.

    Raises:
        SamplingValidationError: With the failed checks attached
    """
    errors = validate_config(config)
    if errors:
        logger.warning("invalid_sampling_config", control_id=config.control_id, errors=errors)
        raise SamplingValidationError(
            "; ".join(errors),
            control_id=config.control_id,
            failed_checks=errors,
        )
    return config
