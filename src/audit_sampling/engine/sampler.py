"""Audit sample date generation.

Splits an audit period into calendar quarters and draws spaced-apart test
dates in each one with a seeded generator, so a stored seed reproduces the
same sample set.
"""

from datetime import date, datetime, timezone

from audit_sampling.core.logging import get_logger
from audit_sampling.engine.defaults import (
    ALGORITHM_NAME,
    ALGORITHM_VERSION,
    default_minimum_interval,
    default_sample_count,
    resolve_frequency,
    resolve_risk_level,
)
from audit_sampling.engine.export import export_to_csv
from audit_sampling.engine.periods import candidate_dates, partition_quarters
from audit_sampling.engine.rng import SeededRandom, generate_seed
from audit_sampling.engine.validation import validate_config
from audit_sampling.models.sampling import (
    ControlFrequency,
    SampleDate,
    SamplePeriod,
    SampleStatus,
    SamplingConfig,
    SamplingMetadata,
    SamplingResult,
)

logger = get_logger(__name__)


def select_dates(
    candidates: list[date],
    sample_count: int,
    minimum_interval: int,
    rng: SeededRandom,
) -> list[date]:
    """Draw up to ``sample_count`` spaced-apart dates from ``candidates``.

    Rejection sampling with an attempt budget of twice the candidate count.
    Narrow or over-constrained windows return fewer dates than requested.

    Returns:
        Accepted dates in ascending order
    """
    selected: list[date] = []
    max_attempts = len(candidates) * 2
    attempts = 0

    while len(selected) < sample_count and attempts < max_attempts:
        attempts += 1
        candidate = candidates[rng.next_index(len(candidates))]
        if candidate in selected:
            continue
        if all(abs((candidate - existing).days) >= minimum_interval for existing in selected):
            selected.append(candidate)

    return sorted(selected)


def generate_quarter_samples(
    period: SamplePeriod,
    control_id: str,
    sample_count: int,
    minimum_interval: int,
    frequency: ControlFrequency,
    rng: SeededRandom,
) -> list[SampleDate]:
    """Generate the sample dates for one quarter-period."""
    candidates = candidate_dates(period.start_date, period.end_date, frequency)
    if not candidates:
        logger.warning(
            "no_candidate_dates",
            control_id=control_id,
            quarter=period.quarter,
            start_date=period.start_date.isoformat(),
            end_date=period.end_date.isoformat(),
        )
        return []

    selected = select_dates(candidates, sample_count, minimum_interval, rng)
    if len(selected) < sample_count:
        logger.debug(
            "quarter_under_sampled",
            control_id=control_id,
            quarter=period.quarter,
            requested=sample_count,
            selected=len(selected),
            candidates=len(candidates),
        )

    return [
        SampleDate(
            id=f"{control_id}-{period.quarter}-{index}",
            date=sample_date,
            quarter=period.quarter,
            status=SampleStatus.PENDING,
        )
        for index, sample_date in enumerate(selected, start=1)
    ]


class AuditSamplingEngine:
    """Stateless generator of audit sample dates.

    All methods are static; the only shared data are the constant default
    tables in :mod:`audit_sampling.engine.defaults`.
    """

    @staticmethod
    def generate_samples(config: SamplingConfig) -> SamplingResult:
        """Generate sample dates for a control over its audit period.

        Identical configs with an explicit seed produce identical periods and
        samples. Unknown risk levels fall back to ``low`` and unknown
        frequencies to ``monthly`` without raising; an inverted audit period
        simply yields no quarters. Call ``validate_config`` beforehand to
        catch configuration mistakes.

        Args:
            config: Sampling configuration

        Returns:
            SamplingResult with one period per overlapping quarter
        """
        seed = config.seed or generate_seed()
        rng = SeededRandom(seed)

        quarters = partition_quarters(config.audit_period)

        risk_level = resolve_risk_level(config.risk_level)
        frequency = resolve_frequency(config.control_frequency, risk_level)
        sample_count = config.samples_per_quarter or default_sample_count(risk_level, frequency)
        minimum_interval = config.minimum_interval or default_minimum_interval(frequency)

        logger.info(
            "generating_samples",
            control_id=config.control_id,
            seed=seed,
            risk_level=risk_level.value,
            frequency=frequency.value,
            samples_per_quarter=sample_count,
            minimum_interval=minimum_interval,
            quarters=len(quarters),
        )

        periods = [
            period.model_copy(update={
                "samples": generate_quarter_samples(
                    period,
                    config.control_id,
                    sample_count,
                    minimum_interval,
                    frequency,
                    rng,
                ),
            })
            for period in quarters
        ]
        total_samples = sum(len(period.samples) for period in periods)

        logger.info(
            "samples_generated",
            control_id=config.control_id,
            total_samples=total_samples,
        )

        return SamplingResult(
            control_id=config.control_id,
            generated_at=datetime.now(timezone.utc),
            config=config,
            periods=periods,
            total_samples=total_samples,
            metadata=SamplingMetadata(
                seed=seed,
                algorithm=ALGORITHM_NAME,
                version=ALGORITHM_VERSION,
            ),
        )

    @staticmethod
    def validate_config(config: SamplingConfig) -> list[str]:
        """Return human-readable configuration errors (empty when valid)."""
        return validate_config(config)

    @staticmethod
    def export_to_csv(result: SamplingResult) -> str:
        """Render a result as CSV text."""
        return export_to_csv(result)


def generate_samples(config: SamplingConfig) -> SamplingResult:
    """Module-level shortcut for :meth:`AuditSamplingEngine.generate_samples`."""
    return AuditSamplingEngine.generate_samples(config)
