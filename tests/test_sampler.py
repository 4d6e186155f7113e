"""Tests for audit sample generation."""

from datetime import date, timedelta

import pytest
from structlog.testing import capture_logs

from audit_sampling import AuditSamplingEngine, generate_samples
from audit_sampling.engine.rng import SeededRandom
from audit_sampling.engine.sampler import select_dates
from audit_sampling.models import AuditPeriod, SampleStatus, SamplingConfig


def _config(**overrides) -> SamplingConfig:
    values = {
        "control_id": "AC-01",
        "control_frequency": "monthly",
        "risk_level": "low",
        "audit_period": AuditPeriod(start_date=date(2024, 1, 1), end_date=date(2024, 12, 31)),
        "seed": "test-seed",
    }
    values.update(overrides)
    return SamplingConfig(**values)


class TestGenerateSamples:
    """Tests for AuditSamplingEngine.generate_samples."""

    def test_single_quarter_scenario(self, q1_2024_config):
        result = AuditSamplingEngine.generate_samples(q1_2024_config)

        assert [p.quarter for p in result.periods] == ["2024-Q1"]
        samples = result.periods[0].samples
        assert [s.date for s in samples] == [date(2024, 1, 6), date(2024, 2, 19)]
        assert (samples[1].date - samples[0].date).days >= 30
        assert result.total_samples == 2

    def test_rng_is_shared_across_quarters(self):
        result = generate_samples(_config(samples_per_quarter=1))

        assert [s.date for s in result.all_samples()] == [
            date(2024, 2, 19),
            date(2024, 4, 6),
            date(2024, 7, 2),
            date(2024, 12, 10),
        ]

    def test_same_seed_is_deterministic(self, multi_year_config):
        first = generate_samples(multi_year_config)
        second = generate_samples(multi_year_config)

        assert first.periods == second.periods
        assert first.total_samples == second.total_samples
        assert first.metadata == second.metadata

    def test_sample_ids_and_status(self, q1_2024_config):
        samples = generate_samples(q1_2024_config).periods[0].samples

        assert [s.id for s in samples] == ["AC-01-2024-Q1-1", "AC-01-2024-Q1-2"]
        assert all(s.quarter == "2024-Q1" for s in samples)
        assert all(s.status == SampleStatus.PENDING for s in samples)
        assert all(s.notes is None and s.evidence_files == [] for s in samples)

    def test_result_envelope(self, q1_2024_config):
        result = generate_samples(q1_2024_config)

        assert result.control_id == "AC-01"
        assert result.config == q1_2024_config
        assert result.metadata.seed == "test-seed"
        assert result.metadata.algorithm == "time-based-random"
        assert result.metadata.version == "1.0"
        assert result.generated_at.tzinfo is not None

    def test_missing_seed_is_generated_and_reproducible(self):
        config = _config(seed=None)
        result = generate_samples(config)

        assert result.metadata.seed
        replay = generate_samples(config.model_copy(update={"seed": result.metadata.seed}))
        assert replay.periods == result.periods

    def test_total_samples_is_sum_of_periods(self, multi_year_config):
        result = generate_samples(multi_year_config)

        assert result.total_samples == sum(len(p.samples) for p in result.periods)
        assert len(result.periods) == 6

    def test_samples_per_quarter_override(self):
        result = generate_samples(_config(samples_per_quarter=1))

        assert [len(p.samples) for p in result.periods] == [1, 1, 1, 1]

    def test_default_count_bounds_samples(self, multi_year_config):
        result = generate_samples(multi_year_config)

        assert all(len(p.samples) <= 4 for p in result.periods)

    def test_wide_interval_under_fills_quarter(self):
        result = generate_samples(_config(samples_per_quarter=3, minimum_interval=100))

        assert [len(p.samples) for p in result.periods] == [1, 1, 1, 1]

    def test_daily_samples_are_business_days(self, multi_year_config):
        result = generate_samples(multi_year_config)

        assert all(s.date.weekday() < 5 for s in result.all_samples())

    def test_samples_sorted_and_inside_period(self, multi_year_config):
        for period in generate_samples(multi_year_config).periods:
            dates = [s.date for s in period.samples]
            assert dates == sorted(set(dates))
            assert all(period.start_date <= d <= period.end_date for d in dates)

    def test_weekend_only_period_gives_empty_quarter(self):
        config = _config(
            control_frequency="daily",
            audit_period=AuditPeriod(start_date=date(2024, 1, 6), end_date=date(2024, 1, 7)),
        )
        result = generate_samples(config)

        assert len(result.periods) == 1
        assert result.periods[0].samples == []
        assert result.total_samples == 0

    def test_inverted_period_gives_empty_result(self):
        config = _config(
            audit_period=AuditPeriod(start_date=date(2025, 6, 1), end_date=date(2025, 1, 1)),
        )
        result = generate_samples(config)

        assert result.periods == []
        assert result.total_samples == 0

    def test_invalid_risk_level_behaves_like_low(self):
        invalid = generate_samples(_config(risk_level="invalid", control_frequency="weekly"))
        low = generate_samples(_config(risk_level="low", control_frequency="weekly"))

        assert invalid.periods == low.periods

    def test_invalid_frequency_behaves_like_monthly(self):
        invalid = generate_samples(_config(control_frequency="invalid", risk_level="high"))
        monthly = generate_samples(_config(control_frequency="monthly", risk_level="high"))

        assert invalid.periods == monthly.periods

    def test_seed_with_lone_surrogate(self):
        with capture_logs():
            first = generate_samples(_config(seed="\ud800abc"))
            second = generate_samples(_config(seed="\ud800abc"))

        assert first.metadata.seed == "\ud800abc"
        assert first.periods == second.periods
        assert first.total_samples > 0

    def test_zero_override_uses_defaults(self):
        zero = generate_samples(_config(samples_per_quarter=0, minimum_interval=0))
        default = generate_samples(_config())

        assert zero.periods == default.periods


class TestSelectDates:
    """Tests for the bounded rejection sampler."""

    @pytest.fixture
    def quarter_days(self):
        return [date(2024, 1, 1) + timedelta(days=offset) for offset in range(91)]

    def test_respects_minimum_interval(self, quarter_days):
        selected = select_dates(quarter_days, 4, 14, SeededRandom("spacing"))

        for i, first in enumerate(selected):
            for second in selected[i + 1:]:
                assert abs((second - first).days) >= 14

    def test_never_exceeds_requested_count(self, quarter_days):
        assert len(select_dates(quarter_days, 3, 1, SeededRandom("count"))) <= 3

    def test_single_candidate_selected_once(self):
        only = [date(2024, 3, 15)]

        assert select_dates(only, 5, 1, SeededRandom("one")) == only

    def test_zero_count_selects_nothing(self, quarter_days):
        assert select_dates(quarter_days, 0, 1, SeededRandom("none")) == []

    def test_empty_candidates_select_nothing(self):
        assert select_dates([], 3, 7, SeededRandom("empty")) == []
