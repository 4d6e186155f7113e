"""
Pytest configuration and shared fixtures for the audit sampling tests.
"""
from datetime import date

import pytest
from hypothesis import settings, Verbosity

from audit_sampling.models import AuditPeriod, SamplingConfig

# Configure Hypothesis settings for all property-based tests
settings.register_profile(
    "default",
    max_examples=100,
    deadline=5000,
    suppress_health_check=[],
    verbosity=Verbosity.normal,
)

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=10000,
    suppress_health_check=[],
    verbosity=Verbosity.quiet,
)

settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    suppress_health_check=[],
    verbosity=Verbosity.verbose,
)

settings.load_profile("default")


@pytest.fixture
def q1_2024_config():
    """Monthly, low-risk control over Q1 2024 with a fixed seed."""
    return SamplingConfig(
        control_id="AC-01",
        control_frequency="monthly",
        risk_level="low",
        audit_period=AuditPeriod(start_date=date(2024, 1, 1), end_date=date(2024, 3, 31)),
        seed="test-seed",
    )


@pytest.fixture
def multi_year_config():
    """Daily, high-risk control spanning 2024 and half of 2025."""
    return SamplingConfig(
        control_id="ITGC-7",
        control_frequency="daily",
        risk_level="high",
        audit_period=AuditPeriod(start_date=date(2024, 1, 1), end_date=date(2025, 6, 30)),
        seed="fy24-fy25",
    )
