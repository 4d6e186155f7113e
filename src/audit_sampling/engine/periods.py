"""Calendar handling: quarter partitioning and candidate date enumeration."""

import calendar
from datetime import date, timedelta

from audit_sampling.models.sampling import AuditPeriod, ControlFrequency, SamplePeriod

# (quarter number, first month, last month)
QUARTER_MONTHS = ((1, 1, 3), (2, 4, 6), (3, 7, 9), (4, 10, 12))

# date.weekday() values for Saturday and Sunday
WEEKEND_DAYS = frozenset({5, 6})


def quarter_label(year: int, quarter: int) -> str:
    return f"{year}-Q{quarter}"


def calendar_quarters(year: int) -> list[tuple[str, date, date]]:
    """Return ``(label, first_day, last_day)`` for each quarter of a year."""
    quarters = []
    for number, first_month, last_month in QUARTER_MONTHS:
        last_day = calendar.monthrange(year, last_month)[1]
        quarters.append((
            quarter_label(year, number),
            date(year, first_month, 1),
            date(year, last_month, last_day),
        ))
    return quarters


def partition_quarters(period: AuditPeriod) -> list[SamplePeriod]:
    """Split an audit period into the quarter-periods that overlap it.

    Each quarter is clipped to the audit period. Quarters with no overlap
    are skipped, so an inverted period yields an empty list.

    Args:
        period: Audit period to partition

    Returns:
        Chronologically ordered quarter-periods with no samples yet
    """
    periods = []
    for year in range(period.start_date.year, period.end_date.year + 1):
        for label, quarter_start, quarter_end in calendar_quarters(year):
            start = max(quarter_start, period.start_date)
            end = min(quarter_end, period.end_date)
            if start <= end:
                periods.append(SamplePeriod(quarter=label, start_date=start, end_date=end))
    return periods


def is_business_day(day: date) -> bool:
    return day.weekday() not in WEEKEND_DAYS


def candidate_dates(start: date, end: date, frequency: ControlFrequency) -> list[date]:
    """Enumerate the dates eligible for sampling in ``[start, end]``.

    Monthly controls may be sampled on any calendar day; daily and weekly
    controls only on business days.
    """
    if start > end:
        return []

    days = [start + timedelta(days=offset) for offset in range((end - start).days + 1)]
    if frequency == ControlFrequency.MONTHLY:
        return days
    return [day for day in days if is_business_day(day)]
