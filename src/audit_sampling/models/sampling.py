"""Sampling data models.

Inputs and outputs of the audit sample date generator. Every structure is
created fresh for one invocation of the engine.
"""

import datetime as dt
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field


class ControlFrequency(str, Enum):
    """How often the control's underlying process recurs."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class RiskLevel(str, Enum):
    """Risk rating driving the default number of samples per quarter."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class SampleStatus(str, Enum):
    """Lifecycle of a sample date once handed to the review workflow."""

    PENDING = "pending"
    EVIDENCE_UPLOADED = "evidence_uploaded"
    REVIEWED = "reviewed"
    EXCEPTION = "exception"


class AuditPeriod(BaseModel):
    """Calendar date range under audit, both ends inclusive."""

    start_date: dt.date = Field(..., description="First day of the audit period")
    end_date: dt.date = Field(..., description="Last day of the audit period")


class SamplingConfig(BaseModel):
    """Input to one sample generation run.

    Frequency and risk level accept arbitrary strings: unknown values are
    resolved by the engine's fallback rules rather than rejected here.
    """

    control_id: str = Field(..., description="Control identifier, echoed in sample IDs")
    control_frequency: Union[ControlFrequency, str] = Field(
        ..., description="daily, weekly or monthly"
    )
    risk_level: Union[RiskLevel, str] = Field(..., description="low, moderate or high")
    audit_period: AuditPeriod = Field(..., description="Period to sample from")
    samples_per_quarter: Optional[int] = Field(
        None, description="Override of the risk-level default sample count"
    )
    total_samples: Optional[int] = Field(
        None, description="Planned total across the period (informational)"
    )
    minimum_interval: Optional[int] = Field(
        None, description="Minimum days between samples in one quarter"
    )
    seed: Optional[str] = Field(None, description="Seed for reproducible results")


class SampleDate(BaseModel):
    """A single date selected for control testing."""

    id: str = Field(..., description="<control_id>-<quarter>-<index>")
    date: dt.date = Field(..., description="Selected test date")
    quarter: str = Field(..., description="Label of the owning quarter-period")
    status: SampleStatus = Field(default=SampleStatus.PENDING)
    evidence_files: list[str] = Field(default_factory=list)
    notes: Optional[str] = Field(None)
    reviewed_by: Optional[str] = Field(None)
    reviewed_at: Optional[dt.datetime] = Field(None)


class SamplePeriod(BaseModel):
    """Overlap of one calendar quarter with the audit period."""

    quarter: str = Field(..., description="Label formatted <year>-Q<n>")
    start_date: dt.date = Field(..., description="Clipped start of the quarter")
    end_date: dt.date = Field(..., description="Clipped end of the quarter")
    samples: list[SampleDate] = Field(default_factory=list)


class SamplingMetadata(BaseModel):
    """Details needed to reproduce or audit a sampling run."""

    seed: str
    algorithm: str
    version: str


class SamplingResult(BaseModel):
    """Output of one sample generation run."""

    control_id: str
    generated_at: dt.datetime
    config: SamplingConfig
    periods: list[SamplePeriod] = Field(default_factory=list)
    total_samples: int = 0
    metadata: SamplingMetadata

    def all_samples(self) -> list[SampleDate]:
        """Samples across every period, in stored order."""
        return [sample for period in self.periods for sample in period.samples]
