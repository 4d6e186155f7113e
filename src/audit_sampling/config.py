"""Runtime settings for the audit sampling tools.

Sampling parameters live in the engine's constant tables; these settings
only cover logging and output of the command-line tools.
"""

import os
from typing import Literal, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "AUDIT_SAMPLING_"

OutputFormat = Literal["csv", "json"]


class EngineSettings(BaseModel):
    """Settings for logging and result output."""

    log_level: str = Field(default="WARNING", description="Log level name")
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")
    output_format: OutputFormat = Field(default="csv", description="Result format")

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Load settings from ``AUDIT_SAMPLING_*`` environment variables."""
        return cls(
            log_level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING"),
            json_logs=os.environ.get(f"{ENV_PREFIX}JSON_LOGS", "false").lower()
            in ("1", "true", "yes"),
            log_file=os.environ.get(f"{ENV_PREFIX}LOG_FILE") or None,
            output_format=os.environ.get(f"{ENV_PREFIX}OUTPUT_FORMAT", "csv"),
        )
