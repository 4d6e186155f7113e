"""Serialization of sampling results for downstream tools."""

import csv
import io

from audit_sampling.models.sampling import SamplingResult

CSV_HEADERS = ("Quarter", "Sample ID", "Date", "Status", "Notes")


def export_to_csv(result: SamplingResult) -> str:
    """Render every sample of a result as CSV.

    One header row, then one row per sample in stored order. Rows are
    separated by ``\\n`` with no trailing newline. Fields holding a comma,
    quote or line break are quoted; engine-generated fields never are.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for sample in result.all_samples():
        writer.writerow((
            sample.quarter,
            sample.id,
            sample.date.isoformat(),
            sample.status.value,
            sample.notes or "",
        ))
    return buffer.getvalue().rstrip("\n")


def export_to_json(result: SamplingResult, indent: int = 2) -> str:
    """Render a full result, config and metadata included, as JSON."""
    return result.model_dump_json(indent=indent)
