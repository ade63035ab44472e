"""Pipe-table column consistency checks for managed sections."""

from __future__ import annotations

from report_doctor.doctor.issues import TABLE_COLUMN_MISMATCH, Issue
from report_doctor.doctor.lines import split_table_row


def table_column_count(line: str) -> int | None:
    cells = split_table_row(line)
    return len(cells) if cells is not None else None


def validate_table_groups(lines: list[str], section_id: str) -> list[Issue]:
    """Check each contiguous run of table rows for a stable column count.

    The first row of a run sets the expected count. Only the first
    divergent row of a run is reported. Separator rows ("|---|---|") are
    ordinary rows here and must match the header.

    Args:
        lines: Lines strictly between a section's markers.
        section_id: Section id attached to any issue.

    Returns:
        One TABLE_COLUMN_MISMATCH issue per inconsistent run.
    """
    issues: list[Issue] = []
    i = 0
    while i < len(lines):
        expected = table_column_count(lines[i])
        if expected is None:
            i += 1
            continue

        j = i + 1
        while j < len(lines):
            count = table_column_count(lines[j])
            if count is None:
                break
            if count != expected:
                issues.append(Issue(
                    TABLE_COLUMN_MISMATCH, section_id,
                    f"Table column mismatch (expected {expected}, got {count}).",
                ))
                # Skip the rest of this run
                j += 1
                while j < len(lines) and table_column_count(lines[j]) is not None:
                    j += 1
                break
            j += 1

        i = j + 1

    return issues
