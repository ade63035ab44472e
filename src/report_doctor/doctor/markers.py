"""Marker pair integrity checks."""

from __future__ import annotations

from report_doctor.doctor.issues import (
    DUPLICATE_END_MARKER,
    DUPLICATE_START_MARKER,
    MISORDERED_MARKERS,
    MISSING_END_MARKER,
    MISSING_START_MARKER,
    Issue,
)
from report_doctor.doctor.sections import ManagedSection


def validate_marker_pair(content: str, section: ManagedSection) -> list[Issue]:
    """Check that a section's start and end markers each appear once, in order.

    Missing and duplicate checks are independent: a document with two start
    markers and no end marker reports both. Counting is a literal substring
    count over the newline-normalized content.

    Args:
        content: Newline-normalized document text.
        section: Section definition to check.

    Returns:
        List of issues, empty when the marker pair is intact.
    """
    issues: list[Issue] = []
    start_count = content.count(section.start_marker)
    end_count = content.count(section.end_marker)

    if start_count == 0:
        issues.append(Issue(
            MISSING_START_MARKER, section.id,
            f"Missing start marker: {section.start_marker}",
        ))
    if end_count == 0:
        issues.append(Issue(
            MISSING_END_MARKER, section.id,
            f"Missing end marker: {section.end_marker}",
        ))
    if start_count > 1:
        issues.append(Issue(
            DUPLICATE_START_MARKER, section.id,
            f"Duplicate start marker: {section.start_marker}",
        ))
    if end_count > 1:
        issues.append(Issue(
            DUPLICATE_END_MARKER, section.id,
            f"Duplicate end marker: {section.end_marker}",
        ))

    start_index = content.find(section.start_marker)
    if start_index != -1 and end_count > 0:
        end_after_start = content.find(
            section.end_marker, start_index + len(section.start_marker),
        )
        if end_after_start == -1:
            issues.append(Issue(
                MISORDERED_MARKERS, section.id,
                f"Markers are misordered: {section.start_marker} / {section.end_marker}",
            ))

    return issues
