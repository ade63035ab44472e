"""Validate a report document against its managed-section rules."""

from __future__ import annotations

from report_doctor.doctor.issues import Issue
from report_doctor.doctor.lines import find_marker_range, normalize_newlines
from report_doctor.doctor.markers import validate_marker_pair
from report_doctor.doctor.prompt import validate_prompt_markdown
from report_doctor.doctor.sections import PROMPT, check_document_type, get_managed_sections
from report_doctor.doctor.tables import validate_table_groups


def _managed_content_lines(content: str, start_marker: str, end_marker: str) -> list[str] | None:
    lines = content.split("\n")
    span = find_marker_range(lines, start_marker, end_marker)
    if span is None:
        return None
    return lines[span[0] + 1:span[1]]


def validate_report_markdown(content: str, doc_type: str) -> list[Issue]:
    """Run full validation on one report document.

    Checks, per managed section in registry order:
    - Marker presence, uniqueness, and ordering
    - Pipe-table column consistency (sections with validate_tables only)

    Prompt documents are routed to the Prompt.md structure checks.

    Args:
        content: Document text in any newline style.
        doc_type: One of DOCUMENT_TYPES.

    Returns:
        List of issues; empty means the document is clean.

    Raises:
        ValueError: If doc_type is unknown.
    """
    check_document_type(doc_type)
    normalized = normalize_newlines(content)
    if doc_type == PROMPT:
        return validate_prompt_markdown(normalized)

    issues: list[Issue] = []
    for section in get_managed_sections(doc_type):
        issues.extend(validate_marker_pair(normalized, section))

        if section.validate_tables:
            block = _managed_content_lines(normalized, section.start_marker, section.end_marker)
            if block is not None:
                issues.extend(validate_table_groups(block, section.id))

    return issues
