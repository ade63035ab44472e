"""Repair managed report sections from a template.

The repair process, per section that has at least one issue:
1. Take the section's block (start marker line through end marker line)
   from the template; skip the section if the template lacks it
2. If the document has a start marker with an end marker somewhere after
   it, replace the widest span (first start through last such end) with
   the template block. Duplicate markers caught inside the span go with it,
   and marker lines left outside it are dropped
3. Otherwise strip every line holding either marker and insert the block
   where the earliest stray marker was (document end if there was none)

Sections without issues are never touched. Prompt.md is never repaired.
"""

from __future__ import annotations

from report_doctor.doctor.issues import RepairResult
from report_doctor.doctor.lines import (
    detect_newline,
    find_lines_containing,
    find_marker_range,
    normalize_newlines,
    restore_newlines,
)
from report_doctor.doctor.sections import PROMPT, ManagedSection, get_managed_sections
from report_doctor.doctor.validator import validate_report_markdown


def extract_template_block(template: str, section: ManagedSection) -> list[str] | None:
    """Get a section's marker block lines from a template, markers included."""
    lines = normalize_newlines(template).split("\n")
    span = find_marker_range(lines, section.start_marker, section.end_marker)
    if span is None:
        return None
    return lines[span[0]:span[1] + 1]


def _widest_span(lines: list[str], section: ManagedSection) -> tuple[int, int] | None:
    starts = find_lines_containing(lines, section.start_marker)
    if not starts:
        return None
    first_start = starts[0]
    ends = [i for i in find_lines_containing(lines, section.end_marker) if i > first_start]
    if not ends:
        return None
    return first_start, ends[-1]


def _drop_marker_lines(lines: list[str], section: ManagedSection) -> list[str]:
    return [
        line for line in lines
        if section.start_marker not in line and section.end_marker not in line
    ]


def _insert_fresh_block(
    lines: list[str],
    section: ManagedSection,
    block: list[str],
) -> list[str]:
    marker_indices = [
        i for i, line in enumerate(lines)
        if section.start_marker in line or section.end_marker in line
    ]
    insert_at = marker_indices[0] if marker_indices else len(lines)

    cleaned = _drop_marker_lines(lines, section)
    # No removed line precedes the earliest marker, so insert_at still holds
    before = cleaned[:insert_at]
    after = cleaned[insert_at:]

    new_block = list(block)
    if before and before[-1].strip() != "":
        new_block.insert(0, "")
    if after and after[0].strip() != "" and new_block[-1].strip() != "":
        new_block.append("")

    return before + new_block + after


def repair_report_markdown(content: str, template: str, doc_type: str) -> RepairResult:
    """Repair a report's broken managed sections from a template.

    Args:
        content: Current document text in any newline style.
        template: Well-formed template document of the same type.
        doc_type: One of DOCUMENT_TYPES.

    Returns:
        RepairResult. Output keeps the newline style of content. Check
        issues_after before trusting the repaired text.

    Raises:
        ValueError: If doc_type is unknown.
    """
    sections = get_managed_sections(doc_type)
    newline = detect_newline(content)
    original = normalize_newlines(content)
    template_normalized = normalize_newlines(template)

    issues_before = validate_report_markdown(original, doc_type)

    if doc_type == PROMPT:
        return RepairResult(
            content=restore_newlines(original, newline),
            changed=False,
            issues_before=issues_before,
            issues_after=list(issues_before),
        )

    if original.strip() == "":
        return RepairResult(
            content=restore_newlines(template_normalized, newline),
            changed=template_normalized != original,
            issues_before=issues_before,
            issues_after=validate_report_markdown(template_normalized, doc_type),
        )

    broken = {issue.section_id for issue in issues_before}

    lines = original.split("\n")
    for section in sections:
        if section.id not in broken:
            continue

        block = extract_template_block(template_normalized, section)
        if block is None:
            continue

        span = _widest_span(lines, section)
        if span is not None:
            head = _drop_marker_lines(lines[:span[0]], section)
            tail = _drop_marker_lines(lines[span[1] + 1:], section)
            lines = head + block + tail
        else:
            lines = _insert_fresh_block(lines, section, block)

    repaired = "\n".join(lines)
    return RepairResult(
        content=restore_newlines(repaired, newline),
        changed=repaired != original,
        issues_before=issues_before,
        issues_after=validate_report_markdown(repaired, doc_type),
    )
