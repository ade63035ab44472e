"""Structural checks for Prompt.md.

Prompt.md has no marker sections. It must have:
- a "# " title as its first non-blank line
- an "## Execution Checklist" table listing PROMPT-### / OPT-# ids
- a "### [<id>]" heading for every id in that table
- "## Final Completion" as the last level-2 section, carrying
  FINAL_COMPLETION_MESSAGE
- no Hangul syllables (the file is English-only)
"""

from __future__ import annotations

import re

from report_doctor.doctor.issues import (
    PROMPT_CHECKLIST_ITEM_SECTION_MISSING,
    PROMPT_CHECKLIST_SECTION_MISSING,
    PROMPT_CONTAINS_HANGUL,
    PROMPT_FINAL_COMPLETION_MESSAGE_MISSING,
    PROMPT_FINAL_COMPLETION_NOT_LAST,
    PROMPT_FINAL_COMPLETION_SECTION_MISSING,
    PROMPT_MISSING_CHECKLIST,
    PROMPT_MISSING_TITLE,
    Issue,
)
from report_doctor.doctor.lines import normalize_newlines, split_table_row

SECTION_ID = "prompt"

FINAL_COMPLETION_MESSAGE = (
    "ALL PROMPTS COMPLETED. All pending improvement and optimization items "
    "from the latest report have been applied."
)

# Accepts both "## Execution Checklist" and "## 📋 Execution Checklist"
EXECUTION_CHECKLIST_HEADING_RE = re.compile(r"^##\s*(?:📋\s*)?Execution Checklist\b")
FINAL_COMPLETION_HEADING_RE = re.compile(r"^##\s*Final Completion\b")
CHECKLIST_ID_RE = re.compile(r"^(PROMPT-\d{3}|OPT-\d+)$", re.IGNORECASE)
HANGUL_RE = re.compile("[\uac00-\ud7a3]")


def find_execution_checklist_heading_index(lines: list[str]) -> int:
    for i, line in enumerate(lines):
        if EXECUTION_CHECKLIST_HEADING_RE.match(line.strip()):
            return i
    return -1


def _checklist_end(lines: list[str], heading_index: int) -> int:
    """Index of the horizontal rule or next "## " heading after the checklist."""
    for i in range(heading_index + 1, len(lines)):
        stripped = lines[i].strip()
        if stripped == "---" or stripped.startswith("## "):
            return i
    return len(lines)


def extract_checklist_ids(content: str) -> list[str]:
    """Collect distinct checklist ids from the Execution Checklist table.

    Ids are taken from the second column, in first-seen order, exactly as
    written.

    Returns:
        List of ids, empty if the checklist heading or ids are missing.
    """
    lines = normalize_newlines(content).split("\n")
    heading = find_execution_checklist_heading_index(lines)
    if heading == -1:
        return []

    ids: list[str] = []
    for line in lines[heading + 1:_checklist_end(lines, heading)]:
        cells = split_table_row(line)
        if not cells or len(cells) < 2:
            continue
        if CHECKLIST_ID_RE.match(cells[1]) and cells[1] not in ids:
            ids.append(cells[1])
    return ids


def _has_item_heading(content: str, item_id: str) -> bool:
    pattern = re.compile(rf"^###\s*\[{re.escape(item_id)}\]", re.MULTILINE)
    return pattern.search(content) is not None


def validate_prompt_markdown(content: str) -> list[Issue]:
    """Run all Prompt.md structure checks.

    Args:
        content: Prompt.md text in any newline style.

    Returns:
        List of issues with section id "prompt".
    """
    issues: list[Issue] = []
    normalized = normalize_newlines(content)
    lines = normalized.split("\n")

    if HANGUL_RE.search(normalized):
        issues.append(Issue(
            PROMPT_CONTAINS_HANGUL, SECTION_ID,
            "Prompt.md contains Hangul characters; it must be English-only.",
        ))

    first = next((line for line in lines if line.strip()), None)
    if first is None or not first.startswith("# "):
        issues.append(Issue(
            PROMPT_MISSING_TITLE, SECTION_ID,
            'Missing top-level title (must start with "# ").',
        ))

    if find_execution_checklist_heading_index(lines) == -1:
        issues.append(Issue(
            PROMPT_CHECKLIST_SECTION_MISSING, SECTION_ID,
            'Missing "## Execution Checklist" section.',
        ))
    else:
        ids = extract_checklist_ids(normalized)
        if not ids:
            issues.append(Issue(
                PROMPT_MISSING_CHECKLIST, SECTION_ID,
                "Execution Checklist table is missing prompt IDs (e.g., PROMPT-001, OPT-1).",
            ))
        for item_id in ids:
            if not _has_item_heading(normalized, item_id):
                issues.append(Issue(
                    PROMPT_CHECKLIST_ITEM_SECTION_MISSING, SECTION_ID,
                    f"Missing prompt section heading for checklist ID: {item_id}",
                ))

    final_index = next(
        (i for i, line in enumerate(lines) if FINAL_COMPLETION_HEADING_RE.match(line.strip())),
        -1,
    )
    if final_index == -1:
        issues.append(Issue(
            PROMPT_FINAL_COMPLETION_SECTION_MISSING, SECTION_ID,
            'Missing "## Final Completion" section.',
        ))
        return issues

    h2_indices = [i for i, line in enumerate(lines) if line.strip().startswith("## ")]
    if h2_indices and h2_indices[-1] != final_index:
        issues.append(Issue(
            PROMPT_FINAL_COMPLETION_NOT_LAST, SECTION_ID,
            '"## Final Completion" must be the last level-2 section in Prompt.md.',
        ))

    after_final = "\n".join(lines[final_index + 1:])
    if FINAL_COMPLETION_MESSAGE not in after_final:
        issues.append(Issue(
            PROMPT_FINAL_COMPLETION_MESSAGE_MISSING, SECTION_ID,
            "Missing required final completion message string.",
        ))

    return issues
