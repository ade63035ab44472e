"""Shared test fixtures for report-doctor."""

import pytest

from report_doctor.doctor.prompt import FINAL_COMPLETION_MESSAGE
from report_doctor.doctor.sections import EVALUATION_SECTIONS, IMPROVEMENT_SECTIONS


def build_report(title: str, sections, body: str = "generated") -> str:
    """Build a well-formed report with every section's markers in order."""
    lines = [title, ""]
    for section in sections:
        lines.append(section.start_marker)
        lines.append(f"## {section.id} ({body})")
        if section.validate_tables:
            lines.extend(["| Item | Value |", "|------|-------|", f"| {section.id} | {body} |"])
        lines.append(section.end_marker)
        lines.append("")
    return "\n".join(lines)


@pytest.fixture
def evaluation_template():
    return build_report("# Project Evaluation Report", EVALUATION_SECTIONS, "template")


@pytest.fixture
def improvement_template():
    return build_report("# Project Improvement Exploration Report", IMPROVEMENT_SECTIONS, "template")


@pytest.fixture
def evaluation_report():
    return build_report("# Project Evaluation Report", EVALUATION_SECTIONS, "current")


@pytest.fixture
def improvement_report():
    return build_report("# Project Improvement Exploration Report", IMPROVEMENT_SECTIONS, "current")


@pytest.fixture
def valid_prompt():
    return "\n".join([
        "# AI Agent Improvement Prompts",
        "",
        "## Execution Checklist",
        "",
        "| # | Prompt ID | Title | Priority | Status |",
        "|:---:|:---|:---|:---:|:---:|",
        "| 1 | PROMPT-001 | Fix marker handling | P1 | Pending |",
        "| 2 | OPT-1 | Speed up scanning | OPT | Pending |",
        "",
        "---",
        "",
        "## Prompts",
        "",
        "### [PROMPT-001] Fix marker handling",
        "Do the work.",
        "",
        "### [OPT-1] Speed up scanning",
        "Do the other work.",
        "",
        "## Final Completion",
        "",
        FINAL_COMPLETION_MESSAGE,
        "",
    ])


@pytest.fixture
def report_builder():
    return build_report
