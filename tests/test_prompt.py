"""Tests for Prompt.md structure validation."""

from report_doctor.doctor.prompt import (
    FINAL_COMPLETION_MESSAGE,
    extract_checklist_ids,
    validate_prompt_markdown,
)
from report_doctor.doctor.validator import validate_report_markdown


def codes(issues):
    return [i.code for i in issues]


class TestPromptStructure:
    def test_valid_prompt(self, valid_prompt):
        assert validate_prompt_markdown(valid_prompt) == []

    def test_routed_through_report_validator(self, valid_prompt):
        assert validate_report_markdown(valid_prompt, "prompt") == []

    def test_hangul_always_flagged(self, valid_prompt):
        issues = validate_prompt_markdown(valid_prompt + "\n한국어\n")
        assert "PROMPT_CONTAINS_HANGUL" in codes(issues)

    def test_hangul_alone(self):
        assert "PROMPT_CONTAINS_HANGUL" in codes(validate_prompt_markdown("가"))

    def test_missing_title(self, valid_prompt):
        content = valid_prompt.replace("# AI Agent Improvement Prompts", "AI Agent Improvement Prompts")
        assert codes(validate_prompt_markdown(content)) == ["PROMPT_MISSING_TITLE"]

    def test_title_after_blank_lines(self, valid_prompt):
        assert validate_prompt_markdown("\n\n" + valid_prompt) == []

    def test_emoji_checklist_heading(self, valid_prompt):
        content = valid_prompt.replace("## Execution Checklist", "## 📋 Execution Checklist")
        assert validate_prompt_markdown(content) == []

    def test_missing_checklist_section(self, valid_prompt):
        content = valid_prompt.replace("## Execution Checklist", "## Checklist")
        assert "PROMPT_CHECKLIST_SECTION_MISSING" in codes(validate_prompt_markdown(content))

    def test_checklist_without_ids(self):
        content = "\n".join([
            "# Title",
            "## Execution Checklist",
            "| # | Prompt ID |",
            "|---|---|",
            "| 1 | TASK-1 |",
            "## Final Completion",
            FINAL_COMPLETION_MESSAGE,
        ])
        assert codes(validate_prompt_markdown(content)) == ["PROMPT_MISSING_CHECKLIST"]

    def test_missing_item_heading(self, valid_prompt):
        content = valid_prompt.replace("### [PROMPT-001] Fix marker handling", "### Fix marker handling")
        issues = validate_prompt_markdown(content)
        assert codes(issues) == ["PROMPT_CHECKLIST_ITEM_SECTION_MISSING"]
        assert "PROMPT-001" in issues[0].message

    def test_adding_item_heading_clears_issue(self):
        base = "\n".join([
            "# Title",
            "## Execution Checklist",
            "| # | Prompt ID |",
            "|---|---|",
            "| 1 | PROMPT-001 |",
            "---",
            "## Final Completion",
            FINAL_COMPLETION_MESSAGE,
        ])
        assert codes(validate_prompt_markdown(base)) == ["PROMPT_CHECKLIST_ITEM_SECTION_MISSING"]
        fixed = base.replace("---\n## Final", "---\n### [PROMPT-001] Do it\n## Final")
        assert validate_prompt_markdown(fixed) == []

    def test_checklist_scan_stops_at_rule(self, valid_prompt):
        content = valid_prompt.replace(
            "## Prompts", "| 3 | PROMPT-009 | Ignored | P3 | Pending |\n\n## Prompts",
        )
        assert "PROMPT-009" not in extract_checklist_ids(content)
        assert validate_prompt_markdown(content) == []

    def test_extract_ids_deduplicates(self, valid_prompt):
        content = valid_prompt.replace(
            "| 2 | OPT-1 |", "| 2 | PROMPT-001 | again | P1 | Pending |\n| 3 | OPT-1 |",
        )
        assert extract_checklist_ids(content) == ["PROMPT-001", "OPT-1"]

    def test_missing_final_section(self, valid_prompt):
        content = valid_prompt.replace("## Final Completion", "## Wrap Up")
        assert codes(validate_prompt_markdown(content)) == ["PROMPT_FINAL_COMPLETION_SECTION_MISSING"]

    def test_final_section_not_last(self, valid_prompt):
        content = valid_prompt + "\n## Appendix\nextra\n"
        assert codes(validate_prompt_markdown(content)) == ["PROMPT_FINAL_COMPLETION_NOT_LAST"]

    def test_final_heading_with_trailing_text(self, valid_prompt):
        content = valid_prompt.replace("## Final Completion", "## Final Completion (all done)")
        assert validate_prompt_markdown(content) == []

    def test_final_message_missing(self, valid_prompt):
        content = valid_prompt.replace(FINAL_COMPLETION_MESSAGE, "All done.")
        assert codes(validate_prompt_markdown(content)) == ["PROMPT_FINAL_COMPLETION_MESSAGE_MISSING"]

    def test_final_message_is_case_sensitive(self, valid_prompt):
        content = valid_prompt.replace(FINAL_COMPLETION_MESSAGE, FINAL_COMPLETION_MESSAGE.lower())
        assert "PROMPT_FINAL_COMPLETION_MESSAGE_MISSING" in codes(validate_prompt_markdown(content))

    def test_message_before_final_heading_does_not_count(self, valid_prompt):
        content = valid_prompt.replace(FINAL_COMPLETION_MESSAGE, "")
        content = content.replace("## Prompts", f"{FINAL_COMPLETION_MESSAGE}\n\n## Prompts")
        assert "PROMPT_FINAL_COMPLETION_MESSAGE_MISSING" in codes(validate_prompt_markdown(content))

    def test_crlf_prompt(self, valid_prompt):
        assert validate_prompt_markdown(valid_prompt.replace("\n", "\r\n")) == []

    def test_empty_prompt(self):
        assert codes(validate_prompt_markdown("")) == [
            "PROMPT_MISSING_TITLE",
            "PROMPT_CHECKLIST_SECTION_MISSING",
            "PROMPT_FINAL_COMPLETION_SECTION_MISSING",
        ]
