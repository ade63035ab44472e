"""Issue records produced by the validators, and the repair result."""

from __future__ import annotations

from dataclasses import dataclass, field

MISSING_START_MARKER = "MISSING_START_MARKER"
MISSING_END_MARKER = "MISSING_END_MARKER"
MISORDERED_MARKERS = "MISORDERED_MARKERS"
DUPLICATE_START_MARKER = "DUPLICATE_START_MARKER"
DUPLICATE_END_MARKER = "DUPLICATE_END_MARKER"
TABLE_COLUMN_MISMATCH = "TABLE_COLUMN_MISMATCH"
DOCS_VERSION_MISMATCH = "DOCS_VERSION_MISMATCH"
SENSITIVE_FILES_PRESENT = "SENSITIVE_FILES_PRESENT"
PROMPT_CONTAINS_HANGUL = "PROMPT_CONTAINS_HANGUL"
PROMPT_MISSING_TITLE = "PROMPT_MISSING_TITLE"
PROMPT_CHECKLIST_SECTION_MISSING = "PROMPT_CHECKLIST_SECTION_MISSING"
PROMPT_MISSING_CHECKLIST = "PROMPT_MISSING_CHECKLIST"
PROMPT_CHECKLIST_ITEM_SECTION_MISSING = "PROMPT_CHECKLIST_ITEM_SECTION_MISSING"
PROMPT_FINAL_COMPLETION_SECTION_MISSING = "PROMPT_FINAL_COMPLETION_SECTION_MISSING"
PROMPT_FINAL_COMPLETION_NOT_LAST = "PROMPT_FINAL_COMPLETION_NOT_LAST"
PROMPT_FINAL_COMPLETION_MESSAGE_MISSING = "PROMPT_FINAL_COMPLETION_MESSAGE_MISSING"

ISSUE_CODES = frozenset({
    MISSING_START_MARKER,
    MISSING_END_MARKER,
    MISORDERED_MARKERS,
    DUPLICATE_START_MARKER,
    DUPLICATE_END_MARKER,
    TABLE_COLUMN_MISMATCH,
    DOCS_VERSION_MISMATCH,
    SENSITIVE_FILES_PRESENT,
    PROMPT_CONTAINS_HANGUL,
    PROMPT_MISSING_TITLE,
    PROMPT_CHECKLIST_SECTION_MISSING,
    PROMPT_MISSING_CHECKLIST,
    PROMPT_CHECKLIST_ITEM_SECTION_MISSING,
    PROMPT_FINAL_COMPLETION_SECTION_MISSING,
    PROMPT_FINAL_COMPLETION_NOT_LAST,
    PROMPT_FINAL_COMPLETION_MESSAGE_MISSING,
})


@dataclass(frozen=True)
class Issue:
    """One structural defect found in a document.

    Issues carry no severity: any issue means the document is not clean.
    """

    code: str
    section_id: str
    message: str

    def __post_init__(self) -> None:
        if self.code not in ISSUE_CODES:
            raise ValueError(f"Unknown issue code: {self.code!r}")

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "sectionId": self.section_id, "message": self.message}

    def __str__(self) -> str:
        return f"[{self.section_id}] {self.code}: {self.message}"


@dataclass
class RepairResult:
    """Result of a report repair.

    A non-empty issues_after means the repair did not converge for those
    sections, even when changed is True.
    """

    content: str
    changed: bool
    issues_before: list[Issue] = field(default_factory=list)
    issues_after: list[Issue] = field(default_factory=list)

    @property
    def fixed(self) -> bool:
        return len(self.issues_after) == 0

    def unresolved_sections(self) -> list[str]:
        """Section ids that still have issues after repair, in first-seen order."""
        seen: list[str] = []
        for issue in self.issues_after:
            if issue.section_id not in seen:
                seen.append(issue.section_id)
        return seen

    def to_dict(self) -> dict:
        return {
            "changed": self.changed,
            "issuesBefore": [i.to_dict() for i in self.issues_before],
            "issuesAfter": [i.to_dict() for i in self.issues_after],
        }
