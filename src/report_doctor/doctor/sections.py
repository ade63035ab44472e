"""Managed section registry — single source of truth.

Each report type owns a fixed, ordered list of marker-delimited sections.
Prompt.md has no marker sections; its structure is checked by
report_doctor.doctor.prompt instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from report_doctor.markers import MARKERS

EVALUATION = "evaluation"
IMPROVEMENT = "improvement"
PROMPT = "prompt"

DOCUMENT_TYPES = (EVALUATION, IMPROVEMENT, PROMPT)


@dataclass(frozen=True)
class ManagedSection:
    """One auto-managed region of a report."""

    id: str
    start_marker: str
    end_marker: str
    validate_tables: bool = False


def _section(section_id: str, marker_key: str, validate_tables: bool = False) -> ManagedSection:
    return ManagedSection(
        id=section_id,
        start_marker=MARKERS[f"{marker_key}_START"],
        end_marker=MARKERS[f"{marker_key}_END"],
        validate_tables=validate_tables,
    )


EVALUATION_SECTIONS: tuple[ManagedSection, ...] = (
    _section("tldr", "TLDR", validate_tables=True),
    _section("risk-summary", "RISK_SUMMARY", validate_tables=True),
    _section("overview", "OVERVIEW", validate_tables=True),
    _section("structure", "STRUCTURE"),
    _section("score", "SCORE", validate_tables=True),
    _section("score-mapping", "SCORE_MAPPING", validate_tables=True),
    _section("detail", "DETAIL"),
    _section("summary", "SUMMARY"),
    _section("trend", "TREND", validate_tables=True),
)

IMPROVEMENT_SECTIONS: tuple[ManagedSection, ...] = (
    _section("overview", "OVERVIEW", validate_tables=True),
    _section("error-exploration", "ERROR_EXPLORATION"),
    _section("summary", "SUMMARY"),
    _section("improvement-list", "IMPROVEMENT_LIST"),
    _section("optimization", "OPTIMIZATION"),
    _section("feature-list", "FEATURE_LIST"),
)

_REGISTRY: dict[str, tuple[ManagedSection, ...]] = {
    EVALUATION: EVALUATION_SECTIONS,
    IMPROVEMENT: IMPROVEMENT_SECTIONS,
    PROMPT: (),
}


def check_document_type(doc_type: str) -> str:
    """Return doc_type unchanged, or raise ValueError if it is not a known type."""
    if doc_type not in _REGISTRY:
        raise ValueError(
            f"Unknown document type: {doc_type!r}. Valid: {', '.join(DOCUMENT_TYPES)}"
        )
    return doc_type


def get_managed_sections(doc_type: str) -> tuple[ManagedSection, ...]:
    """Get the managed sections for a document type, in document order.

    Raises:
        ValueError: If doc_type is not one of DOCUMENT_TYPES.
    """
    return _REGISTRY[check_document_type(doc_type)]
