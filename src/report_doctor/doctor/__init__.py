"""Report doctor: validation and repair of managed report documents.

All functions here are pure: they take and return strings and plain
dataclasses and never touch the filesystem.
"""

from report_doctor.doctor.issues import Issue, RepairResult
from report_doctor.doctor.repair import repair_report_markdown
from report_doctor.doctor.sections import DOCUMENT_TYPES, get_managed_sections
from report_doctor.doctor.validator import validate_report_markdown
from report_doctor.doctor.versions import fix_docs_version_sync, validate_docs_version_sync

__all__ = [
    "DOCUMENT_TYPES",
    "Issue",
    "RepairResult",
    "fix_docs_version_sync",
    "get_managed_sections",
    "repair_report_markdown",
    "validate_docs_version_sync",
    "validate_report_markdown",
]
