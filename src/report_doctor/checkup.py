"""Workspace-level doctor runs: check, fix, and repair report files.

This is the only layer that touches the filesystem. The engine in
report_doctor.doctor works on strings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from report_doctor.config import (
    DoctorConfig,
    read_package_version,
    read_text_file,
    write_text_file,
)
from report_doctor.doctor.issues import Issue, RepairResult
from report_doctor.doctor.repair import repair_report_markdown
from report_doctor.doctor.sections import PROMPT, check_document_type
from report_doctor.doctor.sensitive import validate_sensitive_files
from report_doctor.doctor.validator import validate_report_markdown
from report_doctor.doctor.versions import fix_docs_version_sync, validate_docs_version_sync

_REPORT_LABELS = {
    "evaluation": "Evaluation Report",
    "improvement": "Improvement Report",
    "prompt": "Prompt.md",
}


@dataclass
class ReportCheck:
    """Validation outcome for one report file."""

    doc_type: str
    path: Path
    exists: bool
    issues: list[Issue] = field(default_factory=list)

    @property
    def label(self) -> str:
        return _REPORT_LABELS[self.doc_type]

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "filePath": str(self.path),
            "exists": self.exists,
            "issues": [i.to_dict() for i in self.issues],
        }


@dataclass
class CheckResult:
    """Result of a doctor check run."""

    missing_files: list[str] = field(default_factory=list)
    docs_issues: list[Issue] = field(default_factory=list)
    workspace_issues: list[Issue] = field(default_factory=list)
    reports: list[ReportCheck] = field(default_factory=list)

    @property
    def issues_found(self) -> int:
        return (
            len(self.missing_files)
            + len(self.docs_issues)
            + len(self.workspace_issues)
            + sum(len(r.issues) for r in self.reports)
        )

    @property
    def passed(self) -> bool:
        return self.issues_found == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict:
        return {
            "ok": self.passed,
            "exitCode": self.exit_code,
            "issuesFound": self.issues_found,
            "missingFiles": list(self.missing_files),
            "docsIssues": [i.to_dict() for i in self.docs_issues],
            "workspaceIssues": [i.to_dict() for i in self.workspace_issues],
            "reportIssues": [r.to_dict() for r in self.reports],
        }

    def summary(self) -> str:
        if self.passed:
            return "[doctor] OK: no issues found."

        lines = [f"[doctor] Issues found: {self.issues_found}"]
        if self.missing_files:
            lines.append(f"[doctor] Missing files: {len(self.missing_files)}")
            for p in self.missing_files:
                lines.append(f"- missing: {p}")
        if self.docs_issues:
            lines.append(f"[doctor] Docs issues: {len(self.docs_issues)}")
            for issue in self.docs_issues:
                lines.append(f"- [docs] {issue.code}: {issue.message}")
        for issue in self.workspace_issues:
            lines.append(f"- [workspace] {issue.code}: {issue.message}")
        for report in self.reports:
            if not report.issues:
                continue
            lines.append(f"[doctor] {report.label} issues: {len(report.issues)}")
            for issue in report.issues:
                lines.append(f"- [{report.label}] {issue.section_id} {issue.code}: {issue.message}")
        return "\n".join(lines)


def list_workspace_files(root: Path, excludes: list[str]) -> list[str]:
    """List files under root as forward-slash relative paths, skipping excluded dirs."""
    skip = set(excludes)
    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in skip)
        rel_dir = Path(dirpath).relative_to(root)
        for name in sorted(filenames):
            found.append((rel_dir / name).as_posix())
    return found


def run_check(config: DoctorConfig, scan_sensitive: bool = False) -> CheckResult:
    """Check docs version sync and all three reports.

    Missing files count as issues. Reports that do not exist are still
    validated as empty documents.
    """
    result = CheckResult()
    docs = config.docs_paths()

    package_version = read_package_version(docs["package_manifest"])
    changelog, changelog_exists = read_text_file(docs["changelog"])
    root_readme, root_exists = read_text_file(docs["root_readme"])
    ext_readme, ext_exists = read_text_file(docs["ext_readme"])

    for key, exists in [
        ("package_manifest", docs["package_manifest"].is_file()),
        ("changelog", changelog_exists),
        ("root_readme", root_exists),
        ("ext_readme", ext_exists),
    ]:
        if not exists:
            result.missing_files.append(str(docs[key]))

    result.docs_issues = validate_docs_version_sync(
        package_version,
        root_readme,
        changelog,
        ext_readme,
        artifact=config.artifact,
        extension=config.artifact_extension,
    )

    for doc_type, path in config.report_paths().items():
        content, exists = read_text_file(path)
        if not exists:
            result.missing_files.append(str(path))
        result.reports.append(ReportCheck(
            doc_type=doc_type,
            path=path,
            exists=exists,
            issues=validate_report_markdown(content, doc_type),
        ))

    if scan_sensitive:
        files = list_workspace_files(config.repo_root, config.sensitive_scan_excludes)
        result.workspace_issues = validate_sensitive_files(files)

    return result


def run_fix(config: DoctorConfig) -> tuple[list[str], CheckResult]:
    """Apply the safe docs fixes, then re-run the check.

    Only the version sync is fixed here. Reports are repaired with
    repair_report_file, which needs a template.

    Returns:
        (updated_files, check_result) tuple.
    """
    docs = config.docs_paths()
    package_version = read_package_version(docs["package_manifest"])
    changelog, changelog_exists = read_text_file(docs["changelog"])
    root_readme, root_exists = read_text_file(docs["root_readme"])
    ext_readme, ext_exists = read_text_file(docs["ext_readme"])

    updated: list[str] = []
    if package_version and changelog_exists and root_exists:
        fixed_root = fix_docs_version_sync(
            package_version, root_readme, changelog,
            artifact=config.artifact, extension=config.artifact_extension,
        )
        if fixed_root.changed_readme:
            write_text_file(docs["root_readme"], fixed_root.readme_content)
            updated.append(str(docs["root_readme"]))
        if fixed_root.changed_changelog:
            write_text_file(docs["changelog"], fixed_root.changelog_content)
            updated.append(str(docs["changelog"]))

        if ext_exists:
            fixed_ext = fix_docs_version_sync(
                package_version, ext_readme, fixed_root.changelog_content,
                artifact=config.artifact, extension=config.artifact_extension,
            )
            if fixed_ext.changed_readme:
                write_text_file(docs["ext_readme"], fixed_ext.readme_content)
                updated.append(str(docs["ext_readme"]))

    return updated, run_check(config)


def repair_report_file(
    config: DoctorConfig,
    doc_type: str,
    template_path: Path,
    dry_run: bool = False,
) -> tuple[str, RepairResult]:
    """Repair one report file from a template file.

    The file is written only when the repair changed something and left no
    residual issues.

    Returns:
        (action, result) where action is "unchanged", "repaired",
        "unresolved", or "would-repair" (dry run).

    Raises:
        ValueError: If doc_type is unknown or is the prompt type.
        FileNotFoundError: If the template does not exist.
    """
    check_document_type(doc_type)
    if doc_type == PROMPT:
        raise ValueError("Prompt.md is not auto-repaired; edit it by hand.")

    template, template_exists = read_text_file(template_path)
    if not template_exists:
        raise FileNotFoundError(f"Template not found: {template_path}")

    path = config.report_paths()[doc_type]
    content, _ = read_text_file(path)
    result = repair_report_markdown(content, template, doc_type)

    if not result.fixed:
        return "unresolved", result
    if not result.changed:
        return "unchanged", result
    if dry_run:
        return "would-repair", result

    write_text_file(path, result.content)
    return "repaired", result
