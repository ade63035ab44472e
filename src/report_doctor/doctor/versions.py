"""Keep release documentation in sync with the package manifest version.

Checks and rewrites, with literal pattern substitution only:
- the top "## [x.y.z]" heading of CHANGELOG.md
- the first bare x.y.z version token of each README
- packaged artifact names, e.g. vibereport-1.2.3.vsix
- release download URLs, e.g. releases/download/v1.2.3/vibereport-1.2.3.vsix
- the shields.io version badge (extension README only)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from report_doctor.doctor.issues import DOCS_VERSION_MISMATCH, Issue
from report_doctor.doctor.lines import detect_newline, normalize_newlines, restore_newlines

SECTION_ID = "docs"

DEFAULT_ARTIFACT = "vibereport"
DEFAULT_EXTENSION = "vsix"

README_LABEL = "README.md"
EXT_README_LABEL = "vibereport-extension/README.md"

_VERSION = r"\d+\.\d+\.\d+"

CHANGELOG_HEADING_RE = re.compile(rf"^##\s*\[({_VERSION})\]", re.MULTILINE)
VERSION_TOKEN_RE = re.compile(rf"({_VERSION})")
BADGE_RE = re.compile(rf"(img\.shields\.io/badge/version-)({_VERSION})(-brightgreen)", re.IGNORECASE)


def artifact_pattern(artifact: str = DEFAULT_ARTIFACT, extension: str = DEFAULT_EXTENSION) -> re.Pattern:
    return re.compile(rf"{re.escape(artifact)}-({_VERSION})\.{re.escape(extension)}")


def release_url_pattern(artifact: str = DEFAULT_ARTIFACT, extension: str = DEFAULT_EXTENSION) -> re.Pattern:
    return re.compile(
        rf"releases/download/v({_VERSION})/{re.escape(artifact)}-({_VERSION})\.{re.escape(extension)}"
    )


@dataclass
class VersionFixResult:
    """Result of fix_docs_version_sync."""

    readme_content: str
    changelog_content: str
    changed_readme: bool = False
    changed_changelog: bool = False

    @property
    def changed(self) -> dict[str, bool]:
        return {"readme": self.changed_readme, "changelog": self.changed_changelog}


def _issue(message: str) -> Issue:
    return Issue(DOCS_VERSION_MISMATCH, SECTION_ID, message)


def validate_docs_version_sync(
    package_version: str,
    readme_content: str,
    changelog_content: str,
    ext_readme_content: str | None = None,
    *,
    artifact: str = DEFAULT_ARTIFACT,
    extension: str = DEFAULT_EXTENSION,
) -> list[Issue]:
    """Compare version mentions in the docs against the package version.

    Args:
        package_version: Version from the package manifest ("" if unknown).
        readme_content: Root README text.
        changelog_content: CHANGELOG text.
        ext_readme_content: Extension README text; None skips it.
        artifact: Packaged artifact base name.
        extension: Packaged artifact file extension.

    Returns:
        List of DOCS_VERSION_MISMATCH issues.
    """
    if not package_version:
        return [_issue("package.json is missing a valid version string.")]

    issues: list[Issue] = []

    heading = CHANGELOG_HEADING_RE.search(changelog_content)
    if heading is None:
        issues.append(_issue('CHANGELOG.md is missing a top version heading like "## [x.y.z]".'))
    elif heading.group(1) != package_version:
        issues.append(_issue(
            f"CHANGELOG.md top version ({heading.group(1)}) does not match "
            f"package.json ({package_version})."
        ))

    issues.extend(_validate_readme(
        README_LABEL, readme_content, package_version,
        check_badge=False, artifact=artifact, extension=extension,
    ))
    if ext_readme_content is not None:
        issues.extend(_validate_readme(
            EXT_README_LABEL, ext_readme_content, package_version,
            check_badge=True, artifact=artifact, extension=extension,
        ))

    return issues


def _validate_readme(
    label: str,
    content: str,
    package_version: str,
    check_badge: bool,
    artifact: str,
    extension: str,
) -> list[Issue]:
    issues: list[Issue] = []

    token = VERSION_TOKEN_RE.search(content)
    if token is None:
        issues.append(_issue(f'{label} is missing a version string like "x.y.z".'))
    elif token.group(1) != package_version:
        issues.append(_issue(
            f"{label} version ({token.group(1)}) does not match package.json ({package_version})."
        ))

    drift: list[str] = []
    for match in artifact_pattern(artifact, extension).finditer(content):
        version = match.group(1)
        if version != package_version and version not in drift:
            drift.append(version)
    if drift:
        issues.append(_issue(
            f"{label} {extension.upper()} example version drift: found "
            f"{', '.join(drift)} (expected {package_version})."
        ))

    mismatches = []
    for match in release_url_pattern(artifact, extension).finditer(content):
        url_version, file_version = match.group(1), match.group(2)
        if url_version != package_version or file_version != package_version:
            mismatches.append(
                f"v{url_version}/{artifact}-{file_version}.{extension} "
                f"(expected v{package_version}/{artifact}-{package_version}.{extension})"
            )
    if mismatches:
        more = f" (+{len(mismatches) - 1} more)" if len(mismatches) > 1 else ""
        issues.append(_issue(f"{label} release URL drift: {mismatches[0]}{more}."))

    if check_badge:
        badge = BADGE_RE.search(content)
        if badge and badge.group(2) != package_version:
            issues.append(_issue(
                f"{label} version badge ({badge.group(2)}) does not match "
                f"package.json ({package_version})."
            ))

    return issues


def fix_docs_version_sync(
    package_version: str,
    readme_content: str,
    changelog_content: str,
    *,
    artifact: str = DEFAULT_ARTIFACT,
    extension: str = DEFAULT_EXTENSION,
) -> VersionFixResult:
    """Rewrite drifting version mentions to package_version.

    Each input keeps its own newline style (CRLF or LF). The changed flags
    are True only when the text actually differs afterwards.
    """
    readme_newline = detect_newline(readme_content)
    changelog_newline = detect_newline(changelog_content)

    changelog = CHANGELOG_HEADING_RE.sub(
        f"## [{package_version}]", normalize_newlines(changelog_content), count=1,
    )

    readme = VERSION_TOKEN_RE.sub(package_version, normalize_newlines(readme_content), count=1)
    readme = artifact_pattern(artifact, extension).sub(
        f"{artifact}-{package_version}.{extension}", readme,
    )
    readme = release_url_pattern(artifact, extension).sub(
        f"releases/download/v{package_version}/{artifact}-{package_version}.{extension}", readme,
    )
    readme = BADGE_RE.sub(rf"\g<1>{package_version}\g<3>", readme)

    final_readme = restore_newlines(readme, readme_newline)
    final_changelog = restore_newlines(changelog, changelog_newline)

    return VersionFixResult(
        readme_content=final_readme,
        changelog_content=final_changelog,
        changed_readme=readme != normalize_newlines(readme_content),
        changed_changelog=changelog != normalize_newlines(changelog_content),
    )
