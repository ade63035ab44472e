"""Tests for docs version sync validation and fixing."""

from report_doctor.doctor.versions import fix_docs_version_sync, validate_docs_version_sync

CHANGELOG = "# Changelog\n\n## [1.2.0] - 2026-01-01\n- stuff\n\n## [1.1.0]\n- older\n"
README = "# Vibe Report\n\nVersion 1.2.0\n\nInstall `vibereport-1.2.0.vsix`.\n"
EXT_README = (
    "# Vibe Report\n\n"
    "![version](https://img.shields.io/badge/version-1.2.0-brightgreen)\n\n"
    "Download https://github.com/o/r/releases/download/v1.2.0/vibereport-1.2.0.vsix\n"
)


def messages(issues):
    return [i.message for i in issues]


class TestValidateDocsVersionSync:
    def test_empty_version_stops(self):
        issues = validate_docs_version_sync("", README, CHANGELOG, EXT_README)
        assert len(issues) == 1
        assert issues[0].code == "DOCS_VERSION_MISMATCH"
        assert issues[0].section_id == "docs"

    def test_in_sync(self):
        assert validate_docs_version_sync("1.2.0", README, CHANGELOG, EXT_README) == []

    def test_reports_at_least_two_mismatches(self):
        issues = validate_docs_version_sync("1.2.3", README, CHANGELOG)
        assert len(issues) >= 2
        assert any("CHANGELOG.md top version (1.2.0)" in m for m in messages(issues))
        assert any("VSIX example version drift: found 1.2.0" in m for m in messages(issues))

    def test_missing_changelog_heading(self):
        issues = validate_docs_version_sync("1.2.0", README, "# Changelog\n")
        assert messages(issues) == [
            'CHANGELOG.md is missing a top version heading like "## [x.y.z]".',
        ]

    def test_changelog_heading_without_space(self):
        assert validate_docs_version_sync("1.2.0", README, "##[1.2.0]\n") == []

    def test_readme_without_version(self):
        issues = validate_docs_version_sync("1.2.0", "# Readme\n", CHANGELOG)
        assert messages(issues) == ['README.md is missing a version string like "x.y.z".']

    def test_distinct_artifact_versions(self):
        readme = "1.2.0 vibereport-1.0.0.vsix vibereport-1.0.0.vsix vibereport-1.1.0.vsix"
        issues = validate_docs_version_sync("1.2.0", readme, CHANGELOG)
        assert messages(issues) == [
            "README.md VSIX example version drift: found 1.0.0, 1.1.0 (expected 1.2.0).",
        ]

    def test_release_url_drift(self):
        ext = EXT_README.replace("releases/download/v1.2.0", "releases/download/v1.1.9")
        issues = validate_docs_version_sync("1.2.0", README, CHANGELOG, ext)
        assert len(issues) == 1
        assert "release URL drift: v1.1.9/vibereport-1.2.0.vsix" in issues[0].message

    def test_release_url_more_count(self):
        url = "releases/download/v1.0.0/vibereport-1.0.0.vsix"
        readme = f"1.2.0\n{url}\n{url}\n{url}\n"
        issues = validate_docs_version_sync("1.2.0", readme, CHANGELOG)
        url_issue = [m for m in messages(issues) if "release URL drift" in m]
        assert url_issue and url_issue[0].endswith("(+2 more).")

    def test_badge_only_checked_in_ext_readme(self):
        badge = "1.2.0 img.shields.io/badge/version-1.0.0-brightgreen"
        assert validate_docs_version_sync("1.2.0", badge, CHANGELOG) == []
        issues = validate_docs_version_sync("1.2.0", README, CHANGELOG, badge)
        assert any("version badge (1.0.0)" in m for m in messages(issues))

    def test_custom_artifact(self):
        readme = "1.2.0 tool-1.1.0.whl"
        issues = validate_docs_version_sync(
            "1.2.0", readme, CHANGELOG, artifact="tool", extension="whl",
        )
        assert messages(issues) == [
            "README.md WHL example version drift: found 1.1.0 (expected 1.2.0).",
        ]


class TestFixDocsVersionSync:
    def test_round_trip(self):
        assert validate_docs_version_sync("1.2.3", README, CHANGELOG)
        fixed = fix_docs_version_sync("1.2.3", README, CHANGELOG)
        assert fixed.changed == {"readme": True, "changelog": True}
        assert validate_docs_version_sync("1.2.3", fixed.readme_content, fixed.changelog_content) == []

    def test_only_top_changelog_heading_rewritten(self):
        fixed = fix_docs_version_sync("1.2.3", README, CHANGELOG)
        assert "## [1.2.3] - 2026-01-01" in fixed.changelog_content
        assert "## [1.1.0]" in fixed.changelog_content

    def test_ext_readme_round_trip(self):
        ext = EXT_README.replace("1.2.0", "1.0.0")
        fixed = fix_docs_version_sync("1.2.0", ext, CHANGELOG)
        assert fixed.changed_readme
        assert not fixed.changed_changelog
        assert "badge/version-1.2.0-brightgreen" in fixed.readme_content
        assert "releases/download/v1.2.0/vibereport-1.2.0.vsix" in fixed.readme_content
        assert validate_docs_version_sync("1.2.0", README, CHANGELOG, fixed.readme_content) == []

    def test_no_change_when_in_sync(self):
        fixed = fix_docs_version_sync("1.2.0", README, CHANGELOG)
        assert fixed.readme_content == README
        assert fixed.changelog_content == CHANGELOG
        assert fixed.changed == {"readme": False, "changelog": False}

    def test_newline_style_preserved_independently(self):
        readme_crlf = README.replace("\n", "\r\n")
        fixed = fix_docs_version_sync("1.2.3", readme_crlf, CHANGELOG)
        assert "\r\n" in fixed.readme_content
        assert fixed.readme_content.count("\r\n") == fixed.readme_content.count("\n")
        assert "\r\n" not in fixed.changelog_content

    def test_crlf_unchanged_reports_no_change(self):
        fixed = fix_docs_version_sync(
            "1.2.0", README.replace("\n", "\r\n"), CHANGELOG.replace("\n", "\r\n"),
        )
        assert fixed.changed == {"readme": False, "changelog": False}
