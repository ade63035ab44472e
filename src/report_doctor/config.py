"""Load doctor configuration from .report-doctor.yaml.

Every key is optional. Example:

    report_dir: devplan
    extension_dir: vibereport-extension
    artifact: vibereport
    artifact_extension: vsix
"""

from __future__ import annotations

import json
import warnings
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from report_doctor.paths import config_path


@dataclass
class DoctorConfig:
    """Resolved doctor settings for one workspace."""

    repo_root: Path = field(default_factory=Path.cwd)
    report_dir: str = "devplan"
    evaluation_file: str = "Project_Evaluation_Report.md"
    improvement_file: str = "Project_Improvement_Exploration_Report.md"
    prompt_file: str = "Prompt.md"
    extension_dir: str = "vibereport-extension"
    package_manifest: str = "package.json"
    changelog: str = "CHANGELOG.md"
    readme: str = "README.md"
    artifact: str = "vibereport"
    artifact_extension: str = "vsix"
    sensitive_scan_excludes: list[str] = field(
        default_factory=lambda: [".git", "node_modules", "dist", "out", ".venv", "__pycache__"],
    )

    @property
    def extension_root(self) -> Path:
        return self.repo_root / self.extension_dir

    def report_paths(self) -> dict[str, Path]:
        """Map document type → report file path."""
        base = self.repo_root / self.report_dir
        return {
            "evaluation": base / self.evaluation_file,
            "improvement": base / self.improvement_file,
            "prompt": base / self.prompt_file,
        }

    def docs_paths(self) -> dict[str, Path]:
        return {
            "package_manifest": self.extension_root / self.package_manifest,
            "changelog": self.extension_root / self.changelog,
            "ext_readme": self.extension_root / self.readme,
            "root_readme": self.repo_root / self.readme,
        }


_CONFIG_KEYS = {f.name for f in fields(DoctorConfig)} - {"repo_root"}


def resolve_repo_root(workspace: Path, extension_dir: str) -> Path:
    """A workspace that is the extension directory itself maps to its parent."""
    workspace = workspace.resolve()
    if workspace.name == extension_dir:
        return workspace.parent
    return workspace


def load_config(workspace: Path | str) -> DoctorConfig:
    """Load the doctor config for a workspace.

    Args:
        workspace: Workspace directory (repo root or extension dir).

    Returns:
        DoctorConfig with defaults for every key not in the file.

    Raises:
        ValueError: If the config file is not a YAML mapping.
        yaml.YAMLError: If the YAML is malformed.
    """
    workspace = Path(workspace)
    path = config_path(workspace)

    data: dict = {}
    if path.is_file():
        with open(path) as f:
            loaded = yaml.safe_load(f)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{path} is not a YAML mapping")
        data = loaded

    unknown = sorted(set(data) - _CONFIG_KEYS)
    if unknown:
        warnings.warn(f"Ignoring unknown keys in {path}: {', '.join(unknown)}")

    settings = {k: v for k, v in data.items() if k in _CONFIG_KEYS}
    extension_dir = settings.get("extension_dir", DoctorConfig.extension_dir)
    return DoctorConfig(repo_root=resolve_repo_root(workspace, extension_dir), **settings)


def read_text_file(path: Path) -> tuple[str, bool]:
    """Read a text file as-is, returning ("", False) if it does not exist.

    Newlines are not translated, so CRLF files stay CRLF.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read(), True
    except FileNotFoundError:
        return "", False


def write_text_file(path: Path, content: str) -> None:
    """Write text without newline translation, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def read_package_version(manifest: Path) -> str:
    """Read the version string from a package manifest.

    Missing files, invalid JSON, or a non-string version all yield "".
    The empty version is reported by the docs checks, not raised.
    """
    content, exists = read_text_file(manifest)
    if not exists:
        return ""
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError:
        return ""
    version = parsed.get("version") if isinstance(parsed, dict) else None
    return version if isinstance(version, str) else ""
