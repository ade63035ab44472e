"""Detect files that look like they hold secrets."""

from __future__ import annotations

import posixpath
import re

from report_doctor.doctor.issues import SENSITIVE_FILES_PRESENT, Issue

SECTION_ID = "workspace"
DEFAULT_LIMIT = 20

# Keyword checks only apply to data/config files, not source code
_KEYWORD_EXTENSIONS = {"", ".txt", ".json", ".yaml", ".yml", ".ini", ".conf"}
_SECRET_TOKENS = {
    "secret", "secrets", "credential", "credentials", "password", "passwd", "apikey",
}
_SSH_KEY_NAMES = {"id_rsa", "id_ed25519"}


def is_sensitive_path(relative_path: str) -> bool:
    """Whether a workspace-relative path looks like a secrets file.

    Matches .env files (not .env.example), .pem/.key files, SSH private
    keys, and data/config files named after tokens, secrets, credentials,
    passwords, or API keys.
    """
    normalized = relative_path.replace("\\", "/")
    base = posixpath.basename(normalized).lower()

    if base == ".env.example":
        return False
    if base.startswith(".env"):
        return True

    stem, ext = posixpath.splitext(base)
    if ext in (".pem", ".key"):
        return True
    if stem in _SSH_KEY_NAMES and ext != ".pub":
        return True

    if ext not in _KEYWORD_EXTENSIONS:
        return False

    tokens = [t for t in re.split(r"[^a-z0-9]+", stem) if t]
    if "token" in tokens or stem.endswith("token"):
        return True
    if _SECRET_TOKENS.intersection(tokens):
        return True
    return any(a == "api" and b == "key" for a, b in zip(tokens, tokens[1:]))


def find_sensitive_files(paths: list[str], limit: int = DEFAULT_LIMIT) -> list[str]:
    """Return up to limit sensitive paths, normalized to forward slashes."""
    found: list[str] = []
    for path in paths:
        normalized = path.replace("\\", "/")
        if not is_sensitive_path(normalized):
            continue
        found.append(normalized)
        if len(found) >= limit:
            break
    return found


def validate_sensitive_files(paths: list[str], limit: int = DEFAULT_LIMIT) -> list[Issue]:
    found = find_sensitive_files(paths, limit)
    if not found:
        return []
    return [Issue(
        SENSITIVE_FILES_PRESENT, SECTION_ID,
        f"Sensitive-looking files present ({len(found)}): {', '.join(found)}",
    )]
