"""Line-oriented text helpers shared by the validators and the repair engine."""

from __future__ import annotations


def detect_newline(text: str) -> str:
    """Return the newline style of a text: CRLF if any CRLF is present."""
    return "\r\n" if "\r\n" in text else "\n"


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n")


def restore_newlines(text: str, newline: str) -> str:
    """Re-encode LF-normalized text with the given newline style."""
    if newline == "\n":
        return text
    return text.replace("\n", newline)


def split_table_row(line: str) -> list[str] | None:
    """Split a markdown pipe-table row into trimmed cells.

    A line is a table row when, after trimming, it starts with "|" and holds
    at least one more "|". One leading and one trailing pipe are stripped
    before splitting.

    Returns:
        List of cells, or None if the line is not a table row.
    """
    trimmed = line.strip()
    if not trimmed.startswith("|") or "|" not in trimmed[1:]:
        return None

    inner = trimmed[1:]
    if inner.endswith("|"):
        inner = inner[:-1]
    return [cell.strip() for cell in inner.split("|")]


def find_marker_range(
    lines: list[str],
    start_marker: str,
    end_marker: str,
) -> tuple[int, int] | None:
    """Find the first start-marker line and the first end-marker line after it.

    Returns:
        (start_index, end_index) tuple, or None when either marker is
        missing or no end marker follows the start marker on a later line.
    """
    start = -1
    for i, line in enumerate(lines):
        if start == -1 and start_marker in line:
            start = i
            # Both markers on one line leave no span between them
            if end_marker in line:
                return None
            continue
        if start != -1 and end_marker in line:
            return start, i
    return None


def find_lines_containing(lines: list[str], needle: str) -> list[int]:
    return [i for i, line in enumerate(lines) if needle in line]
