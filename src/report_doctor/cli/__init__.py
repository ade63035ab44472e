"""Unified CLI for the report doctor.

Usage:
    report-doctor check [--workspace <path>] [--json] [--scan-sensitive]
    report-doctor fix [--workspace <path>] [--json]
    report-doctor repair {evaluation|improvement} --template <file> [--dry-run] [--json]
    report-doctor validate <file> --type {evaluation|improvement|prompt} [--json]
"""

import argparse
import sys

from report_doctor import __version__
from report_doctor.cli.doctor import (
    cmd_doctor_check,
    cmd_doctor_fix,
    cmd_doctor_repair,
    cmd_doctor_validate,
)
from report_doctor.doctor.sections import DOCUMENT_TYPES, EVALUATION, IMPROVEMENT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-doctor",
        description="Validate and repair managed report documents",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    # check
    chk = sub.add_parser("check", help="Check docs version sync and reports")
    chk.add_argument(
        "--workspace", default=None,
        help="Workspace root directory",
    )
    chk.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )
    chk.add_argument(
        "--scan-sensitive", action="store_true",
        help="Also flag files that look like secrets",
    )

    # fix
    fix = sub.add_parser("fix", help="Apply safe docs version fixes, then check")
    fix.add_argument(
        "--workspace", default=None,
        help="Workspace root directory",
    )
    fix.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    # repair
    rep = sub.add_parser("repair", help="Repair a report's managed sections from a template")
    rep.add_argument("type", choices=[EVALUATION, IMPROVEMENT])
    rep.add_argument("--template", required=True, help="Path to the template report")
    rep.add_argument(
        "--workspace", default=None,
        help="Workspace root directory",
    )
    rep.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    rep.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    # validate
    val = sub.add_parser("validate", help="Validate a single document")
    val.add_argument("file", help="Path to the markdown document")
    val.add_argument("--type", required=True, choices=list(DOCUMENT_TYPES))
    val.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    dispatch = {
        "check": cmd_doctor_check,
        "fix": cmd_doctor_fix,
        "repair": cmd_doctor_repair,
        "validate": cmd_doctor_validate,
    }

    try:
        return dispatch[args.command](args)
    except Exception as e:
        print(f"[doctor] Unexpected error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
