"""Doctor CLI commands."""

import argparse
import json
import sys
from pathlib import Path

from report_doctor.config import load_config, read_text_file
from report_doctor.paths import workspace_root


def _load(args: argparse.Namespace):
    return load_config(workspace_root(args.workspace))


def cmd_doctor_check(args: argparse.Namespace) -> int:
    from report_doctor.checkup import run_check

    result = run_check(_load(args), scan_sensitive=args.scan_sensitive)
    if args.json:
        print(json.dumps(result.to_dict()))
    else:
        print(result.summary())
    return result.exit_code


def cmd_doctor_fix(args: argparse.Namespace) -> int:
    from report_doctor.checkup import run_fix

    updated, result = run_fix(_load(args))
    if args.json:
        print(json.dumps(result.to_dict()))
        return result.exit_code

    if updated:
        print(f"[doctor] Updated {len(updated)} file(s): {', '.join(updated)}")
    else:
        print("[doctor] No safe fixes applied.")
    print(result.summary())
    return result.exit_code


def cmd_doctor_repair(args: argparse.Namespace) -> int:
    from report_doctor.checkup import repair_report_file

    config = _load(args)
    action, result = repair_report_file(
        config, args.type, Path(args.template), dry_run=args.dry_run,
    )

    path = config.report_paths()[args.type]
    if args.json:
        print(json.dumps({"path": str(path), "action": action, **result.to_dict()}))
        return 0 if result.fixed else 1

    print(f"[doctor] {path}: {action}")
    for issue in result.issues_before:
        print(f"  before {issue}")
    for issue in result.issues_after:
        print(f"  after  {issue}")

    if args.dry_run and action == "would-repair":
        print("\n[DRY RUN] No files were modified.")
    return 0 if result.fixed else 1


def cmd_doctor_validate(args: argparse.Namespace) -> int:
    from report_doctor.doctor.validator import validate_report_markdown

    content, exists = read_text_file(Path(args.file))
    if not exists:
        print(f"ERROR: File not found: {args.file}", file=sys.stderr)
        return 2

    issues = validate_report_markdown(content, args.type)
    if args.json:
        print(json.dumps([i.to_dict() for i in issues]))
    elif issues:
        print(f"FAIL: {args.file}")
        for issue in issues:
            print(f"  {issue}")
    else:
        print(f"PASS: {args.file}")
    return 0 if not issues else 1
