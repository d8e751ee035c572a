#!/usr/bin/env python3
"""Entry point for the ai-init CLI."""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
import traceback
from pathlib import Path
from textwrap import dedent
from typing import Any

from aiinit import __version__
from aiinit.adapters.fs_template_repo import FSTemplateRepository
from aiinit.app.bootstrap_service import BootstrapService, ScaffoldOptions, ScaffoldReport
from aiinit.app.preflight import validate_existing_project
from aiinit.domain.errors import InstallerError, InstallerErrorKind
from aiinit.ports.alias_backend import AliasStatus
from aiinit.resources import load_scaffold_layout
from aiinit.settings import SETTINGS
from aiinit.utils.telemetry import record_run

HELP_OVERVIEW = dedent(
    """
    Initialize AI project rules, memory bank and ADR scaffolding.

    Examples:
      ai-init my-project   Create a new directory with scaffolding
      ai-init --add        Add scaffolding to the current directory
    """
)


def _use_color(stream: Any) -> bool:
    return (
        hasattr(stream, "isatty")
        and stream.isatty()
        and os.environ.get("NO_COLOR") is None
        and os.environ.get("TERM") != "dumb"
    )


def _paint(text: str, code: str, stream: Any = None) -> str:
    stream = stream if stream is not None else sys.stdout
    if not _use_color(stream):
        return text
    return f"\033[{code}m{text}\033[0m"


def _red(text: str) -> str:
    return _paint(text, "31", sys.stderr)


def _yellow(text: str, stream: Any = None) -> str:
    return _paint(text, "33", stream)


def _green(text: str) -> str:
    return _paint(text, "32")


def _cyan(text: str) -> str:
    return _paint(text, "36")


def _build_service() -> BootstrapService:
    return BootstrapService(FSTemplateRepository(SETTINGS.template_dir), load_scaffold_layout())


def _stderr_log(message: str) -> None:
    print(f"  {message}", file=sys.stderr)


def _options_from_args(args: argparse.Namespace) -> ScaffoldOptions:
    return ScaffoldOptions(
        skip_alias_linking=args.skip_symlink,
        verbose=args.verbose,
        log=_stderr_log if args.verbose else None,
        strict_copy=args.strict,
        max_workers=max(1, args.jobs),
        template=args.template or SETTINGS.default_template,
    )


def _prompt(question: str) -> str:
    try:
        return input(question)
    except EOFError:
        return ""


def _print_report(report: ScaffoldReport, *, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"status": "ok", "report": report.to_dict()}, indent=2, ensure_ascii=False))
        return
    verb = "created" if report.mode == "create" else "added"
    print(f"{_green('✓')} Successfully {verb} AI Project Starter scaffolding in {report.destination}")
    print(f"  files copied: {len(report.copied)}; existing files preserved: {len(report.skipped)}")
    for note in report.manifest_notes:
        print(_yellow("Note:") + f" {note['path']} was not overwritten.")
        for line in note["summary"].splitlines():
            print(f"  {line}")
    fallbacks = [result.alias for result in report.aliases if result.status is AliasStatus.COPIED]
    if fallbacks:
        print(f"  {', '.join(fallbacks)} created as plain copies (symlinks unavailable)")
    for result in report.alias_warnings:
        print(
            _yellow("Warning:", sys.stderr)
            + f" failed to create {result.alias} ({result.detail}). You can create it manually later.",
            file=sys.stderr,
        )


def _handle_error(error: BaseException, *, verbose: bool, as_json: bool) -> int:
    if isinstance(error, InstallerError):
        if as_json:
            print(json.dumps({"status": "error", "error": error.to_dict()}, indent=2, ensure_ascii=False))
        print(f"{_red('Error:')} {error.message}", file=sys.stderr)
        if error.kind is InstallerErrorKind.INVALID_NAME and error.errors:
            print(_yellow("Details:", sys.stderr), file=sys.stderr)
            for item in error.errors:
                print(f"  - {item}", file=sys.stderr)
        for failure in error.details.get("failures", []):
            print(f"  - {failure['path']}: {failure['error']}", file=sys.stderr)
        if verbose and error.__cause__ is not None:
            traceback.print_exception(error.__cause__, file=sys.stderr)
        return 1
    print(f"{_red('Unexpected error:')} {error}", file=sys.stderr)
    if verbose:
        traceback.print_exception(error, file=sys.stderr)
    return 1


def _record(event: str, started: float, *, status: str, payload: dict[str, Any]) -> None:
    try:
        record_run(
            SETTINGS,
            event,
            status=status,
            duration_ms=(time.monotonic() - started) * 1000,
            payload=payload,
        )
    except OSError as exc:
        print(f"ai-init: telemetry write failed: {exc}", file=sys.stderr)


def _run_add(args: argparse.Namespace) -> int:
    if not args.json:
        print(_cyan("Adding AI Project Starter scaffolding to current directory..."))
    service = _build_service()
    if not args.json:
        for warning in validate_existing_project(Path.cwd(), service.layout):
            print(_yellow("Note:") + f" {warning}")
    started = time.monotonic()
    try:
        report = service.add_to_existing(_options_from_args(args))
    except Exception as exc:  # noqa: BLE001
        _record("scaffold.add", started, status="error", payload={"kind": _kind(exc)})
        return _handle_error(exc, verbose=args.verbose, as_json=args.json)
    _record("scaffold.add", started, status="ok", payload=_counts(report))
    _print_report(report, as_json=args.json)
    return 0


def _run_create(args: argparse.Namespace, name: str) -> int:
    if not args.json:
        print(_cyan(f"Creating a new directory with AI Project Starter scaffolding: {name}"))
    service = _build_service()
    started = time.monotonic()
    try:
        report = service.create_new(name, _options_from_args(args))
    except Exception as exc:  # noqa: BLE001
        _record("scaffold.create", started, status="error", payload={"kind": _kind(exc)})
        return _handle_error(exc, verbose=args.verbose, as_json=args.json)
    _record("scaffold.create", started, status="ok", payload=_counts(report))
    _print_report(report, as_json=args.json)
    return 0


def _kind(exc: BaseException) -> str:
    if isinstance(exc, InstallerError):
        return exc.kind.value
    return type(exc).__name__


def _counts(report: ScaffoldReport) -> dict[str, Any]:
    return {
        "template": report.template,
        "copied": len(report.copied),
        "skipped": len(report.skipped),
        "aliases": {result.alias: result.status.value for result in report.aliases},
    }


def _init_cmd(args: argparse.Namespace) -> int:
    if args.add:
        return _run_add(args)
    name = args.project_name
    if not name:
        name = _prompt("Name of directory to create (leave empty to add to current directory): ").strip()
        if not name:
            return _run_add(args)
    return _run_create(args, name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-init",
        description=HELP_OVERVIEW,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", "-v", action="version", version=f"ai-init v{__version__}")
    parser.add_argument("project_name", nargs="?", help="Name of the directory to create (optional)")
    parser.add_argument("--add", action="store_true", help="Add scaffolding to the current directory")
    parser.add_argument("--verbose", action="store_true", help="Show detailed logs")
    parser.add_argument("--skip-symlink", action="store_true", help="Skip creating rule symlinks")
    parser.add_argument("--template", default=None, help="Bundled template name (default: default)")
    parser.add_argument("--strict", action="store_true", help="Stop at the first file that fails to copy")
    parser.add_argument("--jobs", type=int, default=1, help="Copy files with N parallel workers")
    parser.add_argument("--json", action="store_true", help="Emit a machine-readable report")
    parser.set_defaults(func=_init_cmd)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nai-init: interrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
