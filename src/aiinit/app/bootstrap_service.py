"""Application service that scaffolds new and existing projects."""

from __future__ import annotations

import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Callable, Iterable, Optional

from aiinit.adapters.fs_template_repo import FSTemplateRepository
from aiinit.app.preflight import is_directory_empty_or_missing
from aiinit.app.scaffold.aliases import AliasResult, link_aliases
from aiinit.app.scaffold.copier import CopyOutcome, copy_file
from aiinit.app.scaffold.directories import ensure_directories
from aiinit.app.scaffold.enumerate import list_template_files
from aiinit.domain.errors import InstallerError, InstallerErrorKind
from aiinit.domain.layout import CopyPlan, CopyPlanEntry, ScaffoldLayout
from aiinit.domain.naming import validate_project_name
from aiinit.domain.template import TemplateDescriptor
from aiinit.ports.alias_backend import AliasBackend
from aiinit.ports.template_repo import TemplateNotFoundError, TemplateRepository
from aiinit.resources import load_scaffold_layout

MODE_CREATE = "create"
MODE_ADD = "add"


@dataclass(frozen=True)
class ScaffoldOptions:
    skip_alias_linking: bool = False
    verbose: bool = False
    log: Optional[Callable[[str], None]] = None
    strict_copy: bool = False
    max_workers: int = 1
    cancel_event: Optional[threading.Event] = None
    template: str = "default"


@dataclass
class ScaffoldReport:
    destination: Path
    mode: str
    template: str
    copied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[dict[str, str]] = field(default_factory=list)
    created_directories: list[str] = field(default_factory=list)
    manifest_notes: list[dict[str, str]] = field(default_factory=list)
    aliases: list[AliasResult] = field(default_factory=list)

    @property
    def alias_warnings(self) -> list[AliasResult]:
        return [result for result in self.aliases if not result.ok]

    def to_dict(self) -> dict[str, Any]:
        return {
            "destination": str(self.destination),
            "mode": self.mode,
            "template": self.template,
            "copied": list(self.copied),
            "skipped": list(self.skipped),
            "failed": list(self.failed),
            "created_directories": list(self.created_directories),
            "manifest_notes": list(self.manifest_notes),
            "aliases": [result.to_dict() for result in self.aliases],
        }


class BootstrapService:
    def __init__(
        self,
        template_repo: TemplateRepository,
        layout: ScaffoldLayout | None = None,
        *,
        alias_backend: AliasBackend | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._templates = template_repo
        self._layout = layout or load_scaffold_layout()
        self._alias_backend = alias_backend
        self._cwd = cwd

    @property
    def layout(self) -> ScaffoldLayout:
        return self._layout

    def create_new(self, name: str, options: ScaffoldOptions | None = None) -> ScaffoldReport:
        options = options or ScaffoldOptions()
        trace = _tracer(options)
        validation = validate_project_name(name)
        if not validation.valid:
            raise InstallerError(
                InstallerErrorKind.INVALID_NAME,
                f"Invalid directory name: {name}",
                {"name": name, "errors": list(validation.errors)},
            )

        destination = self._working_directory() / name
        template = self._resolve_template(options.template)
        files = self._enumerate(template, trace)

        report = ScaffoldReport(destination=destination, mode=MODE_CREATE, template=template.name)
        self._prepare_new_destination(destination, name, report, trace)
        self._materialize(template, files, report, preserve_existing=False, options=options)
        self._finish(report, options)
        return report

    def add_to_existing(self, options: ScaffoldOptions | None = None) -> ScaffoldReport:
        options = options or ScaffoldOptions()
        trace = _tracer(options)
        destination = self._working_directory()
        if not destination.is_dir():
            raise InstallerError(
                InstallerErrorKind.INVALID_TARGET,
                f"{destination} is not a directory",
                {"path": destination},
            )
        if not os.access(destination, os.W_OK | os.X_OK):
            raise InstallerError(
                InstallerErrorKind.INVALID_TARGET,
                f"{destination} is not writable",
                {"path": destination},
            )

        template = self._resolve_template(options.template)
        files = self._enumerate(template, trace)

        report = ScaffoldReport(destination=destination, mode=MODE_ADD, template=template.name)
        self._materialize(template, files, report, preserve_existing=True, options=options)
        self._finish(report, options)
        return report

    def _working_directory(self) -> Path:
        base = self._cwd if self._cwd is not None else Path.cwd()
        return base.expanduser().absolute()

    def _resolve_template(self, name: str) -> TemplateDescriptor:
        try:
            return self._templates.ensure_available(name)
        except TemplateNotFoundError as exc:
            raise InstallerError(
                InstallerErrorKind.TEMPLATE_NOT_FOUND,
                f"Template '{name}' not found: {exc}",
                {"template": name, "cause": exc},
            ) from exc

    def _enumerate(self, template: TemplateDescriptor, trace: Callable[[str], None] | None) -> list[Path]:
        if trace:
            trace(f"Reading template files from: {template.root_dir}")
        try:
            files = list_template_files(template.root_dir, trace=trace)
        except OSError as exc:
            raise InstallerError(
                InstallerErrorKind.TEMPLATE_NOT_FOUND,
                f"Failed to read template files: {exc}",
                {"path": template.root_dir, "cause": exc},
            ) from exc
        if trace:
            trace(f"Found {len(files)} files to copy")
        return files

    def _prepare_new_destination(
        self,
        destination: Path,
        name: str,
        report: ScaffoldReport,
        trace: Callable[[str], None] | None,
    ) -> None:
        try:
            empty = is_directory_empty_or_missing(destination)
        except NotADirectoryError as exc:
            raise InstallerError(
                InstallerErrorKind.INVALID_TARGET,
                f"{name} already exists and is not a directory.",
                {"path": destination, "cause": exc},
            ) from exc
        except OSError as exc:
            raise InstallerError(
                InstallerErrorKind.DIR_CREATE_FAILED,
                f"Error inspecting project directory: {exc}",
                {"path": destination, "cause": exc},
            ) from exc
        if not empty:
            raise InstallerError(
                InstallerErrorKind.DIR_NOT_EMPTY,
                f"Directory {name} already exists and is not empty. "
                "Please choose another name or empty the directory.",
                {"path": destination},
            )
        if destination.is_dir():
            return
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise InstallerError(
                InstallerErrorKind.DIR_CREATE_FAILED,
                f"Error creating project directory: {exc}",
                {"path": destination, "cause": exc},
            ) from exc
        report.created_directories.append(".")
        if trace:
            trace(f"Created directory: {destination}")

    def _materialize(
        self,
        template: TemplateDescriptor,
        files: list[Path],
        report: ScaffoldReport,
        *,
        preserve_existing: bool,
        options: ScaffoldOptions,
    ) -> None:
        plan = CopyPlan.from_files(template.root_dir, report.destination, files)
        self._ensure(report, plan.parent_directories(), options)
        self._copy_plan(plan, report, preserve_existing=preserve_existing, options=options)

    def _ensure(
        self,
        report: ScaffoldReport,
        relative_dirs: Iterable[PurePosixPath | str],
        options: ScaffoldOptions,
    ) -> None:
        trace = _tracer(options)
        for created in ensure_directories(report.destination, relative_dirs):
            relative = created.relative_to(report.destination).as_posix()
            report.created_directories.append(relative)
            if trace:
                trace(f"Created directory: {relative}")

    def _copy_plan(
        self,
        plan: CopyPlan,
        report: ScaffoldReport,
        *,
        preserve_existing: bool,
        options: ScaffoldOptions,
    ) -> None:
        stop = threading.Event()
        manifests = set(self._layout.dependency_manifests)

        def _halted() -> bool:
            return stop.is_set() or (options.cancel_event is not None and options.cancel_event.is_set())

        def _run(entry: CopyPlanEntry) -> CopyOutcome | InstallerError | None:
            if _halted():
                return None
            try:
                return copy_file(
                    entry.source,
                    entry.destination,
                    preserve_existing,
                    is_manifest=entry.relative.as_posix() in manifests,
                )
            except InstallerError as exc:
                if options.strict_copy:
                    stop.set()
                return exc

        if options.max_workers > 1 and len(plan) > 1:
            with ThreadPoolExecutor(max_workers=options.max_workers) as executor:
                futures = [executor.submit(_run, entry) for entry in plan.entries]
                results = [future.result() for future in futures]
        else:
            results = [_run(entry) for entry in plan.entries]

        trace = _tracer(options)
        errors: list[InstallerError] = []
        not_issued = 0
        for entry, result in zip(plan.entries, results):
            relative = entry.relative.as_posix()
            if result is None:
                not_issued += 1
            elif isinstance(result, InstallerError):
                errors.append(result)
                report.failed.append({"path": relative, "error": result.message})
                if trace:
                    trace(f"Failed to copy {relative}: {result.message}")
            elif result.copied:
                report.copied.append(relative)
                if trace:
                    trace(f"Copied: {relative}")
            else:
                report.skipped.append(relative)
                if result.manifest_summary:
                    report.manifest_notes.append({"path": relative, "summary": result.manifest_summary})
                if trace:
                    trace(f"Skipping existing file: {relative}")

        if options.cancel_event is not None and options.cancel_event.is_set():
            raise InstallerError(
                InstallerErrorKind.CANCELLED,
                f"Scaffolding cancelled; {not_issued} file(s) were not copied",
                {"path": report.destination, "not_copied": not_issued, "report": report},
            )
        if errors and options.strict_copy:
            first = errors[0]
            first.details.setdefault("report", report)
            first.details.setdefault("not_copied", not_issued)
            raise first
        if errors:
            raise InstallerError(
                InstallerErrorKind.FILE_COPY_FAILED,
                f"Failed to copy {len(errors)} template file(s)",
                {"path": report.destination, "failures": list(report.failed), "report": report},
            )

    def _finish(self, report: ScaffoldReport, options: ScaffoldOptions) -> None:
        self._ensure(report, self._layout.scaffold_directories, options)
        if options.skip_alias_linking:
            return
        report.aliases = link_aliases(
            report.destination,
            self._layout.alias_specs(),
            backend=self._alias_backend,
            trace=_tracer(options),
        )


def _tracer(options: ScaffoldOptions) -> Callable[[str], None] | None:
    if options.verbose and options.log is not None:
        return options.log
    return None


def build_service(*, template_dir: Path | None = None, cwd: Path | None = None) -> BootstrapService:
    return BootstrapService(FSTemplateRepository(template_dir), load_scaffold_layout(), cwd=cwd)


def create_new(name: str, options: ScaffoldOptions | None = None, *, cwd: Path | None = None) -> Path:
    """Scaffold ``cwd/name`` and return its absolute path."""
    return build_service(cwd=cwd).create_new(name, options).destination


def add_to_existing(options: ScaffoldOptions | None = None, *, cwd: Path | None = None) -> Path:
    """Scaffold into ``cwd`` (default: the process working directory), preserving existing files."""
    return build_service(cwd=cwd).add_to_existing(options).destination
