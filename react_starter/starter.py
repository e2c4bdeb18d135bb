"""
ReactStarter — the end-to-end scaffolding pipeline.
===================================================

run() performs, in order:
  1. <pm> create vite <name> --template react    (in base_dir)
  2. <pm> install                                 (in project_dir)
  3. <pm> add -D tailwindcss @tailwindcss/vite    (in project_dir)
  4. <pm> add axios react-router-dom              (in project_dir)
  5. Register the Tailwind plugin in vite.config.js / vite.config.ts
  6. Replace src/index.css with the Tailwind v4 stylesheet (if present)
  7. Write routes, layout, pages and App.jsx
  8. Replace src/main.jsx with the BrowserRouter bootstrap (if present)

project_dir is passed explicitly to every step; the process working
directory is never changed. A failing command raises
subprocess.CalledProcessError and aborts the run with no cleanup; a create
step that exits cleanly without producing project_dir (e.g. the prompt was
cancelled) raises ProjectNotCreatedError. Missing
optional files are recorded as warnings and the step is skipped.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .dry_run import CommandPlan, StarterPlan
from .models import TAILWIND_PLUGIN, PluginSpec, StarterOptions, StarterReport
from .package_manager import PackageManager
from .progress import ProgressRenderer
from .scaffold import ScaffoldEngine, entry, react_router, tailwind
from .vite_config import CONFIG_CANDIDATES, update_vite_config

logger = logging.getLogger(__name__)


class ProjectNotCreatedError(RuntimeError):
    """`create vite` finished but the project directory does not exist."""

    def __init__(self, project_dir: Path) -> None:
        super().__init__(f"Project directory {project_dir} was not created")
        self.project_dir = project_dir


class ReactStarter:
    """
    Creates a React + Vite + Tailwind + Router project.

    package_manager: injected runner; built from options.package_manager
                     when omitted.
    renderer:        terminal output; quiet by default so library use is silent.
    """

    def __init__(
        self,
        package_manager: Optional[PackageManager] = None,
        renderer: Optional[ProgressRenderer] = None,
        plugin: PluginSpec = TAILWIND_PLUGIN,
    ) -> None:
        self.package_manager = package_manager
        self.renderer = renderer or ProgressRenderer(quiet=True)
        self.plugin = plugin

    def _manager_for(self, options: StarterOptions) -> PackageManager:
        if self.package_manager is not None:
            return self.package_manager
        return PackageManager(options.package_manager)

    # ── Dry run ──────────────────────────────────────────────────────────────

    def plan(self, options: StarterOptions) -> StarterPlan:
        """Describe the run without executing or writing anything."""
        pm = self._manager_for(options)
        base_dir = Path(options.base_dir)
        project_dir = options.project_dir
        commands = [
            CommandPlan(argv=cmd, cwd=base_dir if where == "base" else project_dir)
            for cmd, where in pm.setup_commands(options.project_name)
        ]
        return StarterPlan(
            project_name=options.project_name,
            project_dir=project_dir,
            package_manager=pm.name,
            commands=commands,
            config_files=list(CONFIG_CANDIDATES),
            plugin=self.plugin.invocation,
            replaced_files=[*tailwind.FILES, *entry.FILES],
            created_files=list(react_router.FILES),
        )

    # ── Real run ─────────────────────────────────────────────────────────────

    def run(self, options: StarterOptions) -> StarterReport:
        pm = self._manager_for(options)
        base_dir = Path(options.base_dir)
        project_dir = options.project_dir
        report = StarterReport(
            project_name=options.project_name,
            project_dir=project_dir,
            package_manager=pm.name,
        )

        self.renderer.started(options)
        logger.info("Creating %s in %s with %s", options.project_name, base_dir, pm.name)

        for cmd, where in pm.setup_commands(options.project_name):
            self.renderer.command(cmd)
            pm.run(cmd, cwd=base_dir if where == "base" else project_dir)
            report.commands.append(cmd)
            if where == "base" and not project_dir.is_dir():
                raise ProjectNotCreatedError(project_dir)

        self._patch_vite_config(project_dir, report)

        engine = ScaffoldEngine(project_dir)
        self._replace(engine, tailwind.FILES, report)
        for rel_path in engine.write_files(react_router.FILES):
            report.files_written.append(rel_path)
            self.renderer.file_written(rel_path)
        self._replace(engine, entry.FILES, report)

        self.renderer.finished(report)
        return report

    def _patch_vite_config(self, project_dir: Path, report: StarterReport) -> None:
        outcome = update_vite_config(project_dir, self.plugin)
        if outcome is None:
            self._warn(
                report,
                f"No {'/'.join(CONFIG_CANDIDATES)} found; "
                f"skipping {self.plugin.module} plugin setup.",
            )
            return

        path, result = outcome
        if not result.plugins_found:
            self._warn(
                report,
                f"Could not find plugins array in {path.name} "
                f"to add {self.plugin.invocation}.",
            )
            return

        report.vite_config = path
        if result.changed:
            self.renderer.file_written(path.name, replaced=True)

    def _replace(
        self, engine: ScaffoldEngine, files: dict[str, str], report: StarterReport
    ) -> None:
        written, skipped = engine.replace_existing(files)
        for rel_path in written:
            report.files_written.append(rel_path)
            self.renderer.file_written(rel_path, replaced=True)
        for rel_path in skipped:
            report.files_skipped.append(rel_path)
            self._warn(report, f"{rel_path} not found; skipped.")

    def _warn(self, report: StarterReport, message: str) -> None:
        report.warnings.append(message)
        self.renderer.warning(message)
