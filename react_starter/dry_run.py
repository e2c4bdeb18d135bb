"""
Dry-run / Execution Plan
========================
Shows what a run *would* do: the package-manager commands with their working
directories, and the files that would be patched, replaced or created.
Nothing is executed and nothing is written.

CLI usage:
    create-react-fast demo --dry-run

Programmatic usage:
    from react_starter import ReactStarter, StarterOptions
    plan = ReactStarter().plan(StarterOptions(project_name="demo"))
    print(plan.render())
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .package_manager import format_command


@dataclass
class CommandPlan:
    """A single package-manager invocation."""
    argv: list[str]
    cwd: Path


@dataclass
class StarterPlan:
    """
    Complete dry-run plan for a project.

    Attributes
    ----------
    project_name:    Name passed to `create vite`.
    project_dir:     Directory the skeleton will be created in.
    package_manager: Executable name (npm, pnpm, yarn, bun).
    commands:        Commands in execution order.
    config_files:    Candidate Vite config names, first existing one is patched.
    plugin:          Invocation that will be registered in the plugins array.
    replaced_files:  Relative paths overwritten only if the skeleton has them.
    created_files:   Relative paths always written.
    """
    project_name: str
    project_dir: Path
    package_manager: str
    commands: list[CommandPlan] = field(default_factory=list)
    config_files: list[str] = field(default_factory=list)
    plugin: str = ""
    replaced_files: list[str] = field(default_factory=list)
    created_files: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Return a human-readable text representation of the plan."""
        return DryRunRenderer.render(self)


class DryRunRenderer:
    """Renders a StarterPlan as human-readable text."""

    @staticmethod
    def render(plan: "StarterPlan") -> str:
        lines: list[str] = []
        lines.append("=" * 64)
        lines.append("DRY-RUN: Starter Plan")
        lines.append("=" * 64)
        lines.append(f"Project : {plan.project_name}")
        lines.append(f"Location: {plan.project_dir}")
        lines.append(f"Manager : {plan.package_manager}")
        lines.append("")

        lines.append(f"── Commands ({len(plan.commands)}) ──")
        for step, cmd in enumerate(plan.commands, start=1):
            lines.append(f"  {step}. {format_command(cmd.argv)}")
            lines.append(f"     cwd: {cmd.cwd}")

        lines.append("── Vite config ──")
        lines.append(
            f"  patch first of {', '.join(plan.config_files)}: register {plan.plugin}"
        )

        lines.append("── Files replaced if present ──")
        for rel_path in plan.replaced_files:
            lines.append(f"  ~ {rel_path}")

        lines.append("── Files created ──")
        for rel_path in plan.created_files:
            lines.append(f"  + {rel_path}")

        lines.append("")
        lines.append("=" * 64)
        lines.append("(Nothing was executed — this is a dry run)")
        return "\n".join(lines)
