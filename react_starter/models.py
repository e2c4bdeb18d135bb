"""
React Starter — Core Models
===========================
Data structures passed between the CLI, the pipeline and its steps.
Nothing here is persisted: every value lives for a single run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DEFAULT_PROJECT_NAME = "my-react-app"
DEFAULT_PACKAGE_MANAGER = "npm"


# ─────────────────────────────────────────────
# Plugin description
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class PluginSpec:
    """
    A Vite plugin to register in the build configuration.

    module:       reference token; its presence anywhere in the file means the
                  import is already there.
    import_line:  statement prepended when the module is missing.
    invocation:   text appended to the plugins array.
    marker:       presence inside the plugins array means already registered.
    """
    module: str
    import_line: str
    invocation: str
    marker: str


TAILWIND_PLUGIN = PluginSpec(
    module="@tailwindcss/vite",
    import_line='import tailwindcss from "@tailwindcss/vite";\n',
    invocation="tailwindcss()",
    marker="tailwindcss(",
)


# ─────────────────────────────────────────────
# Patch result
# ─────────────────────────────────────────────

@dataclass
class PatchResult:
    """Outcome of patch_plugin_list()."""
    text: str
    import_added: bool = False
    plugin_registered: bool = False
    plugins_found: bool = True

    @property
    def changed(self) -> bool:
        return self.import_added or self.plugin_registered


# ─────────────────────────────────────────────
# Run options and report
# ─────────────────────────────────────────────

@dataclass
class StarterOptions:
    project_name: str = DEFAULT_PROJECT_NAME
    base_dir: Path = field(default_factory=Path.cwd)
    package_manager: str = DEFAULT_PACKAGE_MANAGER
    dry_run: bool = False

    @property
    def project_dir(self) -> Path:
        return Path(self.base_dir) / self.project_name


@dataclass
class StarterReport:
    """Everything a completed run did, in order."""
    project_name: str
    project_dir: Path
    package_manager: str
    commands: list[list[str]] = field(default_factory=list)
    vite_config: Optional[Path] = None
    files_written: list[str] = field(default_factory=list)
    files_skipped: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        """True when every optional step found the file it expected."""
        return not self.warnings
