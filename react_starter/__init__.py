"""
React Starter
=============
Creates a React + Vite project wired with Tailwind CSS v4, React Router and
Axios: drives the package manager, registers the Tailwind Vite plugin and
writes a small routed page set.

Basic usage:
    from react_starter import ReactStarter, StarterOptions

    report = ReactStarter().run(StarterOptions(project_name="demo"))
    print(report.files_written, report.warnings)

Patching a Vite config by hand:
    from react_starter import patch_plugin_list

    result = patch_plugin_list(open("vite.config.js").read())
    print(result.text)
"""

from .models import (
    PatchResult, PluginSpec, StarterOptions, StarterReport, TAILWIND_PLUGIN,
)
from .config import StarterSettings
from .dry_run import CommandPlan, DryRunRenderer, StarterPlan
from .package_manager import ExecutableNotFoundError, PackageManager
from .scaffold import ScaffoldEngine
from .starter import ProjectNotCreatedError, ReactStarter
from .vite_config import find_vite_config, patch_plugin_list, update_vite_config

__all__ = [
    "ReactStarter", "StarterOptions", "StarterReport", "StarterSettings",
    "PackageManager", "ScaffoldEngine",
    "PatchResult", "PluginSpec", "TAILWIND_PLUGIN",
    "patch_plugin_list", "find_vite_config", "update_vite_config",
    "StarterPlan", "CommandPlan", "DryRunRenderer",
    "ExecutableNotFoundError", "ProjectNotCreatedError",
]
