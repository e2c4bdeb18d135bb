"""
PackageManager — builds and runs package-manager commands.
=========================================================

Every command is an argument list run through subprocess.run with the
terminal's stdin/stdout/stderr inherited, so interactive prompts from
`create vite` reach the user. Calls block until the process exits; there is
no timeout and no retry.

Failures are not handled here:
  - non-zero exit      → subprocess.CalledProcessError
  - missing executable → ExecutableNotFoundError (a FileNotFoundError)

The program is resolved with shutil.which before running, which also finds
the .cmd shims npm, pnpm and yarn install on Windows.
"""
from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, Optional

from .models import DEFAULT_PACKAGE_MANAGER

logger = logging.getLogger(__name__)

VITE_TEMPLATE = "react"

# Dependency sets installed after the skeleton is created
DEV_DEPENDENCIES: tuple[str, ...] = ("tailwindcss", "@tailwindcss/vite")
RUNTIME_DEPENDENCIES: tuple[str, ...] = ("axios", "react-router-dom")

# name → (add verb, dev flag)
_ADD_COMMANDS: dict[str, tuple[str, str]] = {
    "npm": ("install", "-D"),
    "pnpm": ("add", "-D"),
    "yarn": ("add", "-D"),
    "bun": ("add", "-d"),
}

SUPPORTED_PACKAGE_MANAGERS: tuple[str, ...] = tuple(_ADD_COMMANDS)


class ExecutableNotFoundError(FileNotFoundError):
    """The package-manager program is not on PATH."""

    def __init__(self, program: str) -> None:
        super().__init__(f"'{program}' was not found on PATH")
        self.program = program


class PackageManager:
    """Command table and runner for one package manager executable."""

    def __init__(self, name: str = DEFAULT_PACKAGE_MANAGER) -> None:
        name = (name or DEFAULT_PACKAGE_MANAGER).strip().lower()
        if name not in _ADD_COMMANDS:
            raise ValueError(
                f"Unsupported package manager '{name}' "
                f"(expected one of: {', '.join(SUPPORTED_PACKAGE_MANAGERS)})"
            )
        self.name = name

    def __repr__(self) -> str:
        return f"PackageManager({self.name!r})"

    # ── Command builders ─────────────────────────────────────────────────────

    def create_command(self, project_name: str, template: str = VITE_TEMPLATE) -> list[str]:
        if self.name == "npm":
            # npm needs `--` to forward flags to create-vite
            return ["npm", "create", "vite@latest", project_name, "--", "--template", template]
        return [self.name, "create", "vite", project_name, "--template", template]

    def install_command(self) -> list[str]:
        return [self.name, "install"]

    def add_command(self, packages: Iterable[str], dev: bool = False) -> list[str]:
        verb, dev_flag = _ADD_COMMANDS[self.name]
        cmd = [self.name, verb]
        if dev:
            cmd.append(dev_flag)
        cmd.extend(packages)
        return cmd

    def dev_command(self) -> list[str]:
        return [self.name, "run", "dev"]

    def setup_commands(self, project_name: str) -> list[tuple[list[str], str]]:
        """
        The four commands of a run, paired with where they execute:
        "base" (parent of the project) or "project" (inside it).
        """
        return [
            (self.create_command(project_name), "base"),
            (self.install_command(), "project"),
            (self.add_command(DEV_DEPENDENCIES, dev=True), "project"),
            (self.add_command(RUNTIME_DEPENDENCIES), "project"),
        ]

    # ── Execution ────────────────────────────────────────────────────────────

    def run(self, cmd: list[str], cwd: Optional[Path] = None) -> None:
        program = shutil.which(cmd[0])
        if program is None:
            raise ExecutableNotFoundError(cmd[0])
        logger.debug("Running: %s (%s)", format_command(cmd), program)
        subprocess.run(
            [program, *cmd[1:]],
            cwd=str(cwd) if cwd is not None else None,
            check=True,
        )


def format_command(cmd: Iterable[str]) -> str:
    return shlex.join(list(cmd))
