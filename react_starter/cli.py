#!/usr/bin/env python3
"""
CLI Entry Point — create a React starter project from the terminal
===================================================================
Usage:
    create-react-fast                       # ./my-react-app with npm
    create-react-fast demo                  # ./demo
    create-react-fast demo --package-manager pnpm --base-dir ~/code
    create-react-fast demo --dry-run        # print the plan, run nothing

    python -m react_starter demo

Defaults for the project name and package manager come from
REACT_STARTER_PROJECT_NAME / REACT_STARTER_PACKAGE_MANAGER (a .env file is
honoured). Exit status is 0 on success, the return code of the failing
package-manager command (128 + N when it was killed by signal N), 127 when
the executable is missing, or 1 when `create vite` produced no project.
"""

import argparse
import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import StarterSettings
from .models import StarterOptions
from .package_manager import (
    SUPPORTED_PACKAGE_MANAGERS,
    ExecutableNotFoundError,
    format_command,
)
from .progress import ProgressRenderer
from .starter import ProjectNotCreatedError, ReactStarter

logger = logging.getLogger("react_starter.cli")

_EXIT_FAILURE = 1
_EXIT_MISSING_EXECUTABLE = 127


def exit_code_for(returncode: int) -> int:
    """Shell convention: a child killed by signal N exits 128 + N."""
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode or _EXIT_FAILURE


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,  # re-apply even if already configured
    )


def build_parser(settings: StarterSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-react-fast",
        description="React + Vite + Tailwind v4 + Router Quick Starter",
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=settings.project_name,
        help=f"Directory/project name to create (default: {settings.project_name})",
    )
    parser.add_argument(
        "--package-manager", "-m",
        dest="package_manager",
        choices=SUPPORTED_PACKAGE_MANAGERS,
        default=settings.package_manager,
        help=f"Package manager to drive (default: {settings.package_manager})",
    )
    parser.add_argument(
        "--base-dir", "-d",
        dest="base_dir",
        type=Path,
        default=None,
        help="Directory the project is created in (default: current directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Print the commands and files the run would touch, then exit",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        default=False,
        help="Suppress the banner and summary",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = StarterSettings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # choices= is not checked against a default coming from the environment
    if args.package_manager not in SUPPORTED_PACKAGE_MANAGERS:
        parser.error(
            f"unsupported package manager '{args.package_manager}' "
            f"(choose from {', '.join(SUPPORTED_PACKAGE_MANAGERS)})"
        )

    options = StarterOptions(
        project_name=args.project_name,
        base_dir=args.base_dir or Path.cwd(),
        package_manager=args.package_manager,
        dry_run=args.dry_run,
    )
    starter = ReactStarter(renderer=ProgressRenderer(quiet=args.quiet))

    if options.dry_run:
        print(starter.plan(options).render())
        return 0

    try:
        starter.run(options)
    except subprocess.CalledProcessError as exc:
        logger.error(
            "Command failed with exit code %s: %s",
            exc.returncode, format_command(exc.cmd),
            exc_info=args.verbose,
        )
        return exit_code_for(exc.returncode)
    except ExecutableNotFoundError as exc:
        logger.error(
            "Could not run %s: %s", options.package_manager, exc,
            exc_info=args.verbose,
        )
        return _EXIT_MISSING_EXECUTABLE
    except ProjectNotCreatedError as exc:
        logger.error("%s; was the create prompt cancelled?", exc, exc_info=args.verbose)
        return _EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())
