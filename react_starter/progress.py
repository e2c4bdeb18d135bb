"""
Terminal output for a starter run: the opening banner and the closing summary.

Printed to stderr so stdout stays clean for --dry-run plans. Use quiet=True in
tests or when the --quiet CLI flag is set.
"""
from __future__ import annotations

import sys
from typing import TextIO

from .models import StarterOptions, StarterReport
from .package_manager import PackageManager, format_command

_TITLE = "🚀 React + Vite + Tailwind v4 + Router Quick Starter"

_FEATURES = (
    "React + Vite",
    "Tailwind CSS v4 (via @tailwindcss/vite)",
    "React Router with basic pages",
    "Axios installed for API calls",
)


class ProgressRenderer:
    """Prints run milestones; silent when quiet."""

    def __init__(self, quiet: bool = False, stream: TextIO | None = None) -> None:
        self.quiet = quiet
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the output
        return self._stream if self._stream is not None else sys.stderr

    def _print(self, text: str = "") -> None:
        if not self.quiet:
            print(text, file=self.stream)

    def started(self, options: StarterOptions) -> None:
        self._print()
        self._print(_TITLE)
        self._print(f"📁 Project name: {options.project_name}")
        self._print(
            f"ℹ️  When Vite asks 'Install with {options.package_manager} and start now?', "
            "choose NO."
        )
        self._print()

    def command(self, argv: list[str]) -> None:
        self._print(f"\n▶ Running: {format_command(argv)}")

    def file_written(self, rel_path: str, replaced: bool = False) -> None:
        verb = "Updated" if replaced else "Created"
        self._print(f"✓ {verb} {rel_path}")

    def warning(self, message: str) -> None:
        self._print(f"⚠  {message}")

    def finished(self, report: StarterReport) -> None:
        dev = format_command(PackageManager(report.package_manager).dev_command())
        self._print()
        self._print("🎉 Setup complete!")
        if report.warnings:
            self._print(f"   ({len(report.warnings)} step(s) skipped — see warnings above)")
        self._print()
        self._print("Next steps:")
        self._print(f"  cd {report.project_name}")
        self._print(f"  {dev}")
        self._print()
        self._print("You now have:")
        for feature in _FEATURES:
            self._print(f"  - {feature}")
