"""
ScaffoldEngine — writes fixed template files into a project directory.

Usage:
    engine = ScaffoldEngine(project_dir)
    written = engine.write_files(react_router.FILES)
    replaced, skipped = engine.replace_existing(entry.FILES)
    # written / replaced: dict[str, str] — relative path -> file content

All paths are resolved against the explicit project_dir; the process
working directory is never consulted.
"""
from __future__ import annotations

import logging
from pathlib import Path

from .templates import entry, react_router, tailwind

logger = logging.getLogger(__name__)

__all__ = ["ScaffoldEngine", "entry", "react_router", "tailwind"]


class ScaffoldEngine:
    """
    Writes template dicts (relative_path -> content) under project_dir.

    write_files() always overwrites and creates missing directories.
    replace_existing() only overwrites files the skeleton already has.
    """

    def __init__(self, project_dir: Path) -> None:
        self.project_dir = Path(project_dir)

    def write_files(self, files: dict[str, str]) -> dict[str, str]:
        """Write every file, replacing anything already on disk."""
        written: dict[str, str] = {}
        for rel_path, content in files.items():
            dest = self.project_dir / rel_path
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(content, encoding="utf-8")
            logger.debug("Created %s", rel_path)
            written[rel_path] = content
        return written

    def replace_existing(self, files: dict[str, str]) -> tuple[dict[str, str], list[str]]:
        """
        Overwrite only files that exist.

        Returns (written, skipped) where skipped lists the relative paths that
        were missing. Each skip is logged as a warning.
        """
        written: dict[str, str] = {}
        skipped: list[str] = []
        for rel_path, content in files.items():
            dest = self.project_dir / rel_path
            if not dest.exists():
                logger.warning("%s not found; skipping", rel_path)
                skipped.append(rel_path)
                continue
            dest.write_text(content, encoding="utf-8")
            logger.debug("Updated %s", rel_path)
            written[rel_path] = content
        return written, skipped
