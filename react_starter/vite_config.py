"""
Vite config patcher — registers a plugin in vite.config.js / vite.config.ts.

patch_plugin_list() works on the file text only:
  1. Find the first `plugins: [ ... ]` literal (non-greedy, spans newlines).
     Not found → text returned untouched, warning logged.
  2. If the plugin module is not referenced anywhere, prepend its import.
  3. If the plugin invocation is not already inside the array, append it.

Running it on its own output is a no-op.

Only the first plugins array is considered. Nested arrays inside it (e.g.
babel plugin lists) end the match early; such configs need manual editing.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from .models import TAILWIND_PLUGIN, PatchResult, PluginSpec

logger = logging.getLogger(__name__)

CONFIG_CANDIDATES: tuple[str, ...] = ("vite.config.js", "vite.config.ts")

_PLUGINS_RE = re.compile(r"plugins:\s*\[(.*?)\]", re.DOTALL)


def patch_plugin_list(text: str, plugin: PluginSpec = TAILWIND_PLUGIN) -> PatchResult:
    """Return *text* with *plugin* imported and registered."""
    match = _PLUGINS_RE.search(text)
    if match is None:
        logger.warning(
            "No plugins array found; add %s to the Vite config manually",
            plugin.invocation,
        )
        return PatchResult(text=text, plugins_found=False)

    result = PatchResult(text=text)

    if plugin.module not in text:
        text = plugin.import_line + text
        result.import_added = True

    inner = match.group(1)
    if plugin.marker not in inner:
        trimmed = inner.strip()
        new_inner = f"{trimmed}, {plugin.invocation}" if trimmed else plugin.invocation
        text = _PLUGINS_RE.sub(lambda _m: f"plugins: [{new_inner}]", text, count=1)
        result.plugin_registered = True

    result.text = text
    return result


def find_vite_config(project_dir: Path) -> Optional[Path]:
    """First existing candidate config file in *project_dir*, or None."""
    project_dir = Path(project_dir)
    for name in CONFIG_CANDIDATES:
        candidate = project_dir / name
        if candidate.exists():
            return candidate
    return None


def update_vite_config(
    project_dir: Path,
    plugin: PluginSpec = TAILWIND_PLUGIN,
) -> Optional[tuple[Path, PatchResult]]:
    """
    Patch the project's Vite config in place.

    Returns (path, result), or None when neither candidate file exists.
    The file is only rewritten when the patch changed something.
    """
    path = find_vite_config(project_dir)
    if path is None:
        logger.warning(
            "No %s found in %s; skipping %s plugin setup",
            "/".join(CONFIG_CANDIDATES), project_dir, plugin.module,
        )
        return None

    original = path.read_text(encoding="utf-8")
    result = patch_plugin_list(original, plugin)

    if result.changed:
        path.write_text(result.text, encoding="utf-8")
        logger.debug("Updated %s with %s plugin", path.name, plugin.module)
    elif result.plugins_found:
        logger.debug("%s already registers %s", path.name, plugin.module)

    return path, result
