"""Tailwind CSS v4 stylesheet entry point.

Replaces the skeleton's src/index.css; skipped when the skeleton has none.
"""
from __future__ import annotations

FILES: dict[str, str] = {
    "src/index.css": """@import "tailwindcss";

body {
  @apply bg-slate-950 text-slate-50 antialiased;
}
""",
}
