"""
Settings for the starter, read from the environment.

A `.env` file in the current directory is honoured (python-dotenv); real
environment variables win over it. CLI flags win over both.

    REACT_STARTER_PROJECT_NAME     default project name (my-react-app)
    REACT_STARTER_PACKAGE_MANAGER  npm | pnpm | yarn | bun (npm)
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .models import DEFAULT_PACKAGE_MANAGER, DEFAULT_PROJECT_NAME

_ENV_PREFIX = "REACT_STARTER_"


def _env_str(name: str, default: str) -> str:
    value = str(os.environ.get(_ENV_PREFIX + name) or "").strip()
    return value or default


@dataclass(frozen=True)
class StarterSettings:
    project_name: str = DEFAULT_PROJECT_NAME
    package_manager: str = DEFAULT_PACKAGE_MANAGER

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "StarterSettings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        return cls(
            project_name=_env_str("PROJECT_NAME", DEFAULT_PROJECT_NAME),
            package_manager=_env_str("PACKAGE_MANAGER", DEFAULT_PACKAGE_MANAGER).lower(),
        )
