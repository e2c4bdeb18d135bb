"""
Tests for PackageManager — command tables and the blocking runner.
ALL subprocess calls are mocked — no real processes spawned.
"""
from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from react_starter.package_manager import (
    DEV_DEPENDENCIES,
    RUNTIME_DEPENDENCIES,
    SUPPORTED_PACKAGE_MANAGERS,
    ExecutableNotFoundError,
    PackageManager,
    format_command,
)


# ─────────────────────────────────────────────────────────────────────────────
# Command tables
# ─────────────────────────────────────────────────────────────────────────────

def test_default_is_npm():
    assert PackageManager().name == "npm"


def test_unknown_package_manager_raises():
    with pytest.raises(ValueError, match="Unsupported package manager"):
        PackageManager("pip")


def test_name_is_normalised():
    assert PackageManager("  PNPM ").name == "pnpm"


def test_npm_setup_commands():
    commands = PackageManager("npm").setup_commands("demo")
    assert commands == [
        (["npm", "create", "vite@latest", "demo", "--", "--template", "react"], "base"),
        (["npm", "install"], "project"),
        (["npm", "install", "-D", "tailwindcss", "@tailwindcss/vite"], "project"),
        (["npm", "install", "axios", "react-router-dom"], "project"),
    ]


@pytest.mark.parametrize("name, dev_flag", [("pnpm", "-D"), ("yarn", "-D"), ("bun", "-d")])
def test_other_managers_use_add(name, dev_flag):
    pm = PackageManager(name)
    assert pm.create_command("demo") == [name, "create", "vite", "demo", "--template", "react"]
    assert pm.add_command(DEV_DEPENDENCIES, dev=True) == [name, "add", dev_flag, *DEV_DEPENDENCIES]
    assert pm.add_command(RUNTIME_DEPENDENCIES) == [name, "add", *RUNTIME_DEPENDENCIES]


def test_every_supported_manager_has_four_setup_commands():
    for name in SUPPORTED_PACKAGE_MANAGERS:
        assert len(PackageManager(name).setup_commands("demo")) == 4


def test_dev_command():
    assert PackageManager("yarn").dev_command() == ["yarn", "run", "dev"]


def test_format_command():
    assert format_command(["npm", "install", "-D", "@tailwindcss/vite"]) == \
        "npm install -D @tailwindcss/vite"
    assert format_command(["npm", "create", "vite@latest", "my app"]) == \
        "npm create vite@latest 'my app'"


# ─────────────────────────────────────────────────────────────────────────────
# run()
# ─────────────────────────────────────────────────────────────────────────────

def test_run_blocks_with_check_and_cwd(tmp_path):
    with patch("subprocess.run", return_value=MagicMock(returncode=0)) as mock_run:
        PackageManager().run(["npm", "install"], cwd=tmp_path)

    mock_run.assert_called_once_with(
        ["/usr/bin/npm", "install"], cwd=str(tmp_path), check=True
    )


def test_run_without_cwd_inherits_current_directory():
    with patch("subprocess.run", return_value=MagicMock(returncode=0)) as mock_run:
        PackageManager().run(["npm", "install"])

    assert mock_run.call_args.kwargs["cwd"] is None


def test_run_does_not_capture_output(tmp_path):
    with patch("subprocess.run", return_value=MagicMock(returncode=0)) as mock_run:
        PackageManager().run(["npm", "install"], cwd=tmp_path)

    kwargs = mock_run.call_args.kwargs
    assert "capture_output" not in kwargs
    assert "stdout" not in kwargs
    assert "timeout" not in kwargs


def test_run_uses_the_resolved_program(monkeypatch, tmp_path):
    # Windows installs npm as a .cmd shim that CreateProcess only finds by full path
    shim = r"C:\Program Files\nodejs\npm.CMD"
    monkeypatch.setattr("shutil.which", lambda name, *args, **kwargs: shim)
    with patch("subprocess.run", return_value=MagicMock(returncode=0)) as mock_run:
        PackageManager().run(["npm", "install", "-D", "tailwindcss"], cwd=tmp_path)

    assert mock_run.call_args.args[0] == [shim, "install", "-D", "tailwindcss"]


def test_run_missing_executable_raises(monkeypatch, tmp_path):
    monkeypatch.setattr("shutil.which", lambda name, *args, **kwargs: None)
    with patch("subprocess.run") as mock_run:
        with pytest.raises(ExecutableNotFoundError) as exc_info:
            PackageManager("pnpm").run(["pnpm", "install"], cwd=tmp_path)

    mock_run.assert_not_called()
    assert exc_info.value.program == "pnpm"
    assert isinstance(exc_info.value, FileNotFoundError)


def test_run_propagates_failure(tmp_path):
    error = subprocess.CalledProcessError(1, ["npm", "install"])
    with patch("subprocess.run", side_effect=error):
        with pytest.raises(subprocess.CalledProcessError):
            PackageManager().run(["npm", "install"], cwd=tmp_path)
