"""
Shared fixtures: package-manager executables resolve to a fixed fake path so
no test depends on npm/pnpm/yarn/bun being installed.
"""
import pytest


@pytest.fixture(autouse=True)
def _fake_executables(monkeypatch):
    monkeypatch.setattr("shutil.which", lambda name, *args, **kwargs: f"/usr/bin/{name}")
