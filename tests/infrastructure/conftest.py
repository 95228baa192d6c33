"""Pytest fixtures for infrastructure tests."""

import sys
from pathlib import Path

import pytest


@pytest.fixture(scope="session", autouse=True)
def add_project_to_path():
    """Add the project root to Python path for imports."""
    project_root = Path(__file__).parent.parent.parent
    sys.path.insert(0, str(project_root))
    yield
    # Cleanup
    sys.path.remove(str(project_root))


@pytest.fixture
def iac_project_root():
    """Return the vpc_iac package directory."""
    return Path(__file__).parent.parent.parent / "vpc_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the vpc_iac package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]


class FakeConfig:
    """Stand-in for pulumi.Config backed by a plain dict of raw string values."""

    values: dict[str, str] = {}

    def __init__(self, name=None):
        self.name = name

    def get(self, key):
        return self.values.get(key)

    def require(self, key):
        import pulumi

        if key not in self.values:
            raise pulumi.ConfigMissingError(key, False)
        return self.values[key]

    def get_int(self, key):
        value = self.get(key)
        return None if value is None else int(value)

    def get_bool(self, key):
        value = self.get(key)
        return None if value is None else value == "true"

    def get_object(self, key):
        import json

        value = self.get(key)
        return None if value is None else json.loads(value)


@pytest.fixture
def stack_config(monkeypatch):
    """
    Patch pulumi.Config with a dict-backed fake.

    Yields the dict; tests fill it with raw config strings before loading.
    """
    import pulumi

    values: dict[str, str] = {}
    fake = type("StackConfig", (FakeConfig,), {"values": values})
    monkeypatch.setattr(pulumi, "Config", fake)
    monkeypatch.setattr(pulumi, "get_project", lambda: "vpc-network")
    yield values
