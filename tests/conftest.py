"""Pytest configuration and fixtures for duo-pin tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the project root is in the Python path."""
    project_root = str(Path(__file__).parent.parent)
    if project_root not in sys.path:
        sys.path.insert(0, project_root)
    yield


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_manifest():
    """Manifest with a duplicate remote component and a local component."""
    return {
        "components/foo-bar@1.2.3/index.js": {"id": "components/foo-bar@1.2.3/index.js"},
        "components/foo-bar@1.2.3/lib.js": {"id": "components/foo-bar@1.2.3/lib.js"},
        "components/acme-my-lib@2.0.0/index.js": {"deps": {}},
        "local-widget/thing": {"type": "js"},
    }


@pytest.fixture
def project_dir(tmp_path):
    """Empty project directory with a components/ folder."""
    (tmp_path / "components").mkdir()
    return tmp_path


@pytest.fixture
def write_manifest(project_dir):
    """Write a manifest dict to components/duo.json and return its path."""

    def _write(manifest):
        path = project_dir / "components" / "duo.json"
        path.write_text(json.dumps(manifest), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_lockfile_json(project_dir):
    """Write raw text to component.json and return its path."""

    def _write(content):
        path = project_dir / "component.json"
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def in_project(project_dir, monkeypatch):
    """Run the test with the project directory as the working directory."""
    monkeypatch.chdir(project_dir)
    return project_dir
