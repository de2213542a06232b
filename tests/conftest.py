"""Shared pytest configuration and fixtures for all tests."""

import io
import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker, help_text in (
        ("unit", "fast tests of single functions"),
        ("integration", "tests driving the CLI end to end"),
        ("install", "symlink/append/prompt behaviour"),
        ("config", "configuration loading and commands"),
    ):
        config.addinivalue_line("markers", f"{marker}: {help_text}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def scripted_streams(answers: str = "") -> tuple[io.StringIO, io.StringIO]:
    """Return (stdin, stdout) where stdin yields ``answers``."""
    return io.StringIO(answers), io.StringIO()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def dotinstall_home(tmp_path, monkeypatch) -> Path:
    """Point DOTINSTALL_HOME at a temporary directory for every test."""
    home = tmp_path / "dotinstall_home"
    monkeypatch.setenv("DOTINSTALL_HOME", str(home))
    return home


@pytest.fixture
def fake_home(tmp_path, monkeypatch) -> Path:
    """A temporary HOME so ~ expands inside the test directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def dotfiles_repo(tmp_path) -> Path:
    """A small dotfiles source directory."""
    repo = tmp_path / "dotfiles"
    repo.mkdir()
    (repo / "vimrc").write_text("set number\n")
    (repo / "gitconfig").write_text("[user]\n\tname = Someone\n")
    (repo / "nvim").mkdir()
    (repo / "nvim" / "init.lua").write_text("-- init\n")
    return repo


@pytest.fixture
def write_config(dotinstall_home):
    """Write a config.json under DOTINSTALL_HOME."""

    def _write(data) -> Path:
        dotinstall_home.mkdir(parents=True, exist_ok=True)
        path = dotinstall_home / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write
