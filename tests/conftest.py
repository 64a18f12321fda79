"""
Pytest configuration and shared fixtures for tinysh tests.

This module provides reusable test fixtures for:
- Shell configurations pointing at temporary directories
- Command contexts with a populated executable registry
- Captured stdout/stderr streams
- Small executable scripts to spawn
"""

import io
import os
import stat

import pytest

from tinysh.config import ShellConfig
from tinysh.context import CommandContext


# ============================================================================
# Helpers
# ============================================================================

def make_executable(directory, name: str, body: str):
    """
    Write a /bin/sh script called `name` into `directory` and mark it executable.

    Returns:
        pathlib.Path: Path to the script
    """
    script = directory / name
    script.write_text(f"#!/bin/sh\n{body}\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """
    Provides a canonical temporary working directory and makes it the process cwd.

    The process cwd is restored after the test, so tests may `cd` freely.

    Returns:
        pathlib.Path: Canonical path of the working directory
    """
    root = tmp_path.resolve() / "work"
    root.mkdir()
    (root / "subdir").mkdir()
    (root / "subdir" / "nested").mkdir()
    (root / "notes.txt").write_text("not a directory\n")
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def home_dir(tmp_path):
    """Provides a temporary home directory with a `projects` subdirectory."""
    home = tmp_path.resolve() / "home"
    home.mkdir()
    (home / "projects").mkdir()
    return home


@pytest.fixture
def bin_dir(tmp_path):
    """
    Provides a search-path directory holding a few executable scripts.

    Scripts:
        hello    prints "hello from script"
        args     prints each argument on its own line
        fail     writes "<own path>: something broke" to stderr, exits 2
        whereami prints its working directory
    """
    bin_path = tmp_path.resolve() / "bin"
    bin_path.mkdir()
    make_executable(bin_path, "hello", 'echo "hello from script"')
    make_executable(bin_path, "args", 'for a in "$@"; do echo "$a"; done')
    make_executable(bin_path, "fail", 'echo partial\necho "$0: something broke   " >&2\nexit 2')
    make_executable(bin_path, "whereami", "pwd")
    return bin_path


@pytest.fixture
def shell_config(bin_dir, home_dir):
    """
    Provides a ShellConfig whose search path is the test bin directory.

    A missing directory is listed first to check it is skipped.
    """
    return ShellConfig(
        search_dirs=(str(bin_dir.parent / "missing-bin"), str(bin_dir)),
        home=str(home_dir),
    )


@pytest.fixture
def context(shell_config, workdir):
    """
    Provides a CommandContext rooted at `workdir` with a filled registry.

    Example:
        def test_lookup(context, bin_dir):
            assert context.resolve_executable('hello') == str(bin_dir / 'hello')
    """
    return CommandContext.create(shell_config, cwd=str(workdir))


@pytest.fixture
def capture_output():
    """
    Provides StringIO objects for capturing command output.

    Returns:
        tuple: (stdout, stderr) StringIO objects
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def require_sh():
    """Skip tests that spawn scripts when /bin/sh is unavailable."""
    if not os.access("/bin/sh", os.X_OK):
        pytest.skip("/bin/sh is required to run script fixtures")


@pytest.fixture
def make_script(bin_dir):
    """
    Provides a factory adding more scripts to `bin_dir`.

    Example:
        def test_late(context, make_script):
            make_script("late", "echo late")
            context.refresh_executables()
    """
    def factory(name: str, body: str):
        return make_executable(bin_dir, name, body)
    return factory
