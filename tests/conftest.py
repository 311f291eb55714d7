"""Test configuration and fixtures for dirfixer."""

import os
import stat

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def mode_of():
    """Return a helper reading the permission bits of a path, without following symlinks."""

    def read_mode(path):
        return stat.S_IMODE(os.lstat(path).st_mode)

    return read_mode


@pytest.fixture
def project_tree(tmp_path):
    """Create a directory tree with scripts, binaries and plain files in odd modes."""
    root = tmp_path / "project"
    (root / "bin").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "docs" / "empty").mkdir()

    (root / "bin" / "run.sh").write_bytes(b"#!/bin/sh\necho hello\n")
    (root / "bin" / "tool").write_bytes(b"\x7fELF\x02\x01\x01\x00" + b"\x00" * 8)
    (root / "docs" / "README.md").write_text("# Project\n")
    (root / "empty.txt").write_bytes(b"")
    (root / "notes.txt").write_text("#not a shebang\n")

    os.chmod(root / "bin" / "run.sh", 0o644)
    os.chmod(root / "bin" / "tool", 0o600)
    os.chmod(root / "docs" / "README.md", 0o777)
    os.chmod(root / "empty.txt", 0o4755)
    os.chmod(root / "notes.txt", 0o755)
    os.chmod(root / "docs" / "empty", 0o1777)
    os.chmod(root / "docs", 0o700)
    return root
