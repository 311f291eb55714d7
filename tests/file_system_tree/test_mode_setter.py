"""Unit tests for the ModeSetter class."""

import os

import pytest

from dirfixer.exceptions import ExecutableDetectionError, ModeChangeError
from dirfixer.file_system_tree.mode_setter import ModeSetter
from dirfixer.modes import DEFAULT_MODES, ModeSet


@pytest.fixture
def setter():
    return ModeSetter()


def test_handle_directory(tmp_path, setter, mode_of):
    """Test that directories get the directory mode whatever their old mode."""
    directory = tmp_path / "dir"
    directory.mkdir()
    os.chmod(directory, 0o1777)

    setter.handle_directory(directory)

    assert mode_of(directory) == DEFAULT_MODES.directory


def test_handle_plain_file(tmp_path, setter, mode_of):
    """Test that non-executable files get the file mode."""
    target = tmp_path / "notes.txt"
    target.write_text("notes\n")
    os.chmod(target, 0o4777)

    assert setter.handle_file(target) is False
    assert mode_of(target) == 0o640


def test_handle_script(tmp_path, setter, mode_of):
    """Test that scripts get the executable mode."""
    target = tmp_path / "run.sh"
    target.write_bytes(b"#!/bin/sh\n...")
    os.chmod(target, 0o600)

    assert setter.handle_file(target) is True
    assert mode_of(target) == 0o750


def test_handle_file_does_not_modify_content(tmp_path, setter):
    """Test that handling a file leaves its content untouched."""
    target = tmp_path / "tool"
    content = b"\x7fELF" + bytes(range(256))
    target.write_bytes(content)

    setter.handle_file(target)

    assert target.read_bytes() == content


def test_custom_modes(tmp_path, mode_of):
    """Test that an injected ModeSet is used instead of the defaults."""
    setter = ModeSetter(ModeSet(directory=0o700, file=0o600, executable=0o700))
    directory = tmp_path / "dir"
    directory.mkdir()
    plain = tmp_path / "plain"
    plain.write_text("x")
    script = tmp_path / "script"
    script.write_bytes(b"#!x")

    setter.handle_directory(directory)
    setter.handle_file(plain)
    setter.handle_file(script)

    assert mode_of(directory) == 0o700
    assert mode_of(plain) == 0o600
    assert mode_of(script) == 0o700


def test_injected_detector(tmp_path, mode_of):
    """Test that the detector decides which file mode applies."""
    target = tmp_path / "data.bin"
    target.write_bytes(b"data")
    calls = []

    def detector(path):
        calls.append(path)
        return True

    assert ModeSetter(detector=detector).handle_file(target) is True
    assert calls == [target]
    assert mode_of(target) == DEFAULT_MODES.executable


def test_chmod_failure_raises_mode_change_error(tmp_path, setter, monkeypatch):
    """Test that chmod failures are wrapped with the path and mode."""
    target = tmp_path / "file"
    target.write_text("x")

    def failing_chmod(path, mode):
        raise PermissionError(1, "Operation not permitted")

    monkeypatch.setattr(os, "chmod", failing_chmod)

    with pytest.raises(ModeChangeError) as exc_info:
        setter.handle_file(target)

    assert exc_info.value.path == str(target)
    assert exc_info.value.mode == 0o640
    assert "setting mode 0640" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_directory_chmod_failure(tmp_path, setter):
    """Test that a directory that does not exist cannot be handled."""
    with pytest.raises(ModeChangeError, match="setting mode 0750"):
        setter.handle_directory(tmp_path / "missing")


def test_detection_failure_skips_chmod(tmp_path, setter, monkeypatch):
    """Test that no mode is applied when detection fails."""
    chmod_calls = []
    monkeypatch.setattr(os, "chmod", lambda path, mode: chmod_calls.append(path))

    with pytest.raises(ExecutableDetectionError):
        setter.handle_file(tmp_path / "missing")

    assert chmod_calls == []
