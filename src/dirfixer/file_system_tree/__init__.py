"""File system traversal and permission handling.

This package provides the pieces dirfixer composes for a run: validating the
target path, detecting executables, applying modes and walking a directory tree
with a configurable error policy.
"""
