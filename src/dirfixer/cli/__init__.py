"""Command-line interface for dirfixer."""
