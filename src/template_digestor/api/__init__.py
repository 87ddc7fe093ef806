"""Outer interfaces (CLI)."""
