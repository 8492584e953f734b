"""Presentation helpers for the library desk CLI."""
