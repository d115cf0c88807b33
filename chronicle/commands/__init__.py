"""Command implementations for the chronicle CLI."""
