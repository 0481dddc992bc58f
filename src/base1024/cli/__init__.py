"""Command-line interface for base1024."""
