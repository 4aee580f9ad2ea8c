"""Command-line interface for unionfind."""
