"""Command line interface for modkeep."""
