"""CLI commands for remoji."""
