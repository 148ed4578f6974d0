"""Command-line interface for board reconciliation."""
