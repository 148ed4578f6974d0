"""Concurrent reconciliation of open items against tracking boards."""
