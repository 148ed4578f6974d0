"""Reconcile open issues and pull requests against GitHub project boards."""

__version__ = "0.1.0"
