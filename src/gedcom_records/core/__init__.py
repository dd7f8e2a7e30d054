"""Diagnostics, exceptions and pipeline orchestration."""
