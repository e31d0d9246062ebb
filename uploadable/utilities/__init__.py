"""Uploadable shared utilities."""
