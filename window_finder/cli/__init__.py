"""Diagnostic command line interface for window lookups."""
