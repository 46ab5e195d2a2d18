"""Logging and header helpers."""
