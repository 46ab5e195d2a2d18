"""Collector clients."""
