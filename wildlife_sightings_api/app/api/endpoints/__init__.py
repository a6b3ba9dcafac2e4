"""Endpoint modules, one per domain."""
