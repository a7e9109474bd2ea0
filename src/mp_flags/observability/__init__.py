"""Observability – structured logging for flag operations."""
