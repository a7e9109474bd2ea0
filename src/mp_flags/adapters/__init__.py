"""Adapters – concrete backends for the flag store."""
