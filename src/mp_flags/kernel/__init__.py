"""Kernel – errors, unit-of-work port and the sync bridge."""
