"""Utility helpers for reporting results and loading rule sets."""
