"""Utility helpers for bangumatch (configuration and logging)."""
