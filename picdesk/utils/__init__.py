"""Utility helpers for picdesk (logging)."""
