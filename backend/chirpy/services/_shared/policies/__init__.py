"""Reusable authorization policies."""
