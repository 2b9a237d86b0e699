"""Utility helpers for polyscan."""
