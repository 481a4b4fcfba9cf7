"""Utility helpers for remoji."""
