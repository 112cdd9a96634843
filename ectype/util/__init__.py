"""Utility helpers used across :mod:`ectype`."""
