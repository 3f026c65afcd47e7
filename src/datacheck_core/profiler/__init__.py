"""Datacheck Profiler -- Dataset structure, completeness and statistics.

Public API:
    profile      — Profile an in-memory dataset
    profile_file — Load a CSV file and profile it
    infer_type   — Infer a column type from its values
"""

from .profile import profile, profile_file, infer_type

__all__ = [
    "profile",
    "profile_file",
    "infer_type",
]
