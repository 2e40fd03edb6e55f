"""Scope hierarchies, source locations, high-level IR nodes and their printer."""

__version__ = "0.1.0"
__all__ = ["hierarchy", "location", "hir", "control", "printer"]