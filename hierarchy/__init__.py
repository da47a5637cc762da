"""Hierarchy package - validated employee tree construction and queries."""

from .builder import HierarchyBuilder, build_hierarchy

__all__ = [
    'HierarchyBuilder',
    'build_hierarchy'
]
