"""
Tagging helpers for subnet group resources.
"""

from .tags import get_default_tags, merge_tags

__all__ = [
    'get_default_tags',
    'merge_tags',
]
