"""
Dashboard lenses
"""

from .base_lens import BaseLens
from .category_lens import CategoryLens, aggregate
from .projection_lens import ProjectionLens, project

__all__ = [
    'BaseLens',
    'CategoryLens',
    'ProjectionLens',
    'aggregate',
    'project',
]
