"""
Board Game Engine - Core (The Math)

Two lenses over the same game list:
    - category_lens: Top categories by count, filtered by minimum age
    - projection_lens: LDA projection of selected categories
"""

from .colors import ColorAssigner
from .filters import FilterState, available_ages
from .features import (
    FEATURE_COLUMNS,
    FeatureExtractionError,
    extract_feature_vector,
    build_feature_matrix,
    standardize,
    lda_projection,
)
from .results import (
    CategorySummary,
    CategoryBreakdown,
    ProjectedPoint,
    ProjectionResult,
    ProjectionStatus,
)
from .lenses import (
    BaseLens,
    CategoryLens,
    ProjectionLens,
    aggregate,
    project,
)
from .orchestration import DashboardEngine, DashboardSnapshot

__all__ = [
    # State
    'ColorAssigner',
    'FilterState',
    'available_ages',
    # Features
    'FEATURE_COLUMNS',
    'FeatureExtractionError',
    'extract_feature_vector',
    'build_feature_matrix',
    'standardize',
    'lda_projection',
    # Results
    'CategorySummary',
    'CategoryBreakdown',
    'ProjectedPoint',
    'ProjectionResult',
    'ProjectionStatus',
    # Lenses
    'BaseLens',
    'CategoryLens',
    'ProjectionLens',
    'aggregate',
    'project',
    # Orchestration
    'DashboardEngine',
    'DashboardSnapshot',
    'get_lens',
]

# Lens registry for dynamic loading
LENS_REGISTRY = {
    'categories': CategoryLens,
    'projection': ProjectionLens,
}


def get_lens(name: str, **kwargs) -> 'BaseLens':
    """
    Get a lens instance by name.

    Args:
        name: Lens name ('categories' or 'projection')

    Returns:
        Lens instance
    """
    if name not in LENS_REGISTRY:
        raise ValueError(f"Unknown lens: {name}. Available: {list(LENS_REGISTRY.keys())}")
    return LENS_REGISTRY[name](**kwargs)
