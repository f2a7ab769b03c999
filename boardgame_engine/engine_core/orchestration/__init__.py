"""
Orchestration - keeps both charts in step with the filter controls
"""

from .dashboard_engine import DashboardEngine, DashboardSnapshot

__all__ = [
    'DashboardEngine',
    'DashboardSnapshot',
]
