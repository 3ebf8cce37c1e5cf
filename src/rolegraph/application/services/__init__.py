"""Role graph services - read-side resolution and integrity checks."""

from rolegraph.application.services.cycle_guard import CycleGuard
from rolegraph.application.services.hierarchy_analyzer import HierarchyAnalyzer
from rolegraph.application.services.permission_resolver import PermissionResolver
from rolegraph.application.services.role_graph import StagedRoleGraph
from rolegraph.application.services.user_permission_aggregator import (
    UserPermissionAggregator,
)

__all__ = [
    "CycleGuard",
    "HierarchyAnalyzer",
    "PermissionResolver",
    "StagedRoleGraph",
    "UserPermissionAggregator",
]
