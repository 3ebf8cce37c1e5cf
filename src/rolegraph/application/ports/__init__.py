"""Application ports - interfaces for external adapters."""

from rolegraph.application.ports.permission_checker import PermissionChecker
from rolegraph.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
