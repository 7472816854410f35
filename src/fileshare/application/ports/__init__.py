"""Application ports - interfaces for external adapters."""

from fileshare.application.ports.permission_evaluator import PermissionEvaluator
from fileshare.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionEvaluator",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
