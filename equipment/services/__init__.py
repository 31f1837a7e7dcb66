"""Application services for the equipment subsystem."""

from .container_mutation_guard import ContainerMutationGuard, MutationDecision
from .store_management_service import (
    ContainerNotFoundError,
    DuplicateMutationError,
    ForbiddenTradeError,
    StoreManagementError,
    StoreManagementService,
)

__all__ = [
    "ContainerMutationGuard",
    "ContainerNotFoundError",
    "DuplicateMutationError",
    "ForbiddenTradeError",
    "MutationDecision",
    "StoreManagementError",
    "StoreManagementService",
]
