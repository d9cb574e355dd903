"""
Access to per-request collaborators carried in the GraphQL context
"""

import strawberry

from ..errors import IntegrityGap
from ..services import MutationService
from ..store import EntityStore


def get_store(info: strawberry.Info) -> EntityStore:
    """Return the entity store injected by the context getter."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if not isinstance(store, EntityStore):
        raise IntegrityGap("GraphQL context has no entity store")
    return store


def get_mutation_service(info: strawberry.Info) -> MutationService:
    return MutationService(get_store(info))
