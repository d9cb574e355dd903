"""
Lookup, relationship and mutation logic over the entity store
"""

from .lookup import find_assignment, find_course, find_user, parse_id
from .mutations import MutationService

__all__ = ["MutationService", "find_assignment", "find_course", "find_user", "parse_id"]
