"""
In-memory entity store for the campus service
"""

from .collection import Collection
from .entity_store import EntityStore
from .records import (
    AssignmentGradeRecord,
    AssignmentRecord,
    CourseRecord,
    EnrollmentRecord,
    Role,
    UserRecord,
)

__all__ = [
    "AssignmentGradeRecord",
    "AssignmentRecord",
    "Collection",
    "CourseRecord",
    "EnrollmentRecord",
    "EntityStore",
    "Role",
    "UserRecord",
]
