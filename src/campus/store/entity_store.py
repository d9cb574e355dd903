"""
Process-wide owner of the campus collections.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

from ..logging import get_logger
from .collection import Collection
from .records import (
    AssignmentGradeRecord,
    AssignmentRecord,
    CourseRecord,
    EnrollmentRecord,
    UserRecord,
)
from .seed_data import (
    seed_assignment_grades,
    seed_assignments,
    seed_courses,
    seed_enrollments,
    seed_users,
)

logger = get_logger(__name__)


class EntityStore:
    """
    Holds the five independent collections.

    One instance is built at startup and handed to every resolver through the
    GraphQL context. There is no referential integrity between collections:
    foreign keys are soft and deletes never cascade.
    """

    def __init__(
        self,
        users: Iterable[UserRecord] = (),
        courses: Iterable[CourseRecord] = (),
        enrollments: Iterable[EnrollmentRecord] = (),
        assignments: Iterable[AssignmentRecord] = (),
        assignment_grades: Iterable[AssignmentGradeRecord] = (),
    ):
        self.users: Collection[UserRecord] = Collection("users", users)
        self.courses: Collection[CourseRecord] = Collection("courses", courses)
        self.enrollments: Collection[EnrollmentRecord] = Collection("enrollments", enrollments)
        self.assignments: Collection[AssignmentRecord] = Collection("assignments", assignments)
        self.assignment_grades: Collection[AssignmentGradeRecord] = Collection(
            "assignment_grades", assignment_grades
        )

    @classmethod
    def seeded(cls) -> EntityStore:
        """Build a store populated with the fixed seed rows."""
        store = cls(
            users=seed_users(),
            courses=seed_courses(),
            enrollments=seed_enrollments(),
            assignments=seed_assignments(),
            assignment_grades=seed_assignment_grades(),
        )
        logger.debug("Entity store seeded", **store.counts())
        return store

    def collections(self) -> list[Collection[Any]]:
        return [
            self.users,
            self.courses,
            self.enrollments,
            self.assignments,
            self.assignment_grades,
        ]

    def counts(self) -> dict[str, int]:
        return {collection.name: len(collection) for collection in self.collections()}

    def snapshot(self) -> dict[str, list[dict[str, Any]]]:
        """Plain-data copy of every collection, used by the CLI."""
        result: dict[str, list[dict[str, Any]]] = {}
        for collection in self.collections():
            rows = []
            for row in collection:
                data = asdict(row)
                if "role" in data:
                    data["role"] = data["role"].value
                rows.append(data)
            result[collection.name] = rows
        return result
