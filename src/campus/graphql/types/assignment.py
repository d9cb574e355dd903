"""
Assignment GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .course import Course
    from .user import User


@strawberry.type
class Assignment:
    """Assignment type for GraphQL API."""

    id: strawberry.ID
    name: str
    course_id: strawberry.ID

    @strawberry.field
    async def course(
        self, info: strawberry.Info
    ) -> Annotated["Course", strawberry.lazy(".course")] | None:
        """Get the course this assignment belongs to, if it still exists."""
        from ..resolvers.assignment import resolve_assignment_course

        return await resolve_assignment_course(self, info)

    @strawberry.field
    async def grades(self, info: strawberry.Info) -> list["AssignmentGrade"]:
        """Get grades recorded for this assignment."""
        from ..resolvers.assignment import resolve_assignment_grade_list

        return await resolve_assignment_grade_list(self, info)


@strawberry.type
class AssignmentGrade:
    """Grade a student received on an assignment."""

    id: strawberry.ID
    grade: str
    assignment_id: strawberry.ID
    student_id: strawberry.ID

    @strawberry.field
    async def assignment(self, info: strawberry.Info) -> Assignment | None:
        """Get the graded assignment."""
        from ..resolvers.assignment import resolve_grade_assignment

        return await resolve_grade_assignment(self, info)

    @strawberry.field
    async def student(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the graded user."""
        from ..resolvers.assignment import resolve_grade_student

        return await resolve_grade_student(self, info)
