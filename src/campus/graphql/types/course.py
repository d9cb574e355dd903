"""
Course and enrollment GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .assignment import Assignment
    from .user import Faculty, Student


@strawberry.type
class Course:
    """Course type for GraphQL API."""

    id: strawberry.ID
    name: str
    faculty_id: strawberry.ID

    @strawberry.field
    async def professor(
        self, info: strawberry.Info
    ) -> Annotated["Faculty", strawberry.lazy(".user")] | None:
        """Get the faculty member teaching this course, if they exist."""
        from ..resolvers.course import resolve_course_professor

        return await resolve_course_professor(self, info)

    @strawberry.field
    async def students(
        self, info: strawberry.Info
    ) -> list[Annotated["Student", strawberry.lazy(".user")]]:
        """Get students enrolled under this course's name."""
        from ..resolvers.course import resolve_course_students

        return await resolve_course_students(self, info)

    @strawberry.field
    async def assignments(
        self, info: strawberry.Info
    ) -> list[Annotated["Assignment", strawberry.lazy(".assignment")]]:
        """Get assignments attached to this course."""
        from ..resolvers.course import resolve_course_assignments

        return await resolve_course_assignments(self, info)


@strawberry.type
class Enrollment:
    """A student's enrollment, shaped like a course (``id`` and ``name``)."""

    id: strawberry.ID
    name: str
    student_id: strawberry.ID

    @strawberry.field
    async def course(self, info: strawberry.Info) -> Course | None:
        """Get the course whose name this enrollment carries."""
        from ..resolvers.course import resolve_enrollment_course

        return await resolve_enrollment_course(self, info)

    @strawberry.field
    async def student(
        self, info: strawberry.Info
    ) -> Annotated["Student", strawberry.lazy(".user")] | None:
        """Get the enrolled student."""
        from ..resolvers.course import resolve_enrollment_student

        return await resolve_enrollment_student(self, info)
