"""
Root GraphQL query definitions
"""

import strawberry

from ...store import Role
from ..types.assignment import Assignment, AssignmentGrade
from ..types.course import Course, Enrollment
from ..types.user import Admin, Faculty, Student, User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def hello(self, info: strawberry.Info, name: str) -> str:
        """Greet the caller by name."""
        from ..resolvers.user import resolve_hello

        return await resolve_hello(info, name)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get every user, each as its concrete type."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def student(
        self, info: strawberry.Info, email: str, id: strawberry.ID | None = None
    ) -> Student | None:
        """Get a student by email, or by id when email is empty."""
        from ..resolvers.user import resolve_user_by_role

        return await resolve_user_by_role(info, Role.Student, email, id)  # type: ignore[return-value]

    @strawberry.field
    async def faculty(
        self, info: strawberry.Info, email: str, id: strawberry.ID | None = None
    ) -> Faculty | None:
        """Get a faculty member by email, or by id when email is empty."""
        from ..resolvers.user import resolve_user_by_role

        return await resolve_user_by_role(info, Role.Faculty, email, id)  # type: ignore[return-value]

    @strawberry.field
    async def admin(
        self, info: strawberry.Info, email: str, id: strawberry.ID | None = None
    ) -> Admin | None:
        """Get an administrator by email, or by id when email is empty."""
        from ..resolvers.user import resolve_user_by_role

        return await resolve_user_by_role(info, Role.Admin, email, id)  # type: ignore[return-value]

    @strawberry.field
    async def courses(self, info: strawberry.Info) -> list[Course]:
        """Get all courses."""
        from ..resolvers.course import resolve_courses

        return await resolve_courses(info)

    @strawberry.field
    async def enrollments(self, info: strawberry.Info) -> list[Enrollment]:
        """Get all enrollments."""
        from ..resolvers.course import resolve_enrollments

        return await resolve_enrollments(info)

    @strawberry.field
    async def assignments(self, info: strawberry.Info) -> list[Assignment]:
        """Get all assignments."""
        from ..resolvers.assignment import resolve_assignments

        return await resolve_assignments(info)

    @strawberry.field(name="assignmentGrades")
    async def assignment_grades(self, info: strawberry.Info) -> list[AssignmentGrade]:
        """Get all assignment grades."""
        from ..resolvers.assignment import resolve_assignment_grades

        return await resolve_assignment_grades(info)
