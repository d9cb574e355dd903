"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry

from ...store.records import Role as RoleEnum

if TYPE_CHECKING:
    from .course import Course, Enrollment

Role = strawberry.enum(RoleEnum, name="Role", description="Valid user roles.")


@strawberry.interface
class User:
    """Abstract user; the concrete type is chosen by ``role``."""

    id: strawberry.ID
    name: str
    email: str
    role: Role

    @classmethod
    def resolve_type(cls, obj: Any, info: strawberry.Info, type_: Any) -> str:
        from ..discriminator import resolve_user_type

        return resolve_user_type(obj)


@strawberry.type
class Student(User):
    """Student user with a GPA and course enrollments."""

    gpa: float

    @strawberry.field
    async def courses(
        self, info: strawberry.Info
    ) -> list[Annotated["Enrollment", strawberry.lazy(".course")]]:
        """Get the enrollments held by this student."""
        from ..resolvers.user import resolve_student_courses

        return await resolve_student_courses(self, info)


@strawberry.type
class Faculty(User):
    """Faculty user who teaches courses."""

    @strawberry.field
    async def courses(
        self, info: strawberry.Info
    ) -> list[Annotated["Course", strawberry.lazy(".course")]]:
        """Get the courses taught by this faculty member."""
        from ..resolvers.user import resolve_faculty_courses

        return await resolve_faculty_courses(self, info)


@strawberry.type
class Admin(User):
    """Administrator user."""

    pass
