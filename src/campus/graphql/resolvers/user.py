from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...services import find_user
from ...services.relationships import faculty_courses, student_courses
from ...store import Role
from ..context import get_mutation_service, get_store
from ..discriminator import to_user_type
from .course import to_course_type, to_enrollment_type

if TYPE_CHECKING:
    from ..types.course import Course, Enrollment
    from ..types.user import Faculty, Student, User


async def resolve_hello(info: strawberry.Info, name: str) -> str:
    return f"Hello {name}!"


async def resolve_users(info: strawberry.Info) -> list[User]:
    store = get_store(info)
    return [to_user_type(user) for user in store.users]


async def resolve_user_by_role(
    info: strawberry.Info, role: Role, email: str | None, id: strawberry.ID | None
) -> User:
    """
    Resolve one user of the given role.

    A non-empty email wins over the id; see ``find_user``.
    """
    record = find_user(get_store(info), role, email=email, id=id)
    return to_user_type(record)


async def create_user(
    info: strawberry.Info, name: str, email: str, role: Role, gpa: float | None
) -> User:
    record = get_mutation_service(info).create_user(name, email, role, gpa)
    return to_user_type(record)


# Field resolvers


async def resolve_student_courses(student: Student, info: strawberry.Info) -> list[Enrollment]:
    store = get_store(info)
    return [to_enrollment_type(e) for e in student_courses(store, int(student.id))]


async def resolve_faculty_courses(faculty: Faculty, info: strawberry.Info) -> list[Course]:
    store = get_store(info)
    return [to_course_type(c) for c in faculty_courses(store, int(faculty.id))]
