from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...services.relationships import (
    course_assignments,
    course_professor,
    course_students,
    enrollment_course,
    user_by_id,
)
from ...store import CourseRecord, EnrollmentRecord, Role
from ..context import get_mutation_service, get_store
from ..discriminator import to_user_type

if TYPE_CHECKING:
    from ..types.assignment import Assignment
    from ..types.course import Course, Enrollment
    from ..types.user import Faculty, Student

logger = get_logger(__name__)


def to_course_type(record: CourseRecord) -> Course:
    from ..types.course import Course as CourseType

    return CourseType(
        id=strawberry.ID(str(record.id)),
        name=record.name,
        faculty_id=strawberry.ID(str(record.faculty_id)),
    )


def to_enrollment_type(record: EnrollmentRecord) -> Enrollment:
    from ..types.course import Enrollment as EnrollmentType

    return EnrollmentType(
        id=strawberry.ID(str(record.id)),
        name=record.name,
        student_id=strawberry.ID(str(record.student_id)),
    )


def _course_record(course: Course) -> CourseRecord:
    # Rebuilt from the GraphQL object so deleted courses still resolve their fields
    return CourseRecord(id=int(course.id), faculty_id=int(course.faculty_id), name=course.name)


# Query resolvers


async def resolve_courses(info: strawberry.Info) -> list[Course]:
    store = get_store(info)
    return [to_course_type(course) for course in store.courses]


async def resolve_enrollments(info: strawberry.Info) -> list[Enrollment]:
    store = get_store(info)
    return [to_enrollment_type(enrollment) for enrollment in store.enrollments]


# Mutations


async def create_course(info: strawberry.Info, name: str, faculty_id: strawberry.ID) -> Course:
    """Create a course. The faculty id is not checked for existence."""
    record = get_mutation_service(info).create_course(name, faculty_id)
    return to_course_type(record)


async def delete_course(info: strawberry.Info, course_id: strawberry.ID) -> Course:
    """Delete a course and return it. Enrollments and assignments are kept."""
    record = get_mutation_service(info).delete_course(course_id)
    return to_course_type(record)


async def add_course_student(
    info: strawberry.Info, name: str, student_id: strawberry.ID
) -> Enrollment:
    record = get_mutation_service(info).add_course_student(name, student_id)
    return to_enrollment_type(record)


async def delete_course_student(
    info: strawberry.Info, name: str, student_id: strawberry.ID
) -> Enrollment:
    record = get_mutation_service(info).delete_course_student(name, student_id)
    return to_enrollment_type(record)


# Field resolvers


async def resolve_course_professor(course: Course, info: strawberry.Info) -> Faculty | None:
    professor = course_professor(get_store(info), _course_record(course))
    if professor is None:
        logger.debug("Course has dangling faculty reference", course_id=course.id)
        return None
    return to_user_type(professor)  # type: ignore[return-value]


async def resolve_course_students(course: Course, info: strawberry.Info) -> list[Student]:
    students = course_students(get_store(info), _course_record(course))
    return [to_user_type(student) for student in students]  # type: ignore[misc]


async def resolve_course_assignments(course: Course, info: strawberry.Info) -> list[Assignment]:
    from .assignment import to_assignment_type

    assignments = course_assignments(get_store(info), _course_record(course))
    return [to_assignment_type(assignment) for assignment in assignments]


async def resolve_enrollment_course(enrollment: Enrollment, info: strawberry.Info) -> Course | None:
    record = EnrollmentRecord(
        id=int(enrollment.id), student_id=int(enrollment.student_id), name=enrollment.name
    )
    course = enrollment_course(get_store(info), record)
    return to_course_type(course) if course else None


async def resolve_enrollment_student(
    enrollment: Enrollment, info: strawberry.Info
) -> Student | None:
    user = user_by_id(get_store(info), int(enrollment.student_id))
    if user is None or user.role is not Role.Student:
        return None
    return to_user_type(user)  # type: ignore[return-value]
