from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...services.relationships import (
    assignment_course,
    assignment_grades,
    grade_assignment,
    user_by_id,
)
from ...store import AssignmentGradeRecord, AssignmentRecord
from ..context import get_mutation_service, get_store
from ..discriminator import to_user_type
from .course import to_course_type

if TYPE_CHECKING:
    from ..types.assignment import Assignment, AssignmentGrade
    from ..types.course import Course
    from ..types.user import User


def to_assignment_type(record: AssignmentRecord) -> Assignment:
    from ..types.assignment import Assignment as AssignmentType

    return AssignmentType(
        id=strawberry.ID(str(record.id)),
        name=record.name,
        course_id=strawberry.ID(str(record.course_id)),
    )


def to_grade_type(record: AssignmentGradeRecord) -> AssignmentGrade:
    from ..types.assignment import AssignmentGrade as AssignmentGradeType

    return AssignmentGradeType(
        id=strawberry.ID(str(record.id)),
        grade=record.grade,
        assignment_id=strawberry.ID(str(record.assignment_id)),
        student_id=strawberry.ID(str(record.student_id)),
    )


def _assignment_record(assignment: Assignment) -> AssignmentRecord:
    return AssignmentRecord(
        id=int(assignment.id), course_id=int(assignment.course_id), name=assignment.name
    )


# Query resolvers


async def resolve_assignments(info: strawberry.Info) -> list[Assignment]:
    store = get_store(info)
    return [to_assignment_type(assignment) for assignment in store.assignments]


async def resolve_assignment_grades(info: strawberry.Info) -> list[AssignmentGrade]:
    store = get_store(info)
    return [to_grade_type(grade) for grade in store.assignment_grades]


# Mutations


async def create_assignment(
    info: strawberry.Info, course_id: strawberry.ID, name: str
) -> Assignment:
    """Create an assignment. The course id is not checked for existence."""
    record = get_mutation_service(info).create_assignment(course_id, name)
    return to_assignment_type(record)


async def delete_assignment(info: strawberry.Info, assignment_id: strawberry.ID) -> Assignment:
    """Delete an assignment; an absent id fails with NotFound."""
    record = get_mutation_service(info).delete_assignment(assignment_id)
    return to_assignment_type(record)


async def create_assignment_grade(
    info: strawberry.Info,
    assignment_id: strawberry.ID,
    student_id: strawberry.ID,
    grade: str,
) -> AssignmentGrade:
    record = get_mutation_service(info).create_assignment_grade(assignment_id, student_id, grade)
    return to_grade_type(record)


async def delete_assignment_grade(info: strawberry.Info, grade_id: strawberry.ID) -> AssignmentGrade:
    record = get_mutation_service(info).delete_assignment_grade(grade_id)
    return to_grade_type(record)


# Field resolvers


async def resolve_assignment_course(assignment: Assignment, info: strawberry.Info) -> Course | None:
    course = assignment_course(get_store(info), _assignment_record(assignment))
    return to_course_type(course) if course else None


async def resolve_assignment_grade_list(
    assignment: Assignment, info: strawberry.Info
) -> list[AssignmentGrade]:
    grades = assignment_grades(get_store(info), _assignment_record(assignment))
    return [to_grade_type(grade) for grade in grades]


async def resolve_grade_assignment(
    grade: AssignmentGrade, info: strawberry.Info
) -> Assignment | None:
    record = AssignmentGradeRecord(
        id=int(grade.id),
        assignment_id=int(grade.assignment_id),
        student_id=int(grade.student_id),
        grade=grade.grade,
    )
    assignment = grade_assignment(get_store(info), record)
    return to_assignment_type(assignment) if assignment else None


async def resolve_grade_student(grade: AssignmentGrade, info: strawberry.Info) -> User | None:
    user = user_by_id(get_store(info), int(grade.student_id))
    return to_user_type(user) if user else None
