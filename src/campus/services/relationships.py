"""
Derived relationship fields computed by scanning the store.

Every call re-scans the source collection, so results always reflect the
latest mutations. Nothing is cached: a list of n parents each asking for a
relationship costs O(n * m).
"""

from __future__ import annotations

from ..store import (
    AssignmentGradeRecord,
    AssignmentRecord,
    CourseRecord,
    EnrollmentRecord,
    EntityStore,
    Role,
    UserRecord,
)


def faculty_courses(store: EntityStore, faculty_id: int) -> list[CourseRecord]:
    """Courses taught by the faculty member."""
    return store.courses.filter(lambda c: c.faculty_id == faculty_id)


def student_courses(store: EntityStore, student_id: int) -> list[EnrollmentRecord]:
    """Enrollments held by the student."""
    return store.enrollments.filter(lambda e: e.student_id == student_id)


def course_professor(store: EntityStore, course: CourseRecord) -> UserRecord | None:
    """Faculty member referenced by ``course.faculty_id``, None if dangling."""
    return store.users.find(lambda u: u.id == course.faculty_id and u.role is Role.Faculty)


def course_students(store: EntityStore, course: CourseRecord) -> list[UserRecord]:
    """Students with an enrollment naming this course, in user order."""
    student_ids = {e.student_id for e in store.enrollments if e.name == course.name}
    return store.users.filter(lambda u: u.id in student_ids and u.role is Role.Student)


def course_assignments(store: EntityStore, course: CourseRecord) -> list[AssignmentRecord]:
    return store.assignments.filter(lambda a: a.course_id == course.id)


def enrollment_course(store: EntityStore, enrollment: EnrollmentRecord) -> CourseRecord | None:
    # Enrollments join courses by name; the first course with that name wins
    return store.courses.find(lambda c: c.name == enrollment.name)


def assignment_course(store: EntityStore, assignment: AssignmentRecord) -> CourseRecord | None:
    return store.courses.find(lambda c: c.id == assignment.course_id)


def assignment_grades(
    store: EntityStore, assignment: AssignmentRecord
) -> list[AssignmentGradeRecord]:
    return store.assignment_grades.filter(lambda g: g.assignment_id == assignment.id)


def grade_assignment(
    store: EntityStore, grade: AssignmentGradeRecord
) -> AssignmentRecord | None:
    return store.assignments.find(lambda a: a.id == grade.assignment_id)


def user_by_id(store: EntityStore, user_id: int) -> UserRecord | None:
    """Any user with this id regardless of role, None if dangling."""
    return store.users.find(lambda u: u.id == user_id)
