"""
Seed rows loaded into the entity store at process start.

Each function returns fresh record instances so that separate stores never
share mutable rows.
"""

from __future__ import annotations

from .records import (
    AssignmentGradeRecord,
    AssignmentRecord,
    CourseRecord,
    EnrollmentRecord,
    Role,
    UserRecord,
)


def seed_users() -> list[UserRecord]:
    return [
        UserRecord(id=0, name="zero", email="zero@example.com", role=Role.Admin),
        UserRecord(id=1, name="one", email="one@example.com", role=Role.Student, gpa=3.5),
        UserRecord(id=2, name="prof", email="admin@example.com", role=Role.Faculty),
    ]


def seed_courses() -> list[CourseRecord]:
    return [
        CourseRecord(id=0, faculty_id=2, name="Course1"),
        CourseRecord(id=1, faculty_id=2, name="Course2"),
        CourseRecord(id=2, faculty_id=2, name="Course3"),
    ]


def seed_enrollments() -> list[EnrollmentRecord]:
    return [
        EnrollmentRecord(id=0, student_id=1, name="Course1"),
        EnrollmentRecord(id=1, student_id=1, name="Course2"),
    ]


def seed_assignments() -> list[AssignmentRecord]:
    return [
        AssignmentRecord(id=0, course_id=0, name="Assignment1"),
        AssignmentRecord(id=1, course_id=1, name="Assignment2"),
    ]


def seed_assignment_grades() -> list[AssignmentGradeRecord]:
    return [
        AssignmentGradeRecord(id=0, assignment_id=0, student_id=1, grade="A"),
    ]
