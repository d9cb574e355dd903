"""
Row types held by the in-memory entity store.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """User role, the discriminant for the concrete user variant.

    Member names double as the GraphQL enum values.
    """

    Admin = "Admin"
    Student = "Student"
    Faculty = "Faculty"


@dataclass
class UserRecord:
    id: int
    name: str
    email: str
    role: Role
    # Only meaningful for students
    gpa: float | None = None


@dataclass
class CourseRecord:
    id: int
    faculty_id: int
    name: str


@dataclass
class EnrollmentRecord:
    """Student-to-course link. ``name`` is the course name, not a course id."""

    id: int
    student_id: int
    name: str


@dataclass
class AssignmentRecord:
    id: int
    course_id: int
    name: str


@dataclass
class AssignmentGradeRecord:
    id: int
    assignment_id: int
    student_id: int
    grade: str
