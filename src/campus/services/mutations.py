"""
Create/delete operations against the entity store.
"""

from __future__ import annotations

from typing import Any

from ..errors import AlreadyExists, IntegrityGap, NotFound
from ..logging import get_logger
from ..store import (
    AssignmentGradeRecord,
    AssignmentRecord,
    CourseRecord,
    EnrollmentRecord,
    EntityStore,
    Role,
    UserRecord,
)
from .lookup import find_assignment, find_course, parse_id

logger = get_logger(__name__)


class MutationService:
    """
    Write operations for one entity store.

    Each operation holds the owning collection's lock for its whole
    find-then-mutate sequence. Foreign keys are never checked for existence
    and deletes never cascade to dependent rows.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    # Users

    def create_user(
        self, name: str, email: str, role: Role | str, gpa: float | None = None
    ) -> UserRecord:
        """Append a user with a freshly allocated id.

        Students get ``gpa`` (default 0.0); other roles do not carry one.
        """
        try:
            role = Role(role.value if isinstance(role, Role) else role)
        except ValueError:
            raise IntegrityGap(f"Role {role!r} has no concrete user variant") from None

        if role is Role.Student:
            gpa = gpa if gpa is not None else 0.0
        else:
            gpa = None

        user = self.store.users.insert(
            lambda new_id: UserRecord(id=new_id, name=name, email=email, role=role, gpa=gpa)
        )
        logger.info("User created", user_id=user.id, role=role.value)
        return user

    # Courses

    def create_course(self, name: str, faculty_id: Any) -> CourseRecord:
        faculty = parse_id(faculty_id, "faculty_id")
        course = self.store.courses.insert(
            lambda new_id: CourseRecord(id=new_id, faculty_id=faculty, name=name)
        )
        logger.info("Course created", course_id=course.id, faculty_id=faculty)
        return course

    def delete_course(self, course_id: Any) -> CourseRecord:
        """Remove a course. Its enrollments and assignments are left in place."""
        with self.store.courses.lock:
            course = find_course(self.store, course_id)
            self.store.courses.remove(course)
        logger.info("Course deleted", course_id=course.id)
        return course

    # Enrollments

    def add_course_student(self, name: str, student_id: Any) -> EnrollmentRecord:
        """Enroll a student in the course called ``name``.

        Raises:
            AlreadyExists: If the (student, course name) pair is already enrolled
        """
        student = parse_id(student_id, "studentID")
        enrollments = self.store.enrollments
        with enrollments.lock:
            existing = enrollments.find(lambda e: e.student_id == student and e.name == name)
            if existing is not None:
                raise AlreadyExists("Enrollment", studentID=student, name=name)
            enrollment = enrollments.insert(
                lambda new_id: EnrollmentRecord(id=new_id, student_id=student, name=name)
            )
        logger.info("Student enrolled", enrollment_id=enrollment.id, student_id=student, name=name)
        return enrollment

    def delete_course_student(self, name: str, student_id: Any) -> EnrollmentRecord:
        student = parse_id(student_id, "studentID")
        enrollments = self.store.enrollments
        with enrollments.lock:
            enrollment = enrollments.find(lambda e: e.student_id == student and e.name == name)
            if enrollment is None:
                raise NotFound("studentID", student, "Enrollment", name=name)
            enrollments.remove(enrollment)
        logger.info("Student unenrolled", enrollment_id=enrollment.id, student_id=student, name=name)
        return enrollment

    # Assignments

    def create_assignment(self, course_id: Any, name: str) -> AssignmentRecord:
        course = parse_id(course_id, "courseID")
        assignment = self.store.assignments.insert(
            lambda new_id: AssignmentRecord(id=new_id, course_id=course, name=name)
        )
        logger.info("Assignment created", assignment_id=assignment.id, course_id=course)
        return assignment

    def delete_assignment(self, assignment_id: Any) -> AssignmentRecord:
        """Remove an assignment.

        Absent ids fail with NotFound like every other delete. Grades that
        point at the assignment are left in place.
        """
        with self.store.assignments.lock:
            assignment = find_assignment(self.store, assignment_id)
            self.store.assignments.remove(assignment)
        logger.info("Assignment deleted", assignment_id=assignment.id)
        return assignment

    # Assignment grades

    def create_assignment_grade(
        self, assignment_id: Any, student_id: Any, grade: str
    ) -> AssignmentGradeRecord:
        assignment = parse_id(assignment_id, "assignmentID")
        student = parse_id(student_id, "studentID")
        record = self.store.assignment_grades.insert(
            lambda new_id: AssignmentGradeRecord(
                id=new_id, assignment_id=assignment, student_id=student, grade=grade
            )
        )
        logger.info(
            "Assignment graded",
            grade_id=record.id,
            assignment_id=assignment,
            student_id=student,
        )
        return record

    def delete_assignment_grade(self, grade_id: Any) -> AssignmentGradeRecord:
        target = parse_id(grade_id, "gradeID")
        grades = self.store.assignment_grades
        with grades.lock:
            record = grades.find(lambda g: g.id == target)
            if record is None:
                raise NotFound("gradeID", grade_id, "AssignmentGrade")
            grades.remove(record)
        logger.info("Assignment grade deleted", grade_id=record.id)
        return record
