"""
Unit tests for the mutation service
"""

import pytest

from campus.errors import AlreadyExists, IntegrityGap, InvalidIdentifier, NotFound
from campus.services import MutationService
from campus.store import EntityStore, Role


class TestCreateUser:
    """Tests for create_user."""

    def test_appends_user_with_new_id(self, store: EntityStore, mutations: MutationService):
        user = mutations.create_user("two", "two@example.com", Role.Admin)

        assert user.id == 3
        assert store.users.all()[-1] is user
        assert user.gpa is None

    def test_student_gets_default_gpa(self, mutations: MutationService):
        user = mutations.create_user("s", "s@example.com", Role.Student)

        assert user.gpa == 0.0

    def test_student_keeps_given_gpa(self, mutations: MutationService):
        user = mutations.create_user("s", "s@example.com", Role.Student, gpa=3.9)

        assert user.gpa == 3.9

    def test_non_student_drops_gpa(self, mutations: MutationService):
        user = mutations.create_user("f", "f@example.com", Role.Faculty, gpa=3.9)

        assert user.gpa is None

    def test_role_given_as_value(self, mutations: MutationService):
        assert mutations.create_user("f", "f@example.com", "Faculty").role is Role.Faculty

    def test_unknown_role_is_integrity_gap(self, store: EntityStore, mutations: MutationService):
        with pytest.raises(IntegrityGap):
            mutations.create_user("x", "x@example.com", "Janitor")

        assert len(store.users) == 3


class TestCourses:
    """Tests for create_course and delete_course."""

    def test_create_parses_faculty_id(self, store: EntityStore, mutations: MutationService):
        course = mutations.create_course("X", "2")

        assert course.faculty_id == 2
        assert isinstance(course.faculty_id, int)
        assert course in store.courses.all()

    def test_create_accepts_dangling_faculty(self, mutations: MutationService):
        assert mutations.create_course("Orphan", "404").faculty_id == 404

    def test_create_rejects_non_numeric_faculty(
        self, store: EntityStore, mutations: MutationService
    ):
        with pytest.raises(InvalidIdentifier):
            mutations.create_course("X", "prof")

        assert len(store.courses) == 3

    def test_create_then_delete_round_trip(self, store: EntityStore, mutations: MutationService):
        course = mutations.create_course("X", "2")

        deleted = mutations.delete_course(str(course.id))

        assert deleted is course
        assert course not in store.courses.all()
        assert len(store.courses) == 3

    def test_delete_missing_course(self, mutations: MutationService):
        with pytest.raises(NotFound) as exc_info:
            mutations.delete_course("77")

        assert exc_info.value.key == "courseID"
        assert "77" in str(exc_info.value)

    def test_delete_does_not_cascade(self, store: EntityStore, mutations: MutationService):
        mutations.delete_course("0")

        assert any(a.course_id == 0 for a in store.assignments)
        assert any(e.name == "Course1" for e in store.enrollments)

    def test_id_not_reused_after_non_last_delete(
        self, store: EntityStore, mutations: MutationService
    ):
        mutations.delete_course("0")

        created = mutations.create_course("New", "2")

        surviving = [c.id for c in store.courses if c is not created]
        assert created.id not in surviving


class TestEnrollments:
    """Tests for add_course_student and delete_course_student."""

    def test_add(self, store: EntityStore, mutations: MutationService):
        enrollment = mutations.add_course_student("Course3", "1")

        assert enrollment.student_id == 1
        assert enrollment.name == "Course3"
        assert store.enrollments.all()[-1] is enrollment

    def test_duplicate_add_fails(self, store: EntityStore, mutations: MutationService):
        mutations.add_course_student("Course3", "1")

        with pytest.raises(AlreadyExists) as exc_info:
            mutations.add_course_student("Course3", "1")

        assert exc_info.value.keys == {"studentID": 1, "name": "Course3"}
        assert len([e for e in store.enrollments if e.name == "Course3"]) == 1

    def test_seeded_pair_is_duplicate(self, mutations: MutationService):
        with pytest.raises(AlreadyExists):
            mutations.add_course_student("Course1", "1")

    def test_same_course_different_student(self, mutations: MutationService):
        mutations.add_course_student("Course1", "5")

    def test_delete_then_add_again(self, store: EntityStore, mutations: MutationService):
        removed = mutations.delete_course_student("Course1", "1")

        assert removed not in store.enrollments.all()

        again = mutations.add_course_student("Course1", "1")
        assert again.id != removed.id

    def test_delete_missing_pair(self, mutations: MutationService):
        with pytest.raises(NotFound) as exc_info:
            mutations.delete_course_student("Course3", "1")

        message = str(exc_info.value)
        assert "studentID 1" in message
        assert "Course3" in message


class TestAssignments:
    """Tests for assignment and grade mutations."""

    def test_create_then_delete_leaves_length_unchanged(
        self, store: EntityStore, mutations: MutationService
    ):
        before = len(store.assignments)

        assignment = mutations.create_assignment("0", "Homework")
        assert len(store.assignments) == before + 1
        assert assignment.course_id == 0

        assert mutations.delete_assignment(str(assignment.id)) is assignment
        assert len(store.assignments) == before

    def test_create_accepts_dangling_course(self, mutations: MutationService):
        assert mutations.create_assignment("99", "Orphan").course_id == 99

    def test_delete_missing_assignment_fails(self, mutations: MutationService):
        with pytest.raises(NotFound, match="assignmentID 42"):
            mutations.delete_assignment("42")

    def test_grade_round_trip(self, store: EntityStore, mutations: MutationService):
        grade = mutations.create_assignment_grade("1", "1", "B+")

        assert (grade.assignment_id, grade.student_id, grade.grade) == (1, 1, "B+")
        assert mutations.delete_assignment_grade(str(grade.id)) is grade
        assert grade not in store.assignment_grades.all()

    def test_delete_missing_grade(self, mutations: MutationService):
        with pytest.raises(NotFound):
            mutations.delete_assignment_grade("8")
