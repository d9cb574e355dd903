"""
Tests for derived relationship lookups.
"""

from campus.services import MutationService
from campus.services.relationships import (
    assignment_course,
    assignment_grades,
    course_assignments,
    course_professor,
    course_students,
    enrollment_course,
    faculty_courses,
    grade_assignment,
    student_courses,
    user_by_id,
)
from campus.store import EntityStore, Role


def test_faculty_courses_filters_by_faculty_id(store: EntityStore):
    courses = faculty_courses(store, 2)

    assert [c.name for c in courses] == ["Course1", "Course2", "Course3"]
    assert all(c.faculty_id == 2 for c in courses)


def test_faculty_without_courses_gets_empty_list(store: EntityStore):
    assert faculty_courses(store, 0) == []


def test_faculty_courses_reflect_mutations(store: EntityStore, mutations: MutationService):
    mutations.create_course("Other", "9")
    mutations.delete_course("1")

    assert [c.name for c in faculty_courses(store, 2)] == ["Course1", "Course3"]
    assert [c.name for c in faculty_courses(store, 9)] == ["Other"]


def test_student_courses(store: EntityStore, mutations: MutationService):
    assert [e.name for e in student_courses(store, 1)] == ["Course1", "Course2"]

    mutations.add_course_student("Course3", "1")

    assert [e.name for e in student_courses(store, 1)] == ["Course1", "Course2", "Course3"]
    assert student_courses(store, 42) == []


def test_course_professor(store: EntityStore, mutations: MutationService):
    course = store.courses.all()[0]
    assert course_professor(store, course).name == "prof"

    dangling = mutations.create_course("Nobody", "77")
    assert course_professor(store, dangling) is None

    # faculty_id pointing at a non-faculty user is not a professor
    wrong_role = mutations.create_course("Wrong", "1")
    assert course_professor(store, wrong_role) is None


def test_course_students_joins_by_name(store: EntityStore):
    course1, _, course3 = store.courses.all()

    assert [u.id for u in course_students(store, course1)] == [1]
    assert all(u.role is Role.Student for u in course_students(store, course1))
    assert course_students(store, course3) == []


def test_course_assignments(store: EntityStore):
    course1 = store.courses.all()[0]

    assert [a.name for a in course_assignments(store, course1)] == ["Assignment1"]


def test_enrollment_course(store: EntityStore, mutations: MutationService):
    enrollment = store.enrollments.all()[0]
    assert enrollment_course(store, enrollment).id == 0

    orphan = mutations.add_course_student("Ghost Course", "1")
    assert enrollment_course(store, orphan) is None


def test_assignment_relations(store: EntityStore, mutations: MutationService):
    assignment = store.assignments.all()[0]

    assert assignment_course(store, assignment).name == "Course1"
    assert [g.grade for g in assignment_grades(store, assignment)] == ["A"]

    mutations.delete_course("0")
    assert assignment_course(store, assignment) is None


def test_grade_relations(store: EntityStore):
    grade = store.assignment_grades.all()[0]

    assert grade_assignment(store, grade).name == "Assignment1"
    assert user_by_id(store, grade.student_id).name == "one"
    assert user_by_id(store, 404) is None
