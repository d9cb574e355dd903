"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.assignment import Assignment, AssignmentGrade
from ..types.course import Course, Enrollment
from ..types.user import Role, User

CourseID = Annotated[strawberry.ID, strawberry.argument(name="courseID")]
StudentID = Annotated[strawberry.ID, strawberry.argument(name="studentID")]
AssignmentID = Annotated[strawberry.ID, strawberry.argument(name="assignmentID")]
GradeID = Annotated[strawberry.ID, strawberry.argument(name="gradeID")]


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(
        self,
        info: strawberry.Info,
        name: str,
        email: str,
        role: Role,
        gpa: float | None = None,
    ) -> User:
        """Create a user; students default to a GPA of 0.0."""
        from ..resolvers.user import create_user

        return await create_user(info, name, email, role, gpa)

    # Course mutations
    @strawberry.mutation(name="createCourse")
    async def create_course(
        self, info: strawberry.Info, name: str, faculty_id: strawberry.ID
    ) -> Course:
        """Create a course taught by the given faculty id."""
        from ..resolvers.course import create_course

        return await create_course(info, name, faculty_id)

    @strawberry.mutation(name="deleteCourse")
    async def delete_course(self, info: strawberry.Info, course_id: CourseID) -> Course:
        """Delete a course."""
        from ..resolvers.course import delete_course

        return await delete_course(info, course_id)

    @strawberry.mutation(name="addCourseStudent")
    async def add_course_student(
        self, info: strawberry.Info, name: str, student_id: StudentID
    ) -> Enrollment:
        """Enroll a student in the named course."""
        from ..resolvers.course import add_course_student

        return await add_course_student(info, name, student_id)

    @strawberry.mutation(name="deleteCourseStudent")
    async def delete_course_student(
        self, info: strawberry.Info, name: str, student_id: StudentID
    ) -> Enrollment:
        """Remove a student's enrollment in the named course."""
        from ..resolvers.course import delete_course_student

        return await delete_course_student(info, name, student_id)

    # Assignment mutations
    @strawberry.mutation(name="createAssignment")
    async def create_assignment(
        self, info: strawberry.Info, course_id: CourseID, name: str
    ) -> Assignment:
        """Create an assignment for a course."""
        from ..resolvers.assignment import create_assignment

        return await create_assignment(info, course_id, name)

    @strawberry.mutation(name="deleteAssignment")
    async def delete_assignment(
        self, info: strawberry.Info, assignment_id: AssignmentID
    ) -> Assignment:
        """Delete an assignment."""
        from ..resolvers.assignment import delete_assignment

        return await delete_assignment(info, assignment_id)

    @strawberry.mutation(name="createAssignmentGrade")
    async def create_assignment_grade(
        self,
        info: strawberry.Info,
        assignment_id: AssignmentID,
        student_id: StudentID,
        grade: str,
    ) -> AssignmentGrade:
        """Record a student's grade on an assignment."""
        from ..resolvers.assignment import create_assignment_grade

        return await create_assignment_grade(info, assignment_id, student_id, grade)

    @strawberry.mutation(name="deleteAssignmentGrade")
    async def delete_assignment_grade(
        self, info: strawberry.Info, grade_id: GradeID
    ) -> AssignmentGrade:
        """Delete a recorded grade."""
        from ..resolvers.assignment import delete_assignment_grade

        return await delete_assignment_grade(info, grade_id)
