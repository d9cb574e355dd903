"""
Single-record lookups against the entity store.
"""

from __future__ import annotations

import re
from typing import Any

from ..errors import InvalidIdentifier, NotFound
from ..logging import get_logger
from ..store import AssignmentRecord, CourseRecord, EntityStore, Role, UserRecord

logger = get_logger(__name__)

_DECIMAL_ID = re.compile(r"^\s*[+-]?\d+\s*$")


def parse_id(value: Any, key: str = "id") -> int:
    """Parse a wire ``ID`` value as a base-10 integer.

    Strings such as ``"12abc"`` or ``"1_000"`` are rejected instead of being
    truncated or read leniently.

    Raises:
        InvalidIdentifier: If the value is missing or not a decimal integer
    """
    if isinstance(value, bool):
        raise InvalidIdentifier(key, value)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DECIMAL_ID.match(value):
        return int(value, 10)
    raise InvalidIdentifier(key, value)


def find_user(
    store: EntityStore,
    role: Role,
    email: str | None = None,
    id: Any = None,
) -> UserRecord:
    """
    Find one user of the given role by email or id.

    A non-empty email takes precedence and the id is ignored entirely.
    Otherwise the id is parsed and compared; an id that does not parse can
    never match.

    Raises:
        NotFound: If no user with that role matches; carries the search key
            and its literal value
    """
    if email:
        user = store.users.find(lambda u: u.email == email and u.role is role)
        if user is None:
            logger.info("User lookup failed", role=role.value, email=email)
            raise NotFound("email", email, role.value)
        return user

    try:
        target = parse_id(id)
    except InvalidIdentifier:
        logger.info("User lookup with unusable id", role=role.value, id=id)
        raise NotFound("id", id, role.value) from None

    user = store.users.find(lambda u: u.id == target and u.role is role)
    if user is None:
        logger.info("User lookup failed", role=role.value, id=target)
        raise NotFound("id", target, role.value)
    return user


def find_course(store: EntityStore, course_id: Any) -> CourseRecord:
    """Find a course by wire id.

    Raises:
        InvalidIdentifier: If the id is not a decimal integer
        NotFound: If no course has that id
    """
    target = parse_id(course_id, "courseID")
    course = store.courses.find(lambda c: c.id == target)
    if course is None:
        raise NotFound("courseID", course_id, "Course")
    return course


def find_assignment(store: EntityStore, assignment_id: Any) -> AssignmentRecord:
    target = parse_id(assignment_id, "assignmentID")
    assignment = store.assignments.find(lambda a: a.id == target)
    if assignment is None:
        raise NotFound("assignmentID", assignment_id, "Assignment")
    return assignment
