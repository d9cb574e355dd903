"""
Tests for abstract User type dispatch
"""

import pytest
import strawberry

from campus.errors import IntegrityGap
from campus.graphql.discriminator import (
    USER_VARIANTS,
    ensure_role_variant_lockstep,
    resolve_user_type,
    to_user_type,
)
from campus.graphql.types.user import Admin, Faculty, Student
from campus.store import EntityStore, Role, UserRecord


class TestLockstep:
    """Tests for ensure_role_variant_lockstep."""

    def test_default_mapping_is_consistent(self):
        ensure_role_variant_lockstep()

    def test_every_role_is_mapped(self):
        assert set(USER_VARIANTS) == set(Role)

    def test_missing_variant_is_rejected(self):
        variants = {Role.Admin: Admin, Role.Student: Student}

        with pytest.raises(IntegrityGap, match="Faculty"):
            ensure_role_variant_lockstep(variants)

    def test_misnamed_variant_is_rejected(self):
        variants = {Role.Admin: Admin, Role.Student: Faculty, Role.Faculty: Student}

        with pytest.raises(IntegrityGap, match="role Student maps to user type named Faculty"):
            ensure_role_variant_lockstep(variants)

    def test_unknown_role_key_is_rejected(self):
        variants = {**USER_VARIANTS, "Janitor": Admin}

        with pytest.raises(IntegrityGap, match="Janitor"):
            ensure_role_variant_lockstep(variants)  # type: ignore[arg-type]

    def test_non_user_variant_is_rejected(self):
        @strawberry.type
        class Staff:
            id: strawberry.ID

        variants = {**USER_VARIANTS, Role.Admin: Staff}

        with pytest.raises(IntegrityGap, match="does not implement User"):
            ensure_role_variant_lockstep(variants)  # type: ignore[dict-item]


class TestResolveUserType:
    """Tests for resolve_user_type and to_user_type."""

    @pytest.mark.parametrize(
        "user_id,expected",
        [(0, "Admin"), (1, "Student"), (2, "Faculty")],
    )
    def test_name_is_role(self, store: EntityStore, user_id, expected):
        record = store.users.find(lambda u: u.id == user_id)

        assert resolve_user_type(record) == expected
        assert resolve_user_type(to_user_type(record)) == expected

    def test_unknown_role_raises(self):
        record = UserRecord(id=9, name="x", email="x@example.com", role="Janitor")  # type: ignore[arg-type]

        with pytest.raises(IntegrityGap, match="Janitor"):
            resolve_user_type(record)

    def test_student_object(self, store: EntityStore):
        student = to_user_type(store.users.all()[1])

        assert isinstance(student, Student)
        assert student.id == "1"
        assert student.gpa == 3.5
        assert student.role is Role.Student

    def test_student_without_gpa_defaults_to_zero(self):
        record = UserRecord(id=4, name="new", email="new@example.com", role=Role.Student)

        assert to_user_type(record).gpa == 0.0

    def test_admin_and_faculty_objects(self, store: EntityStore):
        admin, _, faculty = (to_user_type(u) for u in store.users)

        assert isinstance(admin, Admin)
        assert isinstance(faculty, Faculty)
        assert not hasattr(faculty, "gpa")
