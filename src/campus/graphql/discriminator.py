"""
Runtime dispatch from the abstract ``User`` to its concrete GraphQL type.

``role`` is the only discriminant. Every Role member must map to exactly one
concrete type whose GraphQL name equals the role value; the mapping is checked
once at startup so a drift between the enum and the types stops the server
instead of failing individual queries.
"""

from __future__ import annotations

from typing import Any

import strawberry

from ..errors import IntegrityGap
from ..store import Role, UserRecord
from .types.user import Admin, Faculty, Student, User

USER_VARIANTS: dict[Role, type[User]] = {
    Role.Admin: Admin,
    Role.Student: Student,
    Role.Faculty: Faculty,
}


def _graphql_name(variant: type) -> str:
    return variant.__strawberry_definition__.name  # type: ignore[attr-defined]


def ensure_role_variant_lockstep(variants: dict[Role, type[User]] | None = None) -> None:
    """Check that roles and concrete user types correspond one to one.

    Raises:
        IntegrityGap: If a role has no variant, a variant has no role, a
            variant does not implement ``User``, or names disagree
    """
    if variants is None:
        variants = USER_VARIANTS

    problems: list[str] = []

    missing = [role.value for role in Role if role not in variants]
    if missing:
        problems.append(f"roles without a user type: {', '.join(missing)}")

    for role, variant in variants.items():
        if not isinstance(role, Role):
            problems.append(f"user type {variant.__name__} is keyed by unknown role {role!r}")
            continue
        if not (isinstance(variant, type) and issubclass(variant, User)):
            problems.append(f"{variant!r} does not implement User")
            continue
        name = _graphql_name(variant)
        if name != role.value:
            problems.append(f"role {role.value} maps to user type named {name}")

    if problems:
        raise IntegrityGap("User role/type mismatch: " + "; ".join(problems))


def resolve_user_type(value: Any) -> str:
    """Return the concrete GraphQL type name for a user value: its role, verbatim."""
    role = value.role
    if not isinstance(role, Role) or role not in USER_VARIANTS:
        raise IntegrityGap(f"User {getattr(value, 'id', None)} has unknown role {role!r}")
    return role.value


def to_user_type(record: UserRecord) -> User:
    """Build the concrete GraphQL object for a stored user."""
    resolve_user_type(record)
    variant = USER_VARIANTS[record.role]

    fields: dict[str, Any] = {
        "id": strawberry.ID(str(record.id)),
        "name": record.name,
        "email": record.email,
        "role": record.role,
    }
    if variant is Student:
        fields["gpa"] = record.gpa if record.gpa is not None else 0.0

    return variant(**fields)
