"""
Typed failures raised by the campus data layer.

Strawberry reports these through the ``errors`` array of a GraphQL response,
using ``str(exc)`` as the message.
"""

from __future__ import annotations

from typing import Any


class CampusError(Exception):
    """Base class for all campus data layer failures."""

    pass


class NotFound(CampusError):
    """Lookup or delete target is absent."""

    def __init__(self, key: str, value: Any, context: str = "Record", **extra: Any):
        self.key = key
        self.value = value
        self.context = context
        self.extra = extra

        criteria = f"{key} {value}"
        for k, v in extra.items():
            criteria += f" and {k} {v}"
        super().__init__(f"{context} with {criteria} is not found")


class AlreadyExists(CampusError):
    """A record with the same identifying pair already exists."""

    def __init__(self, context: str, **keys: Any):
        self.context = context
        self.keys = keys
        pairs = ", ".join(f"{k} {v}" for k, v in keys.items())
        super().__init__(f"{context} already exists for {pairs}")


class IntegrityGap(CampusError):
    """Schema/data integrity problem that must stop the service from starting."""

    pass


class InvalidIdentifier(CampusError, ValueError):
    """A wire ``ID`` value could not be parsed as a base-10 integer."""

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        super().__init__(f"{key} {value!r} is not a valid identifier")
