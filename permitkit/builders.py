"""Helpers for composing permits and permissions."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Optional, Union

from .check import check_permit
from .contracts import (
    Approval,
    PermissionFunction,
    PermissionLike,
    PermitFunction,
    PermitLike,
    PrivilegeLike,
    Role,
)
from .evaluate import evaluate_permission, evaluate_permit
from .utils.awaitables import resolve

Mapper = Callable[[Any], Union[Any, Awaitable[Any]]]


class Permission:
    """Constructors for permission functions."""

    @staticmethod
    def create(permit: PermitLike) -> PermissionFunction:
        """Create a permission that checks ``permit`` with the given privilege."""

        async def permission(privilege: PrivilegeLike, target: Optional[Any] = None) -> Approval:
            return await check_permit(permit, privilege, target)

        return permission

    @staticmethod
    def map(permission: PermissionLike, mapper: Mapper) -> PermissionFunction:
        """Create a permission evaluating ``permission`` against ``mapper(target)``.

        ``mapper`` may be synchronous or return an awaitable.
        """

        async def mapped(privilege: PrivilegeLike, target: Optional[Any] = None) -> List[Approval]:
            return await evaluate_permission(permission, privilege, await resolve(mapper(target)))

        return mapped

    @staticmethod
    def continuation(type_: str, permission: PermissionLike, error: Any = None) -> PermissionFunction:
        """Create a permission that always verifies a continuation role.

        The role carries ``permission`` under the tag ``type_``; the privilege
        it is checked against decides how (and whether) to run it.
        """
        role = Role.continuation(type_, permission, error)

        async def continued(privilege: PrivilegeLike, target: Optional[Any] = None) -> Approval:
            return await check_permit(role, privilege, target)

        return continued


class Permit:
    """Constructors for permit functions."""

    @staticmethod
    def map(permit: PermitLike, mapper: Mapper) -> PermitFunction:
        """Create a permit evaluating ``permit`` against ``mapper(target)``."""

        async def mapped(target: Optional[Any] = None) -> List[Role]:
            return await evaluate_permit(permit, await resolve(mapper(target)))

        return mapped
