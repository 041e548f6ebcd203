"""Recursive evaluators for permits, privileges and permissions.

Each evaluator accepts a value of its recursive union and reduces it to a flat
list of terminal outcomes:

* awaitables are awaited and the result evaluated again,
* lists and tuples are evaluated concurrently and concatenated in order,
* literals (``str`` for permits, ``bool`` for privileges and permissions) become
  a single outcome carrying a :class:`~permitkit.contracts.Denial`,
* model instances (or mappings with a ``value`` key) are returned as is,
* callables are invoked with their context and the result evaluated again.

Anything else is a programming error and raises a ``TypeError`` subclass.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from .constants import PERMISSION, PERMIT, PRIVILEGE
from .contracts import (
    Approval,
    Denial,
    InvalidPermissionType,
    InvalidPermitType,
    InvalidPrivilegeType,
    PermissionLike,
    PermitLike,
    PrivilegeLike,
    Role,
)
from .utils.awaitables import gather_flat

logger = logging.getLogger(__name__)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


async def evaluate_permit(permit: PermitLike, target: Optional[Any] = None) -> List[Role]:
    """Evaluate ``permit`` for ``target``.

    Returns:
        The roles to verify when checking the permit, in declaration order.
    """
    if inspect.isawaitable(permit):
        return await evaluate_permit(await permit, target)

    if _is_sequence(permit):
        return await gather_flat(lambda item: evaluate_permit(item, target), permit)

    if isinstance(permit, str):
        return [Role(value=permit, error=Denial(PERMIT, permit))]

    if isinstance(permit, Role):
        return [permit]

    if isinstance(permit, Mapping) and "value" in permit:
        return [Role.model_validate(permit)]

    if callable(permit):
        return await evaluate_permit(permit(target), target)

    logger.debug(f"Rejecting permit of type {type(permit).__name__}")
    raise InvalidPermitType(f"Invalid Permit type: {type(permit).__name__}")


async def evaluate_privilege(privilege: PrivilegeLike, role: Role) -> List[Approval]:
    """Evaluate ``privilege`` against a single ``role``.

    Returns:
        The approvals the privilege states about the role. An empty list means
        the privilege said nothing about it.
    """
    if inspect.isawaitable(privilege):
        return await evaluate_privilege(await privilege, role)

    if _is_sequence(privilege):
        return await gather_flat(lambda item: evaluate_privilege(item, role), privilege)

    if isinstance(privilege, bool):
        return [Approval(value=privilege, error=Denial(PRIVILEGE, privilege))]

    if isinstance(privilege, Approval):
        return [privilege]

    if isinstance(privilege, Mapping) and "value" in privilege:
        return [Approval.model_validate(privilege)]

    if callable(privilege):
        return await evaluate_privilege(privilege(role), role)

    logger.debug(f"Rejecting privilege of type {type(privilege).__name__}")
    raise InvalidPrivilegeType(f"Invalid Privilege type: {type(privilege).__name__}")


async def evaluate_permission(
    permission: PermissionLike,
    privilege: PrivilegeLike,
    target: Optional[Any] = None,
) -> List[Approval]:
    """Evaluate ``permission`` with ``privilege`` for ``target``.

    Returns:
        The approvals produced by the permission.
    """
    if inspect.isawaitable(permission):
        return await evaluate_permission(await permission, privilege, target)

    if _is_sequence(permission):
        return await gather_flat(
            lambda item: evaluate_permission(item, privilege, target), permission
        )

    if isinstance(permission, bool):
        return [Approval(value=permission, error=Denial(PERMISSION, permission))]

    if isinstance(permission, Approval):
        return [permission]

    if isinstance(permission, Mapping) and "value" in permission:
        return [Approval.model_validate(permission)]

    if callable(permission):
        return await evaluate_permission(permission(privilege, target), privilege, target)

    logger.debug(f"Rejecting permission of type {type(permission).__name__}")
    raise InvalidPermissionType(f"Invalid Permission type: {type(permission).__name__}")
