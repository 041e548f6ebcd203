"""Checks that reduce evaluations to a single approval."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Sequence, Tuple

from .constants import APPROVAL, PERMISSION, PERMIT, RETAGGED_CAUSES
from .contracts import (
    Approval,
    Continuation,
    Denial,
    PermissionLike,
    PermitLike,
    PrivilegeLike,
)
from .evaluate import evaluate_permission, evaluate_permit, evaluate_privilege

logger = logging.getLogger(__name__)

APPROVED = Approval(value=True)


def _first_denial(approvals: List[Approval]) -> Optional[Approval]:
    for approval in approvals:
        if not approval.value:
            return approval
    return None


def _unpack(check: Sequence[Any]) -> Tuple[Any, Any, Any]:
    if len(check) == 2:
        return check[0], check[1], None
    if len(check) == 3:
        return check[0], check[1], check[2]
    raise ValueError(
        f"Expected a (subject, privilege) or (subject, privilege, target) tuple, got {len(check)} items"
    )


def _as_exception(error: Any, cause: str) -> BaseException:
    """Return ``error`` if it can be raised, otherwise wrap it in a :class:`Denial`."""
    if isinstance(error, BaseException):
        return error
    return Denial(cause, error)


def _raise_denied(error: Any, cause: str) -> None:
    # Literal denials made by the evaluators are re-tagged with the calling
    # layer; caller-supplied errors, Denial subclasses included, are not.
    if type(error) is Denial and error.cause in RETAGGED_CAUSES:
        raise Denial(cause, error.value) from error
    raise _as_exception(error, cause)


async def check_permit(
    permit: PermitLike, privilege: PrivilegeLike, target: Optional[Any] = None
) -> Approval:
    """Check ``permit`` against ``privilege`` for ``target``.

    Roles are verified one after another. The first role the privilege says
    nothing about, or the first false approval, ends the check.
    """
    for role in await evaluate_permit(permit, target):
        approvals = await evaluate_privilege(privilege, role)

        if not approvals:
            logger.debug(f"No approval stated for role {role.value!r}; denying")
            return Approval(value=False, error=role.error)

        denial = _first_denial(approvals)
        if denial is not None:
            logger.debug(f"Role {role.value!r} denied: {denial.error!r}")
            return denial

    return APPROVED


async def check_permission(
    permission: PermissionLike, privilege: PrivilegeLike, target: Optional[Any] = None
) -> Approval:
    """Check ``permission`` with ``privilege`` for ``target``.

    A permission that produces no approval at all is denied with
    ``Denial('Approval')``.
    """
    approvals = await evaluate_permission(permission, privilege, target)

    if not approvals:
        logger.debug("Permission produced no approval; denying")
        return Approval(value=False, error=Denial(APPROVAL))

    denial = _first_denial(approvals)
    if denial is not None:
        logger.debug(f"Permission denied: {denial.error!r}")
        return denial

    return APPROVED


async def check_permits(*checks: Sequence[Any]) -> Approval:
    """Check ``(permit, privilege[, target])`` tuples in order.

    Stops at the first failure; later tuples are never evaluated.
    """
    for check in checks:
        permit, privilege, target = _unpack(check)
        approval = await check_permit(permit, privilege, target)
        if not approval.value:
            return approval
    return APPROVED


async def check_permissions(*checks: Sequence[Any]) -> Approval:
    """Check ``(permission, privilege[, target])`` tuples in order."""
    for check in checks:
        permission, privilege, target = _unpack(check)
        approval = await check_permission(permission, privilege, target)
        if not approval.value:
            return approval
    return APPROVED


async def is_permitted(
    permit: PermitLike, privilege: PrivilegeLike, target: Optional[Any] = None
) -> bool:
    return (await check_permit(permit, privilege, target)).value


async def is_permissioned(
    permission: PermissionLike, privilege: PrivilegeLike, target: Optional[Any] = None
) -> bool:
    return (await check_permission(permission, privilege, target)).value


async def are_permitted(*checks: Sequence[Any]) -> bool:
    return (await check_permits(*checks)).value


async def are_permissioned(*checks: Sequence[Any]) -> bool:
    return (await check_permissions(*checks)).value


async def require_permit(
    permit: PermitLike, privilege: PrivilegeLike, target: Optional[Any] = None
) -> Any:
    """Check ``permit`` and raise if it is denied.

    Primitive errors (strings, booleans, numbers, ``None``) are wrapped in a
    ``Denial('Permit', error)`` and literal denials from the evaluators are
    re-tagged as ``Denial('Permit', value)``. Any other exception instance,
    ``Denial('Approval')`` and ``Denial`` subclasses included, is raised
    unchanged.

    Returns:
        ``target``, so calls can be chained.
    """
    approval = await check_permit(permit, privilege, target)
    if not approval.value:
        _raise_denied(approval.error, PERMIT)
    return target


async def require_permission(
    permission: PermissionLike, privilege: PrivilegeLike, target: Optional[Any] = None
) -> Any:
    """Check ``permission`` and raise if it is denied.

    Returns:
        ``target``, so calls can be chained.
    """
    approval = await check_permission(permission, privilege, target)
    if not approval.value:
        _raise_denied(approval.error, PERMISSION)
    return target


async def require_permits(*checks: Sequence[Any]) -> None:
    """Run :func:`check_permits` and raise the first failure's error."""
    approval = await check_permits(*checks)
    if not approval.value:
        raise _as_exception(approval.error, PERMIT)


async def require_permissions(*checks: Sequence[Any]) -> None:
    """Run :func:`check_permissions` and raise the first failure's error."""
    approval = await check_permissions(*checks)
    if not approval.value:
        raise _as_exception(approval.error, PERMISSION)


def _deduplicate(values: List[Any]) -> List[Any]:
    # Continuations are compared by identity; their permissions are opaque.
    unique: List[Any] = []
    seen: set = set()
    for value in values:
        if isinstance(value, Continuation):
            if not any(value is other for other in unique):
                unique.append(value)
        elif value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


async def create_role_set(permit: PermitLike, target: Optional[Any] = None) -> List[Any]:
    """Return the distinct role values required by ``permit`` for ``target``."""
    roles = await evaluate_permit(permit, target)
    return _deduplicate([role.value for role in roles])


async def create_role_sets(*pairs: Sequence[Any]) -> List[Any]:
    """Return the distinct role values across several ``(permit[, target])`` pairs."""
    role_sets = await asyncio.gather(
        *(create_role_set(pair[0], pair[1] if len(pair) > 1 else None) for pair in pairs)
    )
    return _deduplicate([value for role_set in role_sets for value in role_set])
