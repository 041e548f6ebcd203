"""Registered handlers for continuation roles.

A continuation role carries a nested permission under a ``type`` tag. The
registry lets a privilege declare which tags it understands and how each one
is verified::

    registry = ContinuationRegistry()
    registry.register("tenant", delegate(tenant_privilege, tenant))
    privilege = registry.privilege(base=user_privilege)

Plain string roles go to ``base``; continuation roles go to the handler
registered for their tag.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Literal, Optional

from .check import check_permission
from .config import ContinuationConfig, PermitkitConfig, load_config
from .constants import PRIVILEGE
from .contracts import (
    Approval,
    Continuation,
    Denial,
    PrivilegeFunction,
    PrivilegeLike,
    Role,
    UnsupportedContinuation,
)
from .evaluate import evaluate_privilege

logger = logging.getLogger(__name__)

ContinuationHandler = Callable[[Continuation, Role], Any]
UnhandledPolicy = Literal["raise", "deny"]


def delegate(privilege: PrivilegeLike, target: Optional[Any] = None) -> ContinuationHandler:
    """Build a handler verifying the nested permission with ``privilege`` for ``target``."""

    async def handler(continuation: Continuation, role: Role) -> Approval:
        return await check_permission(continuation.permission, privilege, target)

    return handler


class ContinuationRegistry:
    """Maps continuation tags to the handlers that verify them."""

    def __init__(
        self,
        handlers: Optional[Dict[str, ContinuationHandler]] = None,
        unhandled: Optional[UnhandledPolicy] = None,
        config: Optional[PermitkitConfig] = None,
    ) -> None:
        self._handlers: Dict[str, ContinuationHandler] = {}
        if unhandled is None:
            unhandled = (config or load_config()).continuations.unhandled
        self.unhandled = ContinuationConfig(unhandled=unhandled).unhandled
        for type_, handler in (handlers or {}).items():
            self.register(type_, handler)

    @property
    def types(self) -> List[str]:
        return list(self._handlers)

    def __contains__(self, type_: object) -> bool:
        return type_ in self._handlers

    def register(self, type_: str, handler: ContinuationHandler) -> None:
        """Register ``handler`` for continuations tagged ``type_``."""
        if type_ in self._handlers:
            raise ValueError(f"Continuation handler already registered for type {type_!r}")
        self._handlers[type_] = handler
        logger.debug(f"Registered continuation handler for type {type_!r}")

    def handler(self, type_: str) -> Callable[[ContinuationHandler], ContinuationHandler]:
        """Decorator form of :meth:`register`."""

        def decorator(func: ContinuationHandler) -> ContinuationHandler:
            self.register(type_, func)
            return func

        return decorator

    async def verify(self, role: Role) -> List[Approval]:
        """Verify a continuation ``role`` with its registered handler."""
        continuation = role.value
        if not isinstance(continuation, Continuation):
            raise TypeError(f"Role {role.value!r} does not carry a continuation")

        handler = self._handlers.get(continuation.type)
        if handler is None:
            if self.unhandled == "deny":
                logger.warning(
                    f"No continuation handler for type {continuation.type!r}; denying role"
                )
                return [Approval(value=False, error=Denial(PRIVILEGE, continuation.type))]
            raise UnsupportedContinuation(continuation.type)

        return await evaluate_privilege(handler(continuation, role), role)

    def privilege(self, base: Optional[PrivilegeLike] = None) -> PrivilegeFunction:
        """Return a privilege routing continuation roles through this registry.

        Args:
            base: Privilege applied to plain string roles. When omitted, such
                roles receive no approval and are denied with their own error.
        """

        async def route(role: Role) -> List[Approval]:
            if isinstance(role.value, Continuation):
                return await self.verify(role)
            if base is None:
                return []
            return await evaluate_privilege(base, role)

        return route
