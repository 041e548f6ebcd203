"""Core value contracts exchanged by the permitkit evaluators."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class Denial(Exception):
    """Error raised (or reported) for a failed approval.

    ``cause`` names the layer that produced the denial (``Permit``,
    ``Privilege``, ``Permission`` or ``Approval``) and ``value`` holds the raw
    literal that failed, when there is one.
    """

    def __init__(self, cause: str, value: Any = None) -> None:
        message = f"Denial: {cause}: {value}" if value is not None else f"Denial: {cause}"
        super().__init__(message)
        self.cause = cause
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Denial):
            return NotImplemented
        return self.cause == other.cause and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.cause, repr(self.value)))

    def __repr__(self) -> str:
        return f"Denial(cause={self.cause!r}, value={self.value!r})"


class InvalidPermitType(TypeError):
    """A permit was neither awaitable, sequence, string, role nor callable."""


class InvalidPrivilegeType(TypeError):
    """A privilege was neither awaitable, sequence, bool, approval nor callable."""


class InvalidPermissionType(TypeError):
    """A permission was neither awaitable, sequence, bool, approval nor callable."""


class UnsupportedContinuation(LookupError):
    """No handler is registered for a continuation tag."""

    def __init__(self, type_: str) -> None:
        super().__init__(f"No continuation handler registered for type {type_!r}")
        self.type = type_


class Approval(BaseModel):
    """Terminal outcome of an evaluation branch."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: bool = Field(..., description="True when access is approved")
    error: Any = Field(default=None, description="Cause reported when denied")


class Continuation(BaseModel):
    """A permission to be verified in another context.

    The ``type`` tag tells the receiving privilege how to interpret the
    nested ``permission``. The engine itself never looks inside.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: str
    permission: Any


class Role(BaseModel):
    """A single requirement produced by a permit."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Union[str, Continuation]
    error: Any = Field(default=None, description="Cause reported when no privilege addresses this role")

    @property
    def is_continuation(self) -> bool:
        return isinstance(self.value, Continuation)

    @classmethod
    def continuation(cls, type_: str, permission: Any, error: Any = None) -> "Role":
        """Create a role carrying ``permission`` under the continuation tag ``type_``."""
        return cls(value=Continuation(type=type_, permission=permission), error=error)


# Recursive unions accepted by the evaluators. Python cannot express the
# recursion precisely, so nested members are typed as ``Any``.
PermitFunction = Callable[[Any], Any]
PermitLike = Union[str, Role, Sequence[Any], Awaitable[Any], PermitFunction]

PrivilegeFunction = Callable[[Role], Any]
PrivilegeLike = Union[bool, Approval, Sequence[Any], Awaitable[Any], PrivilegeFunction]

PermissionFunction = Callable[[Any, Optional[Any]], Any]
PermissionLike = Union[bool, Approval, Sequence[Any], Awaitable[Any], PermissionFunction]
