"""permitkit: composable async authorization checks."""

from .builders import Permission, Permit
from .check import (
    are_permissioned,
    are_permitted,
    check_permission,
    check_permissions,
    check_permit,
    check_permits,
    create_role_set,
    create_role_sets,
    is_permissioned,
    is_permitted,
    require_permission,
    require_permissions,
    require_permit,
    require_permits,
)
from .config import PermitkitConfig, load_config
from .continuations import ContinuationRegistry, delegate
from .contracts import (
    Approval,
    Continuation,
    Denial,
    InvalidPermissionType,
    InvalidPermitType,
    InvalidPrivilegeType,
    Role,
    UnsupportedContinuation,
)
from .evaluate import evaluate_permission, evaluate_permit, evaluate_privilege

__version__ = "0.1.0"
__all__ = [
    "Approval",
    "Continuation",
    "ContinuationRegistry",
    "Denial",
    "InvalidPermissionType",
    "InvalidPermitType",
    "InvalidPrivilegeType",
    "Permission",
    "Permit",
    "PermitkitConfig",
    "Role",
    "UnsupportedContinuation",
    "are_permissioned",
    "are_permitted",
    "check_permission",
    "check_permissions",
    "check_permit",
    "check_permits",
    "create_role_set",
    "create_role_sets",
    "delegate",
    "evaluate_permission",
    "evaluate_permit",
    "evaluate_privilege",
    "is_permissioned",
    "is_permitted",
    "load_config",
    "require_permission",
    "require_permissions",
    "require_permit",
    "require_permits",
]
