"""Shared constants for permitkit."""

# Denial causes
PERMIT = "Permit"
PRIVILEGE = "Privilege"
PERMISSION = "Permission"
APPROVAL = "Approval"

# Literal denial causes re-tagged by the single-check require helpers
RETAGGED_CAUSES = (PERMIT, PRIVILEGE, PERMISSION)

# Configuration lookup
CONFIG_ENV_VAR = "PERMITKIT_CONFIG"
DEFAULT_CONFIG_PATH = "permitkit.yaml"
UNHANDLED_CONTINUATION_ENV_VAR = "PERMITKIT_UNHANDLED_CONTINUATION"
