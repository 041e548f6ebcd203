from __future__ import annotations

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel

from .constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, UNHANDLED_CONTINUATION_ENV_VAR


class ContinuationConfig(BaseModel):
    """Settings for continuation routing."""

    unhandled: Literal["raise", "deny"] = "raise"


class PermitkitConfig(BaseModel):
    """Top-level configuration model."""

    continuations: ContinuationConfig = ContinuationConfig()


def load_config(path: Optional[str] = None) -> PermitkitConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to PERMITKIT_CONFIG env
            variable or 'permitkit.yaml' in the current directory.
    """

    config_path = path or os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = PermitkitConfig(**data)
    else:
        config = PermitkitConfig()

    env_unhandled = os.getenv(UNHANDLED_CONTINUATION_ENV_VAR)
    if env_unhandled:
        config.continuations = ContinuationConfig(unhandled=env_unhandled.lower())
    return config
