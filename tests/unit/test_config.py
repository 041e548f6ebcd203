"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from permitkit.config import load_config
from permitkit.continuations import ContinuationRegistry


def test_load_config_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("PERMITKIT_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("PERMITKIT_UNHANDLED_CONTINUATION", raising=False)

    config = load_config()
    assert config.continuations.unhandled == "raise"


def test_load_config_from_env(tmp_path, monkeypatch):
    config_path = tmp_path / "permitkit.yaml"
    config_path.write_text(
        """
continuations:
  unhandled: deny
"""
    )
    monkeypatch.setenv("PERMITKIT_CONFIG", str(config_path))
    monkeypatch.delenv("PERMITKIT_UNHANDLED_CONTINUATION", raising=False)

    config = load_config()
    assert config.continuations.unhandled == "deny"


def test_load_config_explicit_path_and_empty_file(tmp_path, monkeypatch):
    monkeypatch.delenv("PERMITKIT_UNHANDLED_CONTINUATION", raising=False)
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("")

    config = load_config(str(config_path))
    assert config.continuations.unhandled == "raise"


def test_env_override_wins_over_file(tmp_path, monkeypatch):
    config_path = tmp_path / "permitkit.yaml"
    config_path.write_text("continuations:\n  unhandled: raise\n")
    monkeypatch.setenv("PERMITKIT_CONFIG", str(config_path))
    monkeypatch.setenv("PERMITKIT_UNHANDLED_CONTINUATION", "DENY")

    assert load_config().continuations.unhandled == "deny"


def test_invalid_policy_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("PERMITKIT_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("PERMITKIT_UNHANDLED_CONTINUATION", "ignore")

    with pytest.raises(ValidationError):
        load_config()


def test_registry_uses_loaded_config(tmp_path, monkeypatch):
    monkeypatch.setenv("PERMITKIT_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("PERMITKIT_UNHANDLED_CONTINUATION", "deny")

    assert ContinuationRegistry().unhandled == "deny"
