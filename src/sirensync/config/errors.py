"""Errors raised while loading sirensync settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A setting is present but unusable (wrong type, out of range)."""


class MissingConfigurationError(ConfigurationError):
    """A required setting is unset or blank."""
