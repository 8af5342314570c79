"""Exceptions raised by estimator construction and lookup."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when estimator parameters are out of range."""


class RegistryError(RuntimeError):
    """Raised when an estimator or transform engine name is unknown."""
