"""Exception hierarchy for framebridge."""

from __future__ import annotations

from typing import Any


class FramebridgeError(Exception):
    """Base exception for all framebridge errors."""


class UnsupportedTypeError(FramebridgeError, TypeError):
    """No supported type matches a runtime type signature."""

    def __init__(self, signature: Any) -> None:
        self.signature = signature
        super().__init__(f"Type {signature} is not supported!")


class SchemaError(FramebridgeError):
    """A frame schema could not be resolved against the registry."""


class ConfigError(FramebridgeError):
    """Config file content is malformed."""
