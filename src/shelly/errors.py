"""Application-level exception types for Shelly."""

from __future__ import annotations


class ShellyError(Exception):
    """Base exception for Shelly."""


class ConfigurationError(ShellyError):
    """Raised when settings hold an unusable value."""


class LookupFailedError(ShellyError):
    """Base exception for unknown names passed by the user."""

    kind = "item"

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"Unknown {self.kind}: {name} (choose from: {', '.join(known)})")


class UnknownFormatError(LookupFailedError):
    """Raised when an export format name is not registered."""

    kind = "format"


class UnknownExampleError(LookupFailedError):
    """Raised when an example command set does not exist."""

    kind = "example"


class UnknownPromptError(LookupFailedError):
    """Raised when a helper prompt does not exist."""

    kind = "prompt"
