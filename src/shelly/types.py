"""Shared dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Family = Literal["git", "package-manager", "docker", "file-ops", "generic", "fallback"]


@dataclass(frozen=True)
class AnalysisSettings:
    """Options controlling how regexes are synthesized."""

    allow_whitespace_in_paths: bool = False
    use_fixed_paths: bool = False


@dataclass(frozen=True)
class Components:
    """Semantic pieces of one command line.

    ``None`` means the family does not populate the field at all, which is
    different from an empty tuple.
    """

    action: str | None = None
    target: str | None = None
    parameters: tuple[str, ...] | None = None
    flags: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.action is not None:
            data["action"] = self.action
        if self.target is not None:
            data["target"] = self.target
        if self.parameters is not None:
            data["parameters"] = list(self.parameters)
        if self.flags is not None:
            data["flags"] = list(self.flags)
        return data


@dataclass(frozen=True)
class ParsedCommand:
    """One analyzed command line."""

    id: str
    original_command: str
    components: Components
    regex: str
    confidence: float
    family: Family

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "originalCommand": self.original_command,
            "components": self.components.to_dict(),
            "regex": self.regex,
            "confidence": self.confidence,
            "family": self.family,
        }
