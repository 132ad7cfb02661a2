"""Export formats for analyzed command batches."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Callable

from shelly.errors import UnknownFormatError
from shelly.types import ParsedCommand

Formatter = Callable[[Sequence[ParsedCommand], datetime], str]
HIGH_CONFIDENCE = 0.8


@dataclass(frozen=True)
class ExportFormat:
    name: str
    label: str
    description: str
    formatter: Formatter


@dataclass(frozen=True)
class BatchSummary:
    """Aggregate numbers shown next to an analyzed batch."""

    total: int
    high_confidence: int
    average_confidence: float

    def render(self) -> str:
        return (
            f"{self.total} patterns | {self.high_confidence} high confidence | "
            f"{round(self.average_confidence * 100)}% avg"
        )


def summarize(records: Sequence[ParsedCommand]) -> BatchSummary:
    if not records:
        return BatchSummary(total=0, high_confidence=0, average_confidence=0.0)
    return BatchSummary(
        total=len(records),
        high_confidence=sum(1 for record in records if record.confidence >= HIGH_CONFIDENCE),
        average_confidence=sum(record.confidence for record in records) / len(records),
    )


def _quoted(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def format_vscode(records: Sequence[ParsedCommand], _generated: datetime) -> str:
    patterns = ",\n    ".join(_quoted(record.regex) for record in records)
    return (
        "// VSCode settings.json format\n"
        "{\n"
        '  "search.useRegexp": true,\n'
        '  "search.regexPatterns": [\n'
        f"    {patterns}\n"
        "  ]\n"
        "}"
    )


def format_cursor(records: Sequence[ParsedCommand], _generated: datetime) -> str:
    lines = ["# Cursor AI patterns configuration", "patterns:"]
    for record in records:
        lines.append(f"  - pattern: {_quoted(record.regex)}")
        lines.append(f"    description: {_quoted(record.original_command)}")
    return "\n".join(lines)


def format_codex(records: Sequence[ParsedCommand], _generated: datetime) -> str:
    lines = ["// GitHub Codex regex patterns", "const patterns = ["]
    for record in records:
        # "/" would end the regex literal early.
        literal = record.regex.replace("/", "\\/")
        lines.append(f"  /{literal}/g, // {record.original_command}")
    lines.append("];")
    return "\n".join(lines)


def format_json(records: Sequence[ParsedCommand], generated: datetime) -> str:
    payload = {
        "generated": generated.isoformat(),
        "totalCommands": len(records),
        "patterns": [
            {
                "original": record.original_command,
                "regex": record.regex,
                "confidence": record.confidence,
                "components": record.components.to_dict(),
            }
            for record in records
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def format_plain(records: Sequence[ParsedCommand], _generated: datetime) -> str:
    return "\n".join(record.regex for record in records)


FORMATS: dict[str, ExportFormat] = {
    spec.name: spec
    for spec in (
        ExportFormat("vscode", "VSCode", "Visual Studio Code format", format_vscode),
        ExportFormat("cursor", "Cursor", "Cursor AI format", format_cursor),
        ExportFormat("codex", "Codex", "GitHub Codex format", format_codex),
        ExportFormat("json", "JSON", "Structured JSON format", format_json),
        ExportFormat("plain", "Plain Text", "Simple text format", format_plain),
    )
}


def get_format(name: str) -> ExportFormat:
    spec = FORMATS.get(name.strip().lower())
    if spec is None:
        raise UnknownFormatError(name, list(FORMATS))
    return spec


def render_export(name: str, records: Sequence[ParsedCommand], *, generated: datetime | None = None) -> str:
    """Serialize a batch in the named export format."""

    spec = get_format(name)
    return spec.formatter(records, generated or datetime.now(UTC))
