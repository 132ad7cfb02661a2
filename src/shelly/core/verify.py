"""Self-check for synthesized patterns."""

from __future__ import annotations

import re

from loguru import logger

from shelly.types import ParsedCommand


def compile_pattern(regex: str) -> re.Pattern[str] | None:
    try:
        return re.compile(regex)
    except re.error as exc:
        logger.warning("verify.compile_failed regex={} error={}", regex, exc)
        return None


def matches_own_line(record: ParsedCommand) -> bool:
    """Return True when the record's regex matches the line it came from."""

    pattern = compile_pattern(record.regex)
    if pattern is None:
        return False
    return pattern.search(record.original_command) is not None


def failing_records(records: list[ParsedCommand]) -> list[ParsedCommand]:
    return [record for record in records if not matches_own_line(record)]
