"""Argument token helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass

REGEX_META_RE = re.compile(r"[.*+?^${}()|\[\]\\]")
WHITESPACE_RUN_RE = re.compile(r"\s+")
QUOTE_RE = re.compile(r"[\"']")
FLEXIBLE_WHITESPACE = r"\s+"
OPTIONAL_QUOTE = "[\"']?"
FLAG_PREFIX = "-"


@dataclass(frozen=True)
class SplitArgs:
    """Arguments split into positional parameters and flags."""

    parameters: tuple[str, ...]
    flags: tuple[str, ...]


def escape_literal(text: str) -> str:
    """Escape regex metacharacters so text matches literally."""

    return REGEX_META_RE.sub(lambda match: "\\" + match.group(0), text)


def split_words(text: str | None) -> list[str]:
    """Split free-form arguments on whitespace, dropping empty tokens."""

    if not text:
        return []
    return text.split()


def split_flags(text: str | None) -> SplitArgs:
    """Separate tokens starting with '-' from the rest, keeping order."""

    parameters: list[str] = []
    flags: list[str] = []
    for token in split_words(text):
        if token.startswith(FLAG_PREFIX):
            flags.append(token)
        else:
            parameters.append(token)
    return SplitArgs(parameters=tuple(parameters), flags=tuple(flags))


def loosen_whitespace(escaped: str) -> str:
    """Let any run of whitespace match one or more whitespace characters."""

    return WHITESPACE_RUN_RE.sub(lambda _match: FLEXIBLE_WHITESPACE, escaped)


def loosen_quotes(escaped: str) -> str:
    """Let quote characters be present or absent."""

    return QUOTE_RE.sub(lambda _match: OPTIONAL_QUOTE, escaped)
