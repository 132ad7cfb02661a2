"""Pattern catalog for command families."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import assert_never

from shelly.core.tokens import escape_literal, loosen_quotes, loosen_whitespace, split_flags, split_words
from shelly.types import AnalysisSettings, Components, Family

GIT_VERBS = ("add", "commit", "push", "pull", "checkout", "branch", "merge", "clone", "status", "log")
PACKAGE_MANAGERS = ("npm", "yarn", "pnpm")
PACKAGE_MANAGER_VERBS = ("install", "add", "remove", "build", "start", "test", "run")
DOCKER_VERBS = ("build", "run", "pull", "push", "ps", "images", "stop", "start", "exec")
FILE_COMMANDS = ("ls", "dir", "cat", "touch", "mkdir", "rm", "cp", "mv", "chmod", "chown")

TOKEN_SEPARATOR = r"\s+"
TOKEN_END = r"(?=\s|$)"


@dataclass(frozen=True)
class Rule:
    """One recognizer in the catalog."""

    family: Family
    pattern: re.Pattern[str]
    description: str

    def match(self, line: str) -> RuleMatch | None:
        found = self.pattern.match(line)
        if found is None:
            return None
        groups = found.groupdict()
        return RuleMatch(
            rule=self,
            text=found.group(0),
            tool=groups["tool"],
            verb=groups.get("verb"),
            args=(groups.get("args") or "").strip(),
        )


@dataclass(frozen=True)
class RuleMatch:
    """A successful rule match split into its leading tokens and arguments."""

    rule: Rule
    text: str
    tool: str
    verb: str | None
    args: str

    @property
    def family(self) -> Family:
        return self.rule.family

    @property
    def prefix(self) -> str:
        tokens = [self.tool] if self.verb is None else [self.tool, self.verb]
        return TOKEN_SEPARATOR.join(escape_literal(token) for token in tokens)


class PatternCatalog:
    """Ordered, immutable list of rules; the first matching rule wins."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)

    def families(self) -> list[Family]:
        return [rule.family for rule in self._rules]

    def match(self, line: str) -> RuleMatch | None:
        for rule in self._rules:
            found = rule.match(line)
            if found is not None:
                return found
        return None

    def render_help(self) -> str:
        if not self._rules:
            return "(no rules)"
        return "\n".join(f"{index}. {rule.family:16} {rule.description}" for index, rule in enumerate(self._rules, 1))


def extract_components(found: RuleMatch) -> Components:
    """Decompose a matched line according to its family."""

    match found.family:
        case "git" | "docker":
            split = split_flags(found.args)
            return Components(action=found.verb, parameters=split.parameters, flags=split.flags)
        case "package-manager":
            split = split_flags(found.args)
            return Components(action=found.verb, target=found.tool, parameters=split.parameters, flags=split.flags)
        case "file-ops" | "generic":
            # Flags stay mixed in with parameters for these families.
            return Components(action=found.tool, parameters=tuple(split_words(found.args)))
        case "fallback":
            raise ValueError("fallback is not a catalog family")
        case _:
            assert_never(found.family)


def synthesize_regex(found: RuleMatch, settings: AnalysisSettings) -> str:
    """Build the anchored regex source for a matched line."""

    prefix = found.prefix
    if not found.args:
        return f"^{prefix}"

    escaped = escape_literal(found.args)
    if settings.use_fixed_paths:
        # Lines are stripped, so Python's "$ before a final newline" never applies.
        return f"^{prefix}{TOKEN_SEPARATOR}{escaped}$"

    if settings.allow_whitespace_in_paths:
        escaped = loosen_whitespace(escaped)
        if found.family == "file-ops":
            escaped = loosen_quotes(escaped)
    return f"^{prefix}{TOKEN_SEPARATOR}{escaped}"


def _alternation(words: Iterable[str]) -> str:
    return "|".join(re.escape(word) for word in words)


def _verb_rule(family: Family, tools: Iterable[str], verbs: Iterable[str], description: str) -> Rule:
    source = rf"^(?P<tool>{_alternation(tools)}){TOKEN_SEPARATOR}(?P<verb>{_alternation(verbs)}){TOKEN_END}\s*(?P<args>.*)"
    return Rule(family, re.compile(source, re.DOTALL), description)


def _all_rules() -> list[Rule]:
    # Narrower families first; the generic rule must stay last.
    return [
        _verb_rule("git", ["git"], GIT_VERBS, "git " + "|".join(GIT_VERBS)),
        _verb_rule(
            "package-manager",
            PACKAGE_MANAGERS,
            PACKAGE_MANAGER_VERBS,
            "|".join(PACKAGE_MANAGERS) + " " + "|".join(PACKAGE_MANAGER_VERBS),
        ),
        _verb_rule("docker", ["docker"], DOCKER_VERBS, "docker " + "|".join(DOCKER_VERBS)),
        Rule(
            "file-ops",
            re.compile(rf"^(?P<tool>{_alternation(FILE_COMMANDS)}){TOKEN_END}\s*(?P<args>.*)", re.DOTALL),
            "|".join(FILE_COMMANDS),
        ),
        Rule(
            "generic",
            re.compile(r"^(?P<tool>\w\S*)\s*(?P<args>.*)", re.DOTALL),
            "any command starting with a word character",
        ),
    ]


def build_pattern_catalog() -> PatternCatalog:
    return PatternCatalog(_all_rules())


CATALOG = build_pattern_catalog()
