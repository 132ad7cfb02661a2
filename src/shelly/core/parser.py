"""Turn command lines into regex patterns."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from shelly.core.catalog import CATALOG, PatternCatalog, extract_components, synthesize_regex
from shelly.core.confidence import FALLBACK_CONFIDENCE, score_match
from shelly.core.tokens import escape_literal
from shelly.types import AnalysisSettings, Components, ParsedCommand

ID_PREFIX = "cmd_"
DEFAULT_SETTINGS = AnalysisSettings()


def split_lines(text: str) -> list[str]:
    """Split raw text into command lines, dropping blank ones."""

    return [line for line in text.splitlines() if line.strip()]


def parse_command(
    line: str,
    settings: AnalysisSettings | None = None,
    *,
    index: int = 0,
    catalog: PatternCatalog = CATALOG,
) -> ParsedCommand:
    """Analyze one non-empty command line."""

    settings = settings or DEFAULT_SETTINGS
    stripped = line.strip()
    command_id = f"{ID_PREFIX}{index}"

    found = catalog.match(stripped)
    if found is None:
        logger.debug("parse.fallback index={} line={}", index, stripped)
        return _fallback(command_id, stripped, settings)

    return ParsedCommand(
        id=command_id,
        original_command=stripped,
        components=extract_components(found),
        regex=synthesize_regex(found, settings),
        confidence=score_match(found),
        family=found.family,
    )


def parse_commands(
    lines: Iterable[str],
    settings: AnalysisSettings | None = None,
    *,
    catalog: PatternCatalog = CATALOG,
) -> list[ParsedCommand]:
    """Analyze a batch of non-empty lines, one record per line in input order."""

    batch: Sequence[str] = list(lines)
    logger.debug("parse.batch.start count={}", len(batch))
    records = [parse_command(line, settings, index=index, catalog=catalog) for index, line in enumerate(batch)]
    logger.debug("parse.batch.end count={}", len(records))
    return records


def _fallback(command_id: str, stripped: str, settings: AnalysisSettings) -> ParsedCommand:
    escaped = escape_literal(stripped)
    # "$" anchors a stripped line, no trailing newline to slip past.
    regex = f"^{escaped}$" if settings.use_fixed_paths else f"^{escaped}"
    words = stripped.split()
    return ParsedCommand(
        id=command_id,
        original_command=stripped,
        components=Components(action=words[0] if words else stripped),
        regex=regex,
        confidence=FALLBACK_CONFIDENCE,
        family="fallback",
    )
