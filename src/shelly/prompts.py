"""Helper prompts for preparing command lists with an external LLM."""

from __future__ import annotations

from shelly.errors import UnknownPromptError

EXTRACT_CHAT = """\
Please extract all terminal commands from this conversation transcript.

Look for any commands that were executed in terminal sessions, code blocks, or mentioned as being run. \
Format the output as a simple list with one command per line.

Focus on commands like:
- git commands (add, commit, push, etc.)
- npm/yarn commands (install, build, start, etc.)
- docker commands (build, run, ps, etc.)
- file operations (ls, mkdir, cp, mv, etc.)
- python/node execution commands

Please provide just the raw commands without explanations."""

FORMAT_CHAT_COMMANDS = """\
I have a list of terminal commands extracted from conversation logs. \
Please format and clean them up for analysis.

Remove any:
- Duplicate commands
- Comments or explanations
- Incomplete or truncated commands
- Commands that are just examples

Format the output as:
- One command per line
- Preserve all flags and parameters
- Keep file paths and arguments intact
- Sort by command type if possible

The goal is to have clean, executable commands that can be analyzed for patterns."""

PROMPTS: dict[str, str] = {
    "extract_chat": EXTRACT_CHAT,
    "format_chat_commands": FORMAT_CHAT_COMMANDS,
}


def get_prompt(name: str) -> str:
    key = name.strip().lower().replace("-", "_")
    if key not in PROMPTS:
        raise UnknownPromptError(name, list(PROMPTS))
    return PROMPTS[key]
