import pytest

from shelly.errors import UnknownExampleError, UnknownPromptError
from shelly.prompts import PROMPTS, get_prompt
from shelly.samples import EXAMPLE_SETS, get_example


def test_example_sets() -> None:
    assert [example.slug for example in EXAMPLE_SETS] == [
        "git-workflow",
        "docker-setup",
        "node-development",
        "file-operations",
        "system-monitor",
        "python-projects",
    ]
    assert all(len(example.commands) == 5 for example in EXAMPLE_SETS)


def test_get_example_accepts_name_or_slug() -> None:
    assert get_example("Git Workflow") is get_example("git-workflow")
    assert get_example("NODE development").commands[0] == "npm install express"


def test_unknown_example_raises() -> None:
    with pytest.raises(UnknownExampleError) as exc_info:
        get_example("kubernetes")
    assert exc_info.value.known[0] == "git-workflow"


def test_get_prompt() -> None:
    assert get_prompt("extract-chat") == PROMPTS["extract_chat"]
    assert "one command per line" in get_prompt("format_chat_commands").lower()


def test_unknown_prompt_raises() -> None:
    with pytest.raises(UnknownPromptError):
        get_prompt("summarize")
