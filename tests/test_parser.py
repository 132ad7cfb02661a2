import re

import pytest

from shelly.core.parser import parse_command, parse_commands, split_lines
from shelly.core.verify import matches_own_line
from shelly.samples import EXAMPLE_SETS
from shelly.types import AnalysisSettings

ALL_SETTINGS = [
    AnalysisSettings(),
    AnalysisSettings(allow_whitespace_in_paths=True),
    AnalysisSettings(use_fixed_paths=True),
    AnalysisSettings(allow_whitespace_in_paths=True, use_fixed_paths=True),
]

ODD_LINES = [
    "git status",
    "git   push   origin   main",
    "npm install express",
    "docker run -p 3000:3000 webapp",
    "rm -rf temp_folder",
    "foobar123",
    "!!!",
    "ls",
    "cat 'file (copy).txt'",
    "echo $HOME && ls | wc -l",
    "grep -E '^[a-z]+$' notes.md",
    "./venv/bin/python main.py",
    "~/bin/tool --flag=value",
    "lsblk",
    "git statusx",
    "python3.11 -c 'print(1)'",
    "\tchmod   +x\tscript.sh  ",
]


def test_git_status_scenario() -> None:
    record = parse_command("git status")
    assert record.family == "git"
    assert record.components.action == "status"
    assert record.components.parameters == ()
    assert record.components.flags == ()
    assert record.regex == r"^git\s+status"
    assert record.confidence == pytest.approx(0.95)


def test_npm_install_scenario() -> None:
    record = parse_command("npm install express")
    assert record.family == "package-manager"
    assert record.components.action == "install"
    assert record.components.target == "npm"
    assert record.components.parameters == ("express",)
    assert record.components.flags == ()
    assert record.regex == r"^npm\s+install\s+express"
    assert record.confidence == pytest.approx(0.99)


def test_docker_fixed_path_scenario() -> None:
    record = parse_command("docker run -p 3000:3000 webapp", AnalysisSettings(use_fixed_paths=True))
    assert record.family == "docker"
    assert record.regex == r"^docker\s+run\s+-p 3000:3000 webapp$"
    assert record.components.flags == ("-p",)
    assert record.components.parameters == ("3000:3000", "webapp")
    pattern = re.compile(record.regex)
    assert pattern.fullmatch("docker run -p 3000:3000 webapp")
    assert pattern.search("docker run -p 3000:3000 webapp2") is None
    assert pattern.search("docker run -p 3000:3000 webapp; rm -rf /") is None


def test_rm_scenario_has_no_flags() -> None:
    record = parse_command("rm -rf temp_folder")
    assert record.family == "file-ops"
    assert record.components.to_dict() == {"action": "rm", "parameters": ["-rf", "temp_folder"]}
    assert record.confidence == pytest.approx(0.88)


def test_unknown_word_scenario() -> None:
    record = parse_command("foobar123")
    assert record.family == "generic"
    assert record.components.action == "foobar123"
    assert record.regex == "^foobar123"
    assert record.confidence == pytest.approx(0.6)


def test_punctuation_falls_back() -> None:
    record = parse_command("!!!")
    assert record.family == "fallback"
    assert record.components.to_dict() == {"action": "!!!"}
    assert record.regex == "^!!!"
    assert record.confidence == pytest.approx(0.3)

    fixed = parse_command("!!!", AnalysisSettings(use_fixed_paths=True))
    assert fixed.regex == "^!!!$"


def test_fallback_escapes_whole_line() -> None:
    record = parse_command("./venv/bin/python main.py")
    assert record.regex == r"^\./venv/bin/python main\.py"
    assert record.components.action == "./venv/bin/python"
    assert record.components.parameters is None


def test_short_match_is_penalized() -> None:
    assert parse_command("ls").confidence == pytest.approx(0.56)
    assert parse_command("pwd").confidence == pytest.approx(0.42)
    assert parse_command("df -h").confidence == pytest.approx(0.66)


def test_whitespace_option_loosens_arguments() -> None:
    record = parse_command("git commit -m 'Update features'", AnalysisSettings(allow_whitespace_in_paths=True))
    assert record.regex == r"^git\s+commit\s+-m\s+'Update\s+features'"
    assert re.search(record.regex, "git commit -m   'Update    features'")


def test_default_regex_is_a_prefix_match() -> None:
    record = parse_command("npm run build")
    assert re.search(record.regex, "npm run build --watch")


def test_line_is_trimmed() -> None:
    record = parse_command("   git log --oneline  ")
    assert record.original_command == "git log --oneline"
    assert record.components.flags == ("--oneline",)


def test_batch_keeps_order_and_length() -> None:
    records = parse_commands(ODD_LINES)
    assert len(records) == len(ODD_LINES)
    assert [record.original_command for record in records] == [line.strip() for line in ODD_LINES]
    assert len({record.id for record in records}) == len(records)
    assert [record.id for record in records][:2] == ["cmd_0", "cmd_1"]


@pytest.mark.parametrize("settings", ALL_SETTINGS)
def test_every_regex_matches_its_own_line(settings: AnalysisSettings) -> None:
    for record in parse_commands(ODD_LINES, settings):
        assert matches_own_line(record), record
        if settings.use_fixed_paths:
            assert re.fullmatch(record.regex, record.original_command), record


@pytest.mark.parametrize("settings", ALL_SETTINGS)
def test_examples_match_their_own_lines(settings: AnalysisSettings) -> None:
    for example in EXAMPLE_SETS:
        for record in parse_commands(example.commands, settings):
            assert matches_own_line(record), record


def test_confidence_bounds() -> None:
    for record in parse_commands(ODD_LINES):
        assert 0 < record.confidence <= 1


def test_rerun_is_identical() -> None:
    settings = AnalysisSettings(allow_whitespace_in_paths=True)
    first = parse_commands(ODD_LINES, settings)
    second = parse_commands(ODD_LINES, settings)
    assert first == second


def test_split_lines_drops_blank_lines() -> None:
    assert split_lines("git status\n\n   \nnpm start\r\n") == ["git status", "npm start"]


def test_arguments_split_on_any_whitespace() -> None:
    record = parse_command("git add\ta.txt\t-v")
    assert record.components.parameters == ("a.txt",)
    assert record.components.flags == ("-v",)
    assert parse_command("!!!\tfoo").components.action == "!!!"


def test_fixed_pattern_is_built_from_the_stripped_line() -> None:
    record = parse_command("ls a\n", AnalysisSettings(use_fixed_paths=True))
    assert record.original_command == "ls a"
    assert record.regex == r"^ls\s+a$"
    assert re.fullmatch(record.regex, record.original_command)
    assert re.search(record.regex, "ls a b") is None
