"""Built-in example command sets."""

from __future__ import annotations

import re
from dataclasses import dataclass

from shelly.errors import UnknownExampleError


@dataclass(frozen=True)
class ExampleSet:
    name: str
    icon: str
    commands: tuple[str, ...]

    @property
    def slug(self) -> str:
        return slugify(self.name)


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.strip().lower()).strip("-")


EXAMPLE_SETS: tuple[ExampleSet, ...] = (
    ExampleSet(
        "Git Workflow",
        "🌿",
        (
            "git status",
            "git add .",
            "git commit -m 'Update features'",
            "git push origin main",
            "git pull upstream develop",
        ),
    ),
    ExampleSet(
        "Docker Setup",
        "🐳",
        (
            "docker build -t webapp .",
            "docker run -p 3000:3000 webapp",
            "docker ps -a",
            "docker stop container_name",
            "docker-compose up -d",
        ),
    ),
    ExampleSet(
        "Node Development",
        "📦",
        (
            "npm install express",
            "npm run build",
            "npm test --coverage",
            "npm start",
            "yarn add typescript",
        ),
    ),
    ExampleSet(
        "File Operations",
        "📁",
        (
            "mkdir -p src/components",
            "ls -la /home/user",
            "cp -r source/ destination/",
            "rm -rf temp_folder",
            "chmod +x script.sh",
        ),
    ),
    ExampleSet(
        "System Monitor",
        "⚡",
        (
            "ps aux | grep node",
            "top -p process_id",
            "df -h",
            "free -m",
            "netstat -tulpn",
        ),
    ),
    ExampleSet(
        "Python Projects",
        "🐍",
        (
            "python -m venv myenv",
            "./venv/bin/python main.py",
            "pip install -r requirements.txt",
            "python manage.py migrate",
            "pytest tests/ -v",
        ),
    ),
)


def get_example(name: str) -> ExampleSet:
    """Find an example set by display name or slug."""

    wanted = slugify(name)
    for example in EXAMPLE_SETS:
        if example.slug == wanted:
            return example
    raise UnknownExampleError(name, [example.slug for example in EXAMPLE_SETS])
