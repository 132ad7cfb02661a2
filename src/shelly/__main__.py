"""Shelly CLI entry point."""

from shelly.cli import app

if __name__ == "__main__":
    app()
