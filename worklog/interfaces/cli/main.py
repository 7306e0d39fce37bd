"""Entry point for the Worklog CLI.

Usage:
    python -m worklog.interfaces.cli.main

Or via installed entry point:
    worklog <command>
"""

from worklog.interfaces.cli import app


def main() -> None:
    """Run the Worklog CLI application."""
    app()


if __name__ == "__main__":
    main()
