"""Main entry point for the waiter CLI."""

import sys

import click

from .cli import cli


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the waiter CLI.

    Args:
        args: Command-line arguments. Defaults to sys.argv[1:]

    Returns:
        int: Exit code (0 for success, 1 for error, 130 if interrupted)
    """
    if args is None:
        args = sys.argv[1:]

    try:
        return cli.main(args=args, prog_name="waiter", standalone_mode=False) or 0
    except click.Abort:
        # Ctrl-C; click has already ended the progress line
        return 130
    except click.ClickException as e:
        e.show()
        return 1


if __name__ == "__main__":
    sys.exit(main())
