# hbhelpers/main.py
"""Main entry point for the hbhelpers CLI application."""

from hbhelpers.cli.interface import main_cli


def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli(prog_name="hbhelpers")

if __name__ == '__main__':
    entrypoint()
