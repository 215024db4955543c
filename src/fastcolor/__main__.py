"""Main entry point for ``python -m fastcolor``."""

from fastcolor.cli import cli


if __name__ == "__main__":
    cli(prog_name="fastcolor")
