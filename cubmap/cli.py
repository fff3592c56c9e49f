"""Command line entry: validate arguments, load a scene and print its map."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cubmap.parser import Config, ParseError, Parser


class InputError(Exception):
    """Raised for bad command line arguments or an unreadable scene file."""


def check_extension(filename: str) -> str:
    """Return ``filename`` if it ends in ``.cub``."""
    if not filename.endswith(".cub"):
        raise InputError("Invalid file extension. Expected .cub")
    return filename


def check_args(argv: Sequence[str]) -> str:
    """Return the single scene file named in ``argv``."""
    if len(argv) != 1:
        raise InputError("Invalid number of arguments")
    return check_extension(argv[0])


def load(argv: Sequence[str]) -> Config:
    """Validate ``argv`` and parse the scene file it names."""
    filename = check_args(argv)
    try:
        with open(filename, encoding="utf-8") as handle:
            config = Parser().parse(handle)
    except OSError as exc:
        raise InputError(f"Failed to open file: {filename}") from exc
    config.filename = filename
    return config


def render_map(config: Config) -> str:
    """Each map character padded to two columns, one row per line."""
    return "".join(
        "".join(f"{ch:<2}" for ch in row) + "\n" for row in config.map.rows
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and print its map."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = load(argv)
    except (InputError, ParseError) as exc:
        sys.stdout.write(f"Error\n{exc}\n")
        return 1
    sys.stdout.write(render_map(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())