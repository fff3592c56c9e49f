"""Parsing of scene description lines into textures, colours and a map grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

MAP_CHARS = frozenset("10 \tNSEW\n")

# Identifier prefix, Textures attribute, and where the value starts.
_TEXTURE_KEYS = (
    ("NO", "north", 3),
    ("SO", "south", 3),
    ("WE", "west", 3),
    ("EA", "east", 3),
    ("F", "floor", 2),
    ("C", "ceiling", 2),
)


class ParseError(ValueError):
    """Raised when a scene description contains an invalid line."""


@dataclass
class Textures:
    """Wall texture paths and floor/ceiling colours, as written in the file."""

    north: Optional[str] = None
    south: Optional[str] = None
    west: Optional[str] = None
    east: Optional[str] = None
    floor: Optional[str] = None
    ceiling: Optional[str] = None


@dataclass
class MapGrid:
    """The map rows in file order and the length of the longest row."""

    rows: list[str] = field(default_factory=list)
    width: int = 0

    @property
    def height(self) -> int:
        return len(self.rows)


@dataclass
class Config:
    """Everything read from one scene description."""

    map: MapGrid = field(default_factory=MapGrid)
    textures: Textures = field(default_factory=Textures)
    filename: Optional[str] = None


def is_map_line(line: str) -> bool:
    """True if ``line`` holds only map characters (newlines allowed)."""
    return all(ch in MAP_CHARS for ch in line)


class Parser:
    """Reads scene description lines one at a time into a Config."""

    def __init__(self) -> None:
        self.config = Config()
        self.parsing_map = False

    def parse_map_line(self, line: str) -> None:
        """Append ``line`` to the map and widen the map if needed."""
        self.parsing_map = True
        grid = self.config.map
        grid.rows.append(line)
        grid.width = max(grid.width, len(line))

    def parse_texture_or_colour_line(self, line: str) -> None:
        """Store the value of a texture or colour line by its identifier."""
        for prefix, attribute, offset in _TEXTURE_KEYS:
            if line.startswith(prefix):
                setattr(self.config.textures, attribute, line[offset:])
                return
        raise ParseError(f"Invalid texture or colour line: {line}")

    def parse_line(self, line: str) -> None:
        """Dispatch one non-blank line to the map or the texture parser."""
        if is_map_line(line):
            self.parse_map_line(line)
        elif not self.parsing_map:
            self.parse_texture_or_colour_line(line)
        else:
            raise ParseError(f"Non-map line after map started: {line}")

    def parse(self, lines: Iterable[str]) -> Config:
        """Parse every line, skipping those that begin with a newline."""
        for line in lines:
            if line.startswith("\n"):
                continue
            self.parse_line(line)
        return self.config


def parse(lines: Iterable[str]) -> Config:
    """Parse scene description lines with a fresh Parser."""
    return Parser().parse(lines)