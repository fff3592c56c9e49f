# cubmap

Reads `.cub` scene files and prints the tile map they hold. A scene file
describes the wall textures, the floor and ceiling colours and the tile map of
a simple first-person maze.

## Installing

    pip install .

## The command

    cubmap path/to/level.cub

The command takes exactly one argument, a file name ending in `.cub`. On
success it prints the map one row per line, every character of a row
(including the row's own line ending) padded to two columns, and exits with
status 0. On failure it prints `Error`, a line describing the problem, and
exits with status 1. Failures are:

- not exactly one argument (`Invalid number of arguments`);
- a name not ending in `.cub` (`Invalid file extension. Expected .cub`);
- a file that cannot be opened (`Failed to open file: <name>`);
- an invalid line in the file (see below).

## The file format

Before the map, each line sets one entry, chosen by how the line begins:

    NO ./textures/north.xpm
    SO ./textures/south.xpm
    WE ./textures/west.xpm
    EA ./textures/east.xpm
    F 220,100,0
    C 225,30,0

For `NO`, `SO`, `WE` and `EA` the value is everything from the fourth
character on; for `F` and `C`, everything from the third. Values are kept as
written, line ending included. A later line with the same identifier replaces
the earlier value. A line before the map that matches none of these raises
`Invalid texture or colour line`.

Map lines are made only of `1`, `0`, spaces, tabs, line endings and the player
start letters `N`, `S`, `E` and `W`:

    111111
    100101
    1010N1
    111111

Lines that begin with a line ending are skipped. Once the map has begun, any
line that is not a map line raises `Non-map line after map started`.

## Using it from Python

    from cubmap.parser import parse, ParseError

    with open("level.cub") as handle:
        config = parse(handle)

    print(config.textures.north, config.textures.floor)
    print(config.map.width, config.map.height)
    for row in config.map.rows:
        print(row, end="")

- `cubmap.parser.parse(lines)` returns a `Config` holding a `MapGrid`
  (`rows`, `width` as the length of the longest row, `height`) and a
  `Textures` (`north`, `south`, `west`, `east`, `floor`, `ceiling`; `None`
  when not given). Invalid lines raise `ParseError`, a `ValueError`.
- `cubmap.parser.Parser` does the same one line at a time through
  `parse_line`; `is_map_line` tells map lines apart.
- `cubmap.cli.load(argv)` checks an argument list (without the program
  name) with `check_args` and `check_extension`, then parses the file and
  sets `config.filename`. Argument and file problems raise `InputError`.
- `cubmap.cli.render_map(config)` returns the text the command prints.

The package also carries small helpers for characters (`cubmap.chars`),
strings (`cubmap.strings`), byte buffers (`cubmap.memory`), stream output
(`cubmap.output`) and a singly linked list (`cubmap.linkedlist`).

## What it does not do

cubmap only reads and prints scene files. It does not draw the maze or open a
window, load texture images, check that colour values are valid numbers in
range, check that every entry is present, or check that the map is closed by
walls and has exactly one player start.

## Running the tests

    pip install .[test]
    pytest