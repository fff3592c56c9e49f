"""Reader for .cub scene files: textures, colours and a tile map."""

__version__ = "0.1.0"