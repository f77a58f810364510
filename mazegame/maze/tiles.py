# Tile characters used by rows()/to_ascii() and the JSON payloads
WALL = "#"
PASSAGE = " "
EXIT = "E"
PLAYER = "@"
PATH = "."

__all__ = ["WALL", "PASSAGE", "EXIT", "PLAYER", "PATH"]
