"""Rotation of box-drawing and block pictures on the map."""

from __future__ import annotations

from .geometry import Direction

# Each picture maps to its images when facing up, right, down and left.
_ROTATIONS: dict[str, str] = {
    "▀": "▀▐▄▌",
    "▐": "▐▄▌▀",
    "▄": "▄▌▀▐",
    "▌": "▌▀▐▄",
    # double straight
    "║": "║═║═",
    "═": "═║═║",
    # double T
    "╣": "╣╩╠╦",
    "╩": "╩╠╦╣",
    "╠": "╠╦╣╩",
    "╦": "╦╣╩╠",
    # double corner
    "╚": "╚╔╗╝",
    "╔": "╔╗╝╚",
    "╗": "╗╝╚╔",
    "╝": "╝╚╔╗",
    # double and single T
    "╢": "╢╧╟╤",
    "╧": "╧╟╤╢",
    "╟": "╟╤╢╧",
    "╤": "╤╢╧╟",
    # single and double T
    "╡": "╡╨╞╥",
    "╨": "╨╞╥╡",
    "╞": "╞╥╡╨",
    "╥": "╥╡╨╞",
    # double and single cross
    "╫": "╫╪╫╪",
    "╪": "╪╫╪╫",
    # double and single corner
    "╓": "╓╕╜╘",
    "╕": "╕╜╘╓",
    "╜": "╜╘╓╕",
    "╘": "╘╓╕╜",
    "╖": "╖╛╙╒",
    "╛": "╛╙╒╖",
    "╙": "╙╒╖╛",
    "╒": "╒╖╛╙",
    # single straight
    "│": "│─│─",
    "─": "─│─│",
    # single T
    "┤": "┤┴├┬",
    "┴": "┴├┬┤",
    "├": "├┬┤┴",
    "┬": "┬┤┴├",
    # single corner
    "└": "└┌┐┘",
    "┌": "┌┐┘└",
    "┐": "┐┘└┌",
    "┘": "┘└┌┐",
}


def rotate_picture(picture: str, direction: Direction) -> str:
    """Picture turned to face ``direction``; unknown pictures are unchanged."""
    direction = Direction(direction)
    if direction == Direction.CENTER:
        raise ValueError("a picture cannot be rotated towards the center")

    rotations = _ROTATIONS.get(picture)
    if rotations is None:
        return picture
    return rotations[direction.value]