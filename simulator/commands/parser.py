# simulator/commands/parser.py
import re
from typing import NamedTuple, Optional

from simulator.utils.types import ParseResult

# "X,Y,DIRECTION" with optional whitespace around the commas. ASCII digits only.
# Used with fullmatch, so trailing text after the direction is a format error.
PLACE_ARGS_PATTERN = re.compile(r"(-?[0-9]+)\s*,\s*(-?[0-9]+)\s*,\s*([a-zA-Z]+)")
INTEGER_PATTERN = re.compile(r"-?[0-9]+")


class ParsedCommand(NamedTuple):
    verb: str
    args: Optional[str]
    raw: str


class PlaceArgs(NamedTuple):
    x: str
    y: str
    direction: str


def split_command(line: str) -> ParsedCommand:
    """
    Split a command line on its first whitespace run.

    "PLACE 1,2,EAST" -> verb "PLACE", args "1,2,EAST"
    "MOVE"           -> verb "MOVE", args None
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return ParsedCommand("", None, line)
    if len(parts) == 1:
        return ParsedCommand(parts[0], None, line)
    return ParsedCommand(parts[0], parts[1].strip(), line)


def parse_place_args(args: Optional[str]) -> Optional[PlaceArgs]:
    """
    Match the PLACE argument string against X,Y,DIRECTION.
    Returns None when the arguments are missing or malformed.
    The direction comes back uppercased; coordinates stay as text.
    """
    if not args:
        return None
    match = PLACE_ARGS_PATTERN.fullmatch(args.strip())
    if match is None:
        return None
    x, y, direction = match.groups()
    return PlaceArgs(x, y, direction.upper())


def parse_coordinate(token) -> ParseResult:
    """Base-10 integer, optional leading '-'."""
    if isinstance(token, bool):
        return ParseResult.fail(f"not an integer: {token!r}")
    if isinstance(token, int):
        return ParseResult.ok(token)
    if not isinstance(token, str):
        return ParseResult.fail(f"not an integer: {token!r}")

    text = token.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return ParseResult.fail(f"not an integer: {token!r}")
    return ParseResult.ok(int(text, 10))
