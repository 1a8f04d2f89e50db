"""
Line parser for robot commands.

Each input line holds one command, optionally followed by
comma-separated arguments:

    COMMAND
    COMMAND arg1,arg2,...,argN

Spaces are tolerated around the command and around every argument.
Parsing never fails; a blank line parses to an empty command.

Example:
    >>> parse("PLACE 1 , 2 , NORTH")
    ParsedLine(command='PLACE', args=['1', '2', 'NORTH'])
    >>> parse("MOVE")
    ParsedLine(command='MOVE', args=[])
"""

from __future__ import annotations

import re

from robot_sim.models.command import ParsedLine

# Leading integer, as accepted by C's strtol/stoi: ASCII whitespace, sign,
# digits. Anything after the digits is ignored.
_LEADING_INT = re.compile(r"\s*([+-]?)0*([0-9]+)", re.ASCII)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
INT_MAX_DIGITS = len(str(INT_MAX))


def parse(line: str) -> ParsedLine:
    """Split a raw input line into command name and arguments.

    Args:
        line: One line of input, with or without its line terminator

    Returns:
        ParsedLine. Empty argument pieces (``"a,,b"``) are kept as ``""``;
        a line with no argument region yields an empty args list.
    """
    stripped = line.rstrip("\r\n").strip(" ")
    if not stripped:
        return ParsedLine("", [])

    command, _, remainder = stripped.partition(" ")
    remainder = remainder.lstrip(" ")
    if not remainder:
        return ParsedLine(command, [])

    return ParsedLine(command, [arg.strip(" ") for arg in remainder.split(",")])


def parse_int(token: str) -> int | None:
    """Parse a coordinate token.

    Accepts a leading signed decimal integer and ignores trailing text,
    so ``"3"``, ``"+3"`` and ``"3abc"`` all give 3.

    Returns:
        The integer, or None if the token has no leading integer or the
        value does not fit in a signed 32-bit int
    """
    match = _LEADING_INT.match(token)
    if match is None:
        return None

    sign, digits = match.groups()
    if len(digits) > INT_MAX_DIGITS:
        return None

    value = int(sign + digits)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value
