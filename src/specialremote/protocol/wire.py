from __future__ import annotations

from typing import Iterable, Tuple

from . import fields


# Every message is exactly one line.
_NEWLINE = "\n"
_VALUE_PREFIX = fields.VALUE + " "


class ProtocolError(Exception):
    """Base class for protocol-level errors."""


class FramingError(ProtocolError):
    """A line did not have the shape the protocol requires."""


def filter_newlines(value) -> str:
    """
    Return str(value) with every newline and carriage return removed.
    """

    value = str(value)
    if "\n" in value or "\r" in value:
        value = value.replace("\r", "").replace("\n", "")
    return value


def pack_line(verb: str, arguments: Iterable = ()) -> str:
    """
    Serialize verb + arguments -> one line

    Layout:
        VERB[ arg1 arg2 ...]\\n
    """

    parts = [filter_newlines(verb)]
    parts.extend(filter_newlines(argument) for argument in arguments)
    return " ".join(parts) + _NEWLINE


def unpack_line(line: str) -> Tuple[str, Tuple[str, ...]]:
    """
    Deserialize one inbound line -> (verb, arguments)

    The line is split on single spaces; consecutive spaces produce empty
    arguments, the same as the peer would see them.
    """

    line = line.rstrip("\r\n")
    parts = line.split(" ")
    return parts[0], tuple(parts[1:])


def unpack_value(line: str) -> str:
    """
    Deserialize a VALUE reply -> payload string
    """

    line = line.rstrip("\r\n")

    if line.startswith(_VALUE_PREFIX):
        return line[len(_VALUE_PREFIX):]

    # Some peers terminate a value list with a bare VALUE.
    if line == fields.VALUE:
        return ""

    raise FramingError(f"protocol error: expected VALUE, got {line!r}")
