"""Capability results.

A handler operation answers with one of three shapes: it succeeded
(optionally with a value), it failed with a message, or it declined to
implement an optional operation. The session never lets anything else
cross its boundary.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Union

import structlog


log = structlog.get_logger("specialremote.protocol.result")


class Availability(enum.Enum):
    GLOBAL = "GLOBAL"
    LOCAL = "LOCAL"


@dataclass(frozen=True)
class Success:
    value: Any = None


@dataclass(frozen=True)
class Failure:
    message: str


class Declined(Exception):
    """The handler does not implement an optional operation.

    Handlers may either return an instance or raise it.
    """

    def __eq__(self, other):
        return isinstance(other, Declined)

    def __hash__(self):
        return hash(Declined)

    def __repr__(self):
        return "Declined()"


Result = Union[Success, Failure, Declined]


def invoke(method: Callable[..., Any], *args) -> Result:
    """Call a handler method and categorize whatever it does.

    A returned result passes through unchanged; any other return value is
    a success carrying that value. A raised :class:`Declined` is a decline,
    any other exception a failure carrying its text.
    """

    try:
        returned = method(*args)
    except Declined:
        return Declined()
    except Exception as ex:
        message = str(ex) or type(ex).__name__
        log.warning("handler raised", method=getattr(method, "__name__", repr(method)), exc_info=True)
        return Failure(message)

    if isinstance(returned, (Success, Failure, Declined)):
        return returned

    return Success(returned)
