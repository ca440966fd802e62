"""Transport interface.

This is the (small) contract that line transports should follow. It lives
outside :mod:`specialremote.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class ChannelError(TransportError):
    """A line could not be read from or written to the channel."""


class ChannelClosed(ChannelError):
    """The peer closed its end of the channel."""


class Channel(ABC):
    """Minimal contract for a line-oriented, single-writer channel.

    Implementations must provide a reentrant :attr:`lock`; every write holds
    it, and a caller that needs a write and its reply to be adjacent on the
    wire holds it across both.
    """

    lock = None

    @abstractmethod
    def read_line(self) -> str:
        """Return the next line, without its terminator.

        Raises :class:`ChannelClosed` at end-of-stream.
        """

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one complete, newline-terminated line and flush it."""

    def close(self) -> None:
        """Release any resources held by the channel."""
