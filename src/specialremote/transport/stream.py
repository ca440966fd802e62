"""Line channel over a pair of text streams, normally stdin and stdout."""

from __future__ import annotations

import threading
from typing import TextIO

import structlog

from .base import Channel, ChannelClosed, ChannelError


log = structlog.get_logger("specialremote.transport.stream")


class StreamChannel(Channel):
    """Read lines from *input* and write lines to *output*.

    A final line that the peer did not terminate with a newline is treated
    as end-of-stream; a partial line cannot be a complete message.
    """

    def __init__(self, input: TextIO, output: TextIO):
        self.input = input
        self.output = output
        self.lock = threading.RLock()

    def read_line(self) -> str:
        try:
            line = self.input.readline()
        except (OSError, ValueError) as ex:
            raise ChannelError(f"read failed: {ex}") from ex

        if line == "":
            raise ChannelClosed("end of input")

        if not line.endswith("\n"):
            log.debug("discarding unterminated line", line=line)
            raise ChannelClosed("end of input")

        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]

        log.debug("recv", line=line)
        return line

    def write_line(self, line: str) -> None:
        with self.lock:
            log.debug("send", line=line.rstrip("\n"))
            try:
                self.output.write(line)
                self.output.flush()
            except (OSError, ValueError) as ex:
                raise ChannelError(f"write failed: {ex}") from ex
