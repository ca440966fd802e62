""" Convenience entry point: the usual way for a backend script to hand its
    process over to a :class:`specialremote.Session`.
"""

import sys

import structlog

from . import log
from .session import Session
from .transport.stream import StreamChannel


def run(handler, input=None, output=None):
    """ Run a :class:`specialremote.Session` for *handler* until the peer is
        done with it, and return the final :class:`specialremote.State`.
        The *input* and *output* text streams default to stdin and stdout.

        If structlog has not been configured yet it is configured now, from
        the environment; the default structlog output would otherwise land
        on stdout, in the middle of the protocol.
    """

    if input is None:
        input = sys.stdin

    if output is None:
        output = sys.stdout

    if not structlog.is_configured():
        log.configure()

    channel = StreamChannel(input, output)
    session = Session(channel, handler)

    try:
        return session.run()
    finally:
        channel.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
