""" Python implementation of the external special remote protocol. A
    backend author subclasses :class:`Handler` to describe where content
    lives; :func:`run` takes care of the conversation with the large-file
    tool on stdin and stdout.
"""

# Utility components.

from . import config
from . import log

# Submodules used by multiple other components.

from . import protocol
from . import transport

from .protocol import Availability, Declined, Failure, Success
from .protocol import FramingError, ProtocolError
from .transport import ChannelClosed, ChannelError, TransportError

# Primary public-facing interfaces.

from .handler import Handler
from .progress import ProgressReader
from .session import RemoteError, Session, SessionErrored, State

from . import begin
run = begin.run

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
