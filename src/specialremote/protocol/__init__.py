from . import fields
from . import wire
from . import message
from . import result

from .message import Message, Command
from .result import Availability, Declined, Failure, Success
from .wire import FramingError, ProtocolError


"""
specialremote Protocol Layer
============================

This package defines the line-oriented protocol spoken between the
large-file tool and an external storage backend. It provides the message
structures, the line codec, and the result shapes a handler answers with.

The protocol layer MUST NOT depend on any transport implementation
(stdio pipes, sockets, in-memory buffers, etc).

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Handler (handler.py)
    Storage semantics supplied by the backend author
    - store() / retrieve() / remove()
    - check_present() / where_is()

    │
    ▼
Session (session.py)
    Protocol state machine
    - VERSION announcement
    - command dispatch, exactly one reply per command
    - outward queries (GETCONFIG, GETURLS, ...)
    - error latch

    │
    ▼
Message Model (message.py, result.py)
    - Message: outbound line
    - Command: inbound line
    - Success / Failure / Declined

    │
    ▼
Line Codec (wire.py) and Verb Vocabulary (fields.py)
    Maps Message <-> one sanitized line
    Canonical verb strings

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Transport Layer (specialremote.transport)
    Moves lines, one writer at a time
    - StreamChannel over stdin/stdout

---------------------------------------------------------------------

Design Principles
-----------------

1. One line per message
   Nothing embedded in an outgoing line may contain a newline.

2. Exactly one reply
   Every inbound command is answered once, or not at all if the session
   has already failed.

3. Layer Isolation
   Dependencies only flow downward:
       Session -> Protocol -> (nothing)
       Session -> Transport
   Never upward.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
