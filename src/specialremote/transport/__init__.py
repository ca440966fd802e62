"""Transport layer implementations."""

from .base import (
    Channel,
    ChannelClosed,
    ChannelError,
    TransportError,
)
from .stream import StreamChannel
