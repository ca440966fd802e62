""" A class representation of a protocol message, in both directions: the
    :class:`Message` is a line this side puts on the wire, the
    :class:`Command` is a line the peer sent us.
"""

from . import fields
from . import wire


class Message:
    """ The :class:`Message` provides a very thin encapsulation of what it
        means to be an outbound message: a *verb*, followed by zero or more
        *arguments*. Arguments can be any object with a sensible string
        representation; they are sanitized when the message is finalized,
        so that no argument can break the one-line-per-message framing.
    """

    def __init__(self, verb, *arguments):

        self.verb = verb
        self.arguments = arguments
        self.line = None


    def __repr__(self):
        return repr(self.encode())


    def __str__(self):
        return self.encode().rstrip('\n')


    def encode(self):
        """ Return the full line, including the terminating newline. Calling
            this method multiple times will return the cached line rather
            than generate it anew.
        """

        line = self.line

        if line is None:
            line = wire.pack_line(self.verb, self.arguments)
            self.line = line

        return line


# end of class Message



class Command:
    """ A :class:`Command` is a single inbound request, split on single
        spaces into a *verb* and the remaining *arguments*. Instances are
        transient; they exist only for the duration of one dispatch.
    """

    def __init__(self, verb, arguments=()):

        self.verb = verb
        self.arguments = tuple(arguments)


    def __repr__(self):
        return 'Command(%r, %r)' % (self.verb, self.arguments)


    def __len__(self):
        return len(self.arguments)


    def require(self, count):
        """ Raise a :class:`FramingError` if this command carries fewer than
            *count* arguments. The engine cannot safely guess at a missing
            operand, so this is not a forgiving check.
        """

        if len(self.arguments) < count:
            raise wire.FramingError('less than %d fields in %s' % (count + 1, self.verb))


    @property
    def remainder(self):
        """ The arguments re-joined with single spaces; this is how the
            free-form text of an inbound ERROR is recovered.
        """

        return ' '.join(self.arguments)


    @classmethod
    def parse(cls, line):
        verb, arguments = wire.unpack_line(line)
        return cls(verb, arguments)


# end of class Command



def version():
    """ Return the version announcement that opens every session.
    """

    return Message(fields.VERSION, fields.PROTOCOL_VERSION)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
