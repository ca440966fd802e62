""" The protocol engine. A :class:`Session` reads one command at a time from
    the peer, hands it to the :class:`specialremote.Handler`, and writes
    exactly one reply; it is also the vehicle the handler uses to ask the
    peer for values while a command is in progress.
"""

import enum

import structlog

from .protocol import fields
from .protocol.message import Command, Message, version
from .protocol.result import Availability, Declined, Failure, Success, invoke
from .protocol.wire import FramingError, ProtocolError, unpack_value
from .transport.base import ChannelClosed, ChannelError


log = structlog.get_logger('specialremote.session')


class RemoteError(ProtocolError):
    """ The peer sent ERROR. The text of the exception is the peer's message.
    """


class SessionErrored(ProtocolError):
    """ A query was attempted after the session had already failed.
    """


class State(enum.Enum):
    RUNNING = 'RUNNING'
    ERRORED = 'ERRORED'
    CLOSED = 'CLOSED'



class Session:
    """ A :class:`Session` lives for exactly one conversation with the peer.
        The *channel* is a :class:`specialremote.transport.Channel` carrying
        lines in both directions; the *handler* implements the storage
        operations.

        The session owns a one-way error latch, :attr:`errored`. It is set
        when this side sends ERROR (see :func:`error`), or when the peer
        does; once set, nothing further is written to the channel, and
        :func:`run` returns the next time it checks.

        :ivar state: One of :class:`State`; RUNNING until :func:`run`
            returns or raises.
        :ivar failure: The exception that terminated the session, if any.
    """

    def __init__(self, channel, handler):

        self.channel = channel
        self.handler = handler
        self.errored = False
        self.failure = None
        self.state = State.RUNNING

        self.dispatch = {
            fields.INITREMOTE: self._initremote,
            fields.PREPARE: self._prepare,
            fields.TRANSFER: self._transfer,
            fields.CHECKPRESENT: self._checkpresent,
            fields.REMOVE: self._remove,
            fields.GETCOST: self._getcost,
            fields.GETAVAILABILITY: self._getavailability,
            fields.WHEREIS: self._whereis,
            fields.ERROR: self._error,
        }


    def run(self):
        """ Announce the protocol version and process commands until the
            peer closes the channel, or the session fails. Returns the final
            :class:`State`: CLOSED on a clean end-of-stream, ERRORED if the
            latch was set by a handler or by an engine-level fault.

            A read failure, a malformed command, a malformed reply to a
            query, or an ERROR from the peer is raised to the caller after
            the session has stopped.
        """

        try:
            self._send(version())

            while True:
                if self.errored:
                    break

                try:
                    line = self.channel.read_line()
                except ChannelClosed:
                    self.state = State.CLOSED
                    log.debug('peer closed the channel')
                    return self.state
                except ChannelError as ex:
                    self._fail(ex)
                    break

                command = Command.parse(line)

                try:
                    self._handle(command)
                except FramingError as ex:
                    self._fail(ex)
                    break

        except ChannelError:
            # A reply could not be written; the peer is gone.
            self.state = State.ERRORED
            raise

        self.state = State.ERRORED

        if self.failure is not None:
            raise self.failure

        return self.state


    def _handle(self, command):

        try:
            method = self.dispatch[command.verb]
        except KeyError:
            log.info('unsupported request', verb=command.verb)
            self._send(Message(fields.UNSUPPORTED_REQUEST))
            return

        method(command)


    def _send(self, message):
        """ Put one line on the wire, unless the latch is set.
        """

        with self.channel.lock:
            if self.errored:
                log.debug('suppressed after error', line=str(message))
                return

            self.channel.write_line(message.encode())


    def _fail(self, failure):
        """ Record *failure* as the reason this session is terminating, and
            report it to the peer if nothing else has been reported yet.
        """

        if self.failure is None and not self.errored:
            self.failure = failure

        log.error('session failed', error=str(failure))

        try:
            self.error(str(failure))
        except ChannelError:
            log.error('could not report the failure to the peer', exc_info=True)


    # Outward queries and notifications.

    def error(self, message):
        """ Send ERROR to the peer and set the latch. This is the only way
            to force the session into its terminal error state; calling it
            again after the first time is a no-op.
        """

        with self.channel.lock:
            if self.errored:
                return

            self.errored = True
            self.channel.write_line(Message(fields.ERROR, message).encode())


    def debug(self, message):
        self._send(Message(fields.DEBUG, message))


    def progress(self, count):
        """ Report that *count* bytes of the current transfer have been
            handled so far.
        """

        self._send(Message(fields.PROGRESS, int(count)))


    def get_config(self, name):
        return self._query(Message(fields.GETCONFIG, name))


    def set_config(self, name, value):
        self._send(Message(fields.SETCONFIG, name, value))


    def dir_hash(self, key):
        return self._query(Message(fields.DIRHASH, key))


    def get_uuid(self):
        return self._query(Message(fields.GETUUID))


    def get_git_dir(self):
        return self._query(Message(fields.GETGITDIR))


    def get_state(self, key):
        return self._query(Message(fields.GETSTATE, key))


    def set_state(self, key, value):
        self._send(Message(fields.SETSTATE, key, value))


    def set_url_present(self, key, url):
        self._send(Message(fields.SETURLPRESENT, key, url))


    def set_url_missing(self, key, url):
        self._send(Message(fields.SETURLMISSING, key, url))


    def set_uri_present(self, key, uri):
        self._send(Message(fields.SETURIPRESENT, key, uri))


    def set_uri_missing(self, key, uri):
        self._send(Message(fields.SETURIMISSING, key, uri))


    def get_urls(self, key, prefix=''):
        """ Return the list of URLs recorded for *key* that begin with
            *prefix*, in the order the peer sent them.
        """

        with self.channel.lock:
            self._query_send(Message(fields.GETURLS, key, prefix))

            urls = list()
            while True:
                value = self._read_value()
                if value == '':
                    break
                urls.append(value)

        return urls


    def _query(self, message):
        """ Send *message* and block for its single VALUE reply. The channel
            lock is held throughout, so no other line can slip in between
            the request and the reply.
        """

        with self.channel.lock:
            self._query_send(message)
            return self._read_value()


    def _query_send(self, message):

        if self.errored:
            raise SessionErrored('session has already failed; cannot send ' + message.verb)

        self.channel.write_line(message.encode())


    def _read_value(self):
        """ Read the reply to a query. The peer answers a query it cannot
            handle with ERROR, which ends the session the same way an
            inbound ERROR command does: no ERROR is sent back.
        """

        try:
            line = self.channel.read_line()
        except ChannelError as ex:
            self._fail(ex)
            raise

        reply = Command.parse(line)
        if reply.verb == fields.ERROR:
            self._error(reply)
            raise self.failure

        try:
            return unpack_value(line)
        except FramingError as ex:
            self._fail(ex)
            raise


    # Inbound command handlers. Each writes exactly one reply.

    def _initremote(self, command):

        result = invoke(self.handler.init_remote, self)

        if isinstance(result, Success):
            self._send(Message(fields.INITREMOTE_SUCCESS))
        else:
            self._send(Message(fields.INITREMOTE_FAILURE, _describe(result)))


    def _prepare(self, command):

        result = invoke(self.handler.prepare, self)

        if isinstance(result, Success):
            self._send(Message(fields.PREPARE_SUCCESS))
        else:
            self._send(Message(fields.PREPARE_FAILURE, _describe(result)))


    def _transfer(self, command):

        command.require(3)

        direction = command.arguments[0]
        key = command.arguments[1]

        # The file name is last on the line, and is allowed to contain spaces.
        path = ' '.join(command.arguments[2:])

        if direction == fields.STORE:
            method = self.handler.store
        elif direction == fields.RETRIEVE:
            method = self.handler.retrieve
        else:
            log.info('unsupported transfer direction', direction=direction)
            self._send(Message(fields.UNSUPPORTED_REQUEST))
            return

        result = invoke(method, self, key, path)

        if isinstance(result, Success):
            self._send(Message(fields.TRANSFER_SUCCESS, direction, key))
        else:
            message = _describe(result)
            log.warning('transfer failed', direction=direction, key=key, error=message)
            self._send(Message(fields.TRANSFER_FAILURE, direction, key, message))


    def _checkpresent(self, command):

        command.require(1)
        key = command.arguments[0]

        result = invoke(self.handler.check_present, self, key)

        if isinstance(result, Success):
            if result.value:
                self._send(Message(fields.CHECKPRESENT_SUCCESS, key))
            else:
                self._send(Message(fields.CHECKPRESENT_FAILURE, key))
        else:
            message = _describe(result)
            log.warning('presence unknown', key=key, error=message)
            self._send(Message(fields.CHECKPRESENT_UNKNOWN, key, message))


    def _remove(self, command):

        command.require(1)
        key = command.arguments[0]

        result = invoke(self.handler.remove, self, key)

        if isinstance(result, Success):
            self._send(Message(fields.REMOVE_SUCCESS, key))
        else:
            message = _describe(result)
            log.warning('remove failed', key=key, error=message)
            self._send(Message(fields.REMOVE_FAILURE, key, message))


    def _getcost(self, command):

        result = invoke(self.handler.get_cost, self)

        if isinstance(result, Declined):
            self._send(Message(fields.UNSUPPORTED_REQUEST))
        elif isinstance(result, Failure):
            self._fault(result.message)
        elif isinstance(result.value, bool) or not isinstance(result.value, int):
            self._fault('GetCost returned an invalid value')
        else:
            self._send(Message(fields.COST, result.value))


    def _getavailability(self, command):

        result = invoke(self.handler.get_availability, self)

        if isinstance(result, Declined):
            self._send(Message(fields.UNSUPPORTED_REQUEST))
        elif isinstance(result, Failure):
            self._fault(result.message)
        elif isinstance(result.value, Availability):
            self._send(Message(fields.AVAILABILITY, result.value.value))
        else:
            self._fault('GetAvailability returned an invalid value')


    def _whereis(self, command):

        command.require(1)
        key = command.arguments[0]

        result = invoke(self.handler.where_is, self, key)

        if isinstance(result, Declined):
            self._send(Message(fields.UNSUPPORTED_REQUEST))
        elif isinstance(result, Failure):
            self._fault(result.message)
        elif result.value:
            self._send(Message(fields.WHEREIS_SUCCESS, result.value))
        else:
            # Not an error: no location is known for this key.
            self._send(Message(fields.WHEREIS_FAILURE))


    def _error(self, command):

        message = command.remainder
        log.error('peer reported an error', error=message)

        self.errored = True
        if self.failure is None:
            self.failure = RemoteError(message)


    def _fault(self, message):
        """ An optional operation failed outright, or answered with nonsense.
            There is no reply in the protocol that can express that, so the
            session is over.
        """

        log.error('handler fault', error=message)
        self.error(message)


# end of class Session



def _describe(result):
    """ Return the message to attach to a FAILURE reply for *result*.
    """

    if isinstance(result, Failure):
        return result.message

    if isinstance(result, Declined):
        return 'unsupported request'

    return ''


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
