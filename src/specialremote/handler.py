from .protocol.result import Declined


class Handler:
    """ The :class:`Handler` is the gateway between the protocol engine and
        the storage backend the developer is actually implementing. The
        developer is expected to subclass the :class:`Handler` class and
        implement, at a minimum, :func:`init_remote`, :func:`prepare`,
        :func:`store`, :func:`retrieve`, :func:`remove`, and
        :func:`check_present`.

        Every method receives the active :class:`specialremote.Session` as
        its first argument; this is the vehicle for asking the peer for
        configuration values, reporting progress, and the like, while the
        operation is underway.

        A method may return a :class:`specialremote.Success`,
        :class:`specialremote.Failure`, or :class:`specialremote.Declined`
        instance; any other return value is treated as a success carrying
        that value, and any raised exception is treated as a failure whose
        message is the text of the exception.

        :func:`get_cost`, :func:`get_availability`, and :func:`where_is` are
        optional. The default implementations decline, and the peer is told
        the request is unsupported.
    """

    def init_remote(self, session):
        """ Invoked once, when the remote is first configured. This is the
            right time to validate settings via
            :func:`specialremote.Session.get_config`, and persist anything
            derived from them via :func:`specialremote.Session.set_config`.
        """

        raise NotImplementedError('init_remote() is not implemented')


    def prepare(self, session):
        """ Invoked before any other request in a given session, other than
            :func:`init_remote`.
        """

        raise NotImplementedError('prepare() is not implemented')


    def store(self, session, key, path):
        """ Store the contents of the local file at *path* as *key*.
        """

        raise NotImplementedError('store() is not implemented')


    def retrieve(self, session, key, path):
        """ Retrieve the content for *key*, and write it to the local file
            at *path*.
        """

        raise NotImplementedError('retrieve() is not implemented')


    def remove(self, session, key):
        """ Remove the content for *key*. Removing content that is already
            absent is not a failure.
        """

        raise NotImplementedError('remove() is not implemented')


    def check_present(self, session, key):
        """ Return True if the content for *key* is present, False if it is
            known to be absent. Raise an exception if presence cannot be
            determined; the peer is told the answer is unknown.
        """

        raise NotImplementedError('check_present() is not implemented')


    def get_cost(self, session):
        """ Return the integer cost of using this remote.
        """

        return Declined()


    def get_availability(self, session):
        """ Return :attr:`specialremote.Availability.GLOBAL` or
            :attr:`specialremote.Availability.LOCAL`.
        """

        return Declined()


    def where_is(self, session, key):
        """ Return a human-readable description of where the content for
            *key* is stored. An empty string means no location is known.
        """

        return Declined()


# end of class Handler


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
