import io
import pytest

import specialremote


class Conversation:
    """ The outcome of running a session against canned input: the lines
        written, the final state, and the exception raised by run(), if any.
    """

    def __init__(self, session, output, error):
        self.session = session
        self.output = output.getvalue()
        self.lines = self.output.splitlines()
        self.error = error
        self.state = session.state


    def errors(self):
        return [line for line in self.lines if line.split(' ')[0] == 'ERROR']


class RecordingHandler(specialremote.Handler):
    """ A handler whose answers are set per test, and which remembers every
        call made to it.
    """

    def __init__(self, **answers):
        self.answers = answers
        self.calls = list()


    def _answer(self, name, *args):
        self.calls.append((name,) + args)
        answer = self.answers.get(name)
        if callable(answer):
            return answer(*args)
        if isinstance(answer, Exception):
            raise answer
        return answer


    def init_remote(self, session):
        return self._answer('init_remote', session)

    def prepare(self, session):
        return self._answer('prepare', session)

    def store(self, session, key, path):
        return self._answer('store', session, key, path)

    def retrieve(self, session, key, path):
        return self._answer('retrieve', session, key, path)

    def remove(self, session, key):
        return self._answer('remove', session, key)

    def check_present(self, session, key):
        return self._answer('check_present', session, key)

    def get_cost(self, session):
        if 'get_cost' not in self.answers:
            return specialremote.Handler.get_cost(self, session)
        return self._answer('get_cost', session)

    def get_availability(self, session):
        if 'get_availability' not in self.answers:
            return specialremote.Handler.get_availability(self, session)
        return self._answer('get_availability', session)

    def where_is(self, session, key):
        if 'where_is' not in self.answers:
            return specialremote.Handler.where_is(self, session, key)
        return self._answer('where_is', session, key)


@pytest.fixture
def converse():
    """ Return a function that runs a session for *handler* against the
        *text* the peer sends, and returns a :class:`Conversation`.
    """

    def run(handler, text):
        output = io.StringIO()
        channel = specialremote.transport.StreamChannel(io.StringIO(text), output)
        session = specialremote.Session(channel, handler)

        error = None
        try:
            session.run()
        except (specialremote.ProtocolError, specialremote.TransportError) as ex:
            error = ex

        return Conversation(session, output, error)

    return run


@pytest.fixture
def recording():
    """ Return the RecordingHandler class; call it with the answers for the
        test at hand, keyed by method name.
    """

    return RecordingHandler


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
