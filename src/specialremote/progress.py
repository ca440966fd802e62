""" Throttled progress reporting for transfers. A :class:`ProgressReader`
    wraps the byte stream a handler is reading from, and tells the peer how
    far along the transfer is as the bytes flow through it.
"""

import io
import time

from . import config


class ProgressReader(io.RawIOBase):
    """ Wrap the readable binary *stream*, and report the cumulative byte
        count to *session* via :func:`specialremote.Session.progress`.

        Reports are throttled by one of two policies. With an *interval*,
        a report goes out once at least that many seconds have elapsed since
        the previous report; with a *threshold*, once at least that many
        bytes have been read since the previous report. Supplying neither
        uses whichever policy is configured, see :func:`config.progress`.

        Regardless of the policy, a final report goes out when the wrapped
        stream reaches its end (or raises) if anything was read since the
        last report. A read that produced nothing never triggers a report.

        The reader takes ownership of *stream*: closing the reader closes
        it, and so does garbage collection of the reader, the same as any
        other :mod:`io` object. Pass *closefd* as False to leave *stream*
        open for the caller.
    """

    def __init__(self, stream, session, interval=None, threshold=None, closefd=True):

        io.RawIOBase.__init__(self)

        if interval is None and threshold is None:
            interval, threshold = config.progress()

        self.stream = stream
        self.session = session
        self.interval = interval
        self.threshold = threshold
        self.closefd = closefd

        self.count = 0
        self.last_count = 0
        self.last_time = None


    @property
    def bytes_read(self):
        return self.count


    def readable(self):
        return True


    def read(self, size=-1):

        try:
            chunk = self.stream.read(size)
        except Exception:
            self._finish()
            raise

        if chunk is None:
            # Non-blocking stream with nothing available.
            return None

        # Reading with no size limit consumes the stream to its end.
        if size is None or size < 0:
            ended = True
        else:
            ended = len(chunk) == 0 and size != 0

        self._update(len(chunk), ended)
        return chunk


    def readinto(self, buffer):

        try:
            try:
                readinto = self.stream.readinto
            except AttributeError:
                produced = self._readinto(buffer)
            else:
                produced = readinto(buffer)
        except Exception:
            self._finish()
            raise

        if produced is None:
            return None

        self._update(produced, ended=(produced == 0 and memoryview(buffer).nbytes != 0))
        return produced


    def _readinto(self, buffer):
        """ Fallback for wrapped streams that only implement read().
        """

        view = memoryview(buffer).cast('B')
        chunk = self.stream.read(len(view))

        if chunk is None:
            return None

        view[:len(chunk)] = chunk
        return len(chunk)


    def readall(self):
        return self.read(-1)


    def close(self):

        try:
            if self.closefd:
                self.stream.close()
        finally:
            io.RawIOBase.close(self)


    def _update(self, produced, ended):

        self.count += produced

        if ended:
            self._finish()
        elif self._due():
            self._report()


    def _due(self):
        """ Return True if the throttle allows a report right now.
        """

        if self.count == self.last_count:
            return False

        if self.threshold is not None:
            return self.count - self.last_count >= self.threshold

        if self.last_time is None:
            return True

        return time.monotonic() - self.last_time >= self.interval


    def _finish(self):

        if self.count != self.last_count:
            self._report()


    def _report(self):

        self.session.progress(self.count)
        self.last_count = self.count
        self.last_time = time.monotonic()


# end of class ProgressReader


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
