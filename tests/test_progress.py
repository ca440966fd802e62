import gc
import io
import shutil

import pytest
import specialremote

from specialremote import progress


class Recorder:
    """ Stands in for a Session; remembers every progress report.
    """

    def __init__(self):
        self.reports = list()

    def progress(self, count):
        self.reports.append(count)


def drain(reader, size):
    while True:
        chunk = reader.read(size)
        if not chunk:
            break


@pytest.mark.parametrize('total,size', [
    (0, 10),
    (1, 10),
    (95, 7),
    (100, 10),
    (1000, 1),
    (1000, 333),
])
def test_byte_threshold(total, size):

    recorder = Recorder()
    reader = specialremote.ProgressReader(io.BytesIO(b'x' * total), recorder, threshold=10)

    drain(reader, size)

    assert reader.bytes_read == total
    assert recorder.reports == sorted(recorder.reports)

    if total == 0:
        assert recorder.reports == []
    else:
        assert recorder.reports[-1] == total
        assert len(recorder.reports) == len(set(recorder.reports))

    # Each report other than the last waits for the threshold.
    previous = 0
    for report in recorder.reports[:-1]:
        assert report - previous >= 10
        previous = report


def test_time_interval(monkeypatch):

    now = [100.0]
    monkeypatch.setattr(progress.time, 'monotonic', lambda: now[0])

    recorder = Recorder()
    reader = specialremote.ProgressReader(io.BytesIO(b'x' * 50), recorder, interval=0.5)

    # The first read always reports.
    reader.read(10)
    assert recorder.reports == [10]

    now[0] += 0.1
    reader.read(10)
    now[0] += 0.1
    reader.read(10)
    assert recorder.reports == [10]

    now[0] += 0.5
    reader.read(10)
    assert recorder.reports == [10, 40]

    # End-of-stream flushes what was read since the last report.
    reader.read(10)
    reader.read(10)
    assert recorder.reports == [10, 40, 50]

    # Nothing new, nothing reported.
    now[0] += 10
    reader.read(10)
    assert recorder.reports == [10, 40, 50]


def test_zero_progress_reads(monkeypatch):

    now = [100.0]
    monkeypatch.setattr(progress.time, 'monotonic', lambda: now[0])

    recorder = Recorder()
    reader = specialremote.ProgressReader(io.BytesIO(b'abc'), recorder, interval=0.5)

    reader.read(0)
    now[0] += 1
    reader.read(0)
    assert recorder.reports == []


def test_final_report_on_error():

    class Flaky(io.RawIOBase):
        def __init__(self):
            self.calls = 0

        def readable(self):
            return True

        def read(self, size=-1):
            self.calls += 1
            if self.calls > 2:
                raise OSError('connection reset')
            return b'y' * 4

    recorder = Recorder()
    reader = specialremote.ProgressReader(Flaky(), recorder, threshold=100)

    reader.read(4)
    reader.read(4)
    assert recorder.reports == []

    with pytest.raises(OSError):
        reader.read(4)

    assert recorder.reports == [8]


def test_read_all():

    recorder = Recorder()
    reader = specialremote.ProgressReader(io.BytesIO(b'z' * 30), recorder, threshold=1000)

    assert reader.read() == b'z' * 30
    assert recorder.reports == [30]


def test_readinto_and_copy():

    recorder = Recorder()
    source = io.BytesIO(b'q' * 5000)
    destination = io.BytesIO()

    with specialremote.ProgressReader(source, recorder, threshold=1024) as reader:
        shutil.copyfileobj(reader, destination, 700)

    assert destination.getvalue() == b'q' * 5000
    assert recorder.reports[-1] == 5000
    assert recorder.reports == sorted(recorder.reports)
    assert source.closed


def test_caller_keeps_stream():

    recorder = Recorder()
    source = io.BytesIO(b'r' * 64)

    with specialremote.ProgressReader(source, recorder, threshold=1000, closefd=False) as reader:
        reader.read()

    assert reader.closed
    assert not source.closed

    # Dropping an unclosed reader must not close the stream either.
    reader = specialremote.ProgressReader(source, recorder, threshold=1000, closefd=False)
    del reader
    gc.collect()

    assert not source.closed
    source.seek(0)
    assert source.read(4) == b'rrrr'


def test_buffered_wrapper():

    recorder = Recorder()
    reader = specialremote.ProgressReader(io.BytesIO(b'line one\nline two\n'), recorder, threshold=1000)
    buffered = io.BufferedReader(reader)

    assert buffered.readline() == b'line one\n'
    assert buffered.readline() == b'line two\n'
    assert buffered.readline() == b''
    assert recorder.reports == [18]


def test_through_session(converse, recording):

    def store(session, key, path):
        reader = specialremote.ProgressReader(io.BytesIO(b'x' * 25), session, threshold=10)
        drain(reader, 5)

    result = converse(recording(store=store), 'TRANSFER STORE k1 f1\n')

    assert result.lines == [
        'VERSION 1',
        'PROGRESS 10',
        'PROGRESS 20',
        'PROGRESS 25',
        'TRANSFER-SUCCESS STORE k1',
    ]


def test_configured_policy(monkeypatch):

    monkeypatch.setenv('SPECIALREMOTE_PROGRESS', 'bytes')
    monkeypatch.setenv('SPECIALREMOTE_PROGRESS_BYTES', '4')

    reader = specialremote.ProgressReader(io.BytesIO(), Recorder())
    assert reader.threshold == 4
    assert reader.interval is None

    monkeypatch.delenv('SPECIALREMOTE_PROGRESS')

    reader = specialremote.ProgressReader(io.BytesIO(), Recorder())
    assert reader.threshold is None
    assert reader.interval == 0.5


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
