import io
import sys

import pytest


@pytest.fixture
def feed_stdin(monkeypatch):
    """Replaces standard input with the given bytes."""
    def _feed(data: bytes):
        monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(data)))
    return _feed


@pytest.fixture
def run_main(monkeypatch):
    """Runs a tool's main() with the given arguments and returns its exit code."""
    def _run(module, *argv):
        monkeypatch.setattr(sys, 'argv', [module.__name__, *argv])
        with pytest.raises(SystemExit) as excinfo:
            module.main()
        return excinfo.value.code
    return _run


class FailingStream:
    """A binary stream whose reads fail after the given data is consumed."""
    def __init__(self, data=b''):
        self.data = io.BytesIO(data)
        self.closed = False

    def readline(self):
        line = self.data.readline()
        if not line:
            raise OSError(5, "Input/output error")
        return line

    def read(self, size=-1):
        chunk = self.data.read(size)
        if not chunk:
            raise OSError(5, "Input/output error")
        return chunk

    def close(self):
        self.closed = True


@pytest.fixture
def failing_stream():
    return FailingStream
