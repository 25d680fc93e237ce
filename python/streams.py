"""
Name: streams
Description: shared input handling for the text utilities
License: perl

Maps a command-line token to a readable byte stream and wraps it with
line-at-a-time and bounded-byte reads. The token '-' is standard input.
"""

import os
import sys

__version__ = "1.0.0"

STDIN_TOKEN = '-'
ENCODING = 'utf-8'


class InputDiagnostic:
    """A per-file failure message, printed on stderr as '{token}: {reason}'."""
    def __init__(self, token, reason):
        self.token = token
        self.reason = reason

    @classmethod
    def from_os_error(cls, token, err):
        return cls(token, err.strerror or str(err))

    def __str__(self):
        return f"{self.token}: {self.reason}"

    def report(self, prefix=None):
        if prefix:
            print(f"{prefix}: {self}", file=sys.stderr)
        else:
            print(self, file=sys.stderr)


def decode(data: bytes) -> str:
    """Lossy decoding: invalid sequences become U+FFFD, never raises."""
    return data.decode(ENCODING, errors='replace')


class LineReader:
    """
    Line and byte reads over one binary stream.

    Used as a context manager, the underlying handle is closed on exit
    unless it is standard input.
    """
    def __init__(self, stream, token=STDIN_TOKEN, owns_stream=False):
        self.stream = stream
        self.token = token
        self.owns_stream = owns_stream

    def read_line(self):
        """
        Reads up to and including the next b'\\n'. Returns (bytes_read, text);
        bytes_read is 0 only at end of stream.
        """
        raw = self.stream.readline()
        return len(raw), decode(raw)

    def read_bytes(self, limit: int):
        """Reads at most `limit` bytes, fewer only at end of stream."""
        chunks = []
        remaining = limit
        while remaining > 0:
            chunk = self.stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b''.join(chunks)
        return len(data), data

    def __iter__(self):
        while True:
            bytes_read, line = self.read_line()
            if bytes_read == 0:
                return
            yield bytes_read, line

    def close(self):
        if self.owns_stream:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def _stdin_stream():
    # sys.stdin may be replaced by a raw binary object (e.g. under test)
    return getattr(sys.stdin, 'buffer', sys.stdin)


def resolve(token: str) -> LineReader:
    """
    Resolves an input token to a LineReader.

    '-' never fails. Any other token is opened for binary reading; failures
    (missing file, permission denied, directory) raise OSError here, before
    any data is read.
    """
    if token == STDIN_TOKEN:
        return LineReader(_stdin_stream(), token)

    fh = open(token, 'rb')
    return LineReader(fh, token, owns_stream=True)


def program_name():
    return os.path.basename(sys.argv[0])
