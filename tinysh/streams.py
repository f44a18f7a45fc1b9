"""
Stream wrappers used by the shell and its commands.

Built-in commands write through these wrappers instead of touching
sys.stdout directly, so the same code runs against the real terminal
and against in-memory buffers in tests.
"""

import io
import sys
from typing import Optional, TextIO, Union

# Bytes that are not valid in the stream encoding round-trip as lone
# surrogates instead of raising UnicodeDecodeError/UnicodeEncodeError
STDIO_ERRORS = 'surrogateescape'


def tolerate_undecodable(stream: TextIO) -> TextIO:
    """
    Switch a standard text stream to surrogateescape error handling.

    Streams without reconfigure() (e.g. io.StringIO) are returned as is.
    """
    reconfigure = getattr(stream, 'reconfigure', None)
    if reconfigure is not None:
        reconfigure(errors=STDIO_ERRORS)
    return stream


class Stream:
    """Common base for wrapped text streams"""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def fileno(self) -> Optional[int]:
        """
        Get the OS-level file descriptor of the wrapped stream.

        Returns:
            File descriptor, or None for in-memory buffers
        """
        try:
            return self.stream.fileno()
        except (AttributeError, OSError, io.UnsupportedOperation):
            return None

    def get_value(self) -> str:
        """Get buffered contents (empty string for real streams)"""
        getvalue = getattr(self.stream, 'getvalue', None)
        return getvalue() if getvalue else ''


class InputStream(Stream):
    """Line-oriented input stream"""

    def readline(self) -> str:
        """
        Read one line.

        Returns:
            The line including its newline, or '' at end of input
        """
        return self.stream.readline()

    @classmethod
    def from_text(cls, text: str) -> 'InputStream':
        """Create an input stream that replays the given text"""
        return cls(io.StringIO(text))

    @classmethod
    def from_stdin(cls) -> 'InputStream':
        return cls(tolerate_undecodable(sys.stdin))


class OutputStream(Stream):
    """Text output stream accepting both str and bytes"""

    def write(self, data: Union[str, bytes]) -> int:
        """
        Write data to the wrapped stream.

        Bytes are decoded as UTF-8 with replacement of invalid sequences.

        Returns:
            Number of characters written
        """
        if isinstance(data, bytes):
            data = data.decode('utf-8', errors='replace')
        return self.stream.write(data)

    def flush(self):
        self.stream.flush()

    @classmethod
    def to_buffer(cls):
        """Create a stream that collects output in memory"""
        return cls(io.StringIO())

    @classmethod
    def from_stdout(cls) -> 'OutputStream':
        return cls(tolerate_undecodable(sys.stdout))


class ErrorStream(OutputStream):
    """Output stream bound to standard error by default"""

    @classmethod
    def from_stderr(cls) -> 'ErrorStream':
        return cls(sys.stderr)
