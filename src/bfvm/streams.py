from __future__ import annotations

import io
from typing import IO, Any, Optional, Union

StreamLike = Union[IO[str], IO[bytes], Any]


def read_byte(source: StreamLike) -> Optional[int]:
    """Read one character from ``source`` and return its byte value.

    Text sources yield the code point reduced to a byte; binary sources
    yield the byte itself. ``None`` means the source is exhausted.
    """
    data = source.read(1)
    if not data:
        return None
    if isinstance(data, (bytes, bytearray)):
        return data[0]
    return ord(data[0]) & 0xFF


def write_byte(sink: StreamLike, value: int) -> None:
    if _is_text(sink):
        sink.write(chr(value))
    else:
        sink.write(bytes((value,)))
    flush = getattr(sink, 'flush', None)
    if flush is not None:
        flush()


def _is_text(stream: StreamLike) -> bool:
    if isinstance(stream, io.TextIOBase):
        return True
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    # Duck-typed sinks: anything that reports an encoding is treated as text.
    return getattr(stream, 'encoding', None) is not None


def as_input_stream(data: Union[str, bytes, bytearray, StreamLike, None]) -> StreamLike:
    if data is None:
        return io.BytesIO(b'')
    if isinstance(data, str):
        return io.StringIO(data)
    if isinstance(data, (bytes, bytearray)):
        return io.BytesIO(bytes(data))
    return data
