"""Byte stream utilities.

The relay copies raw bytes, with no decoding, from one binary stream to
another and ensures a non-empty output ends with a line feed.
"""

from typing import BinaryIO, Optional

LINE_TERMINATOR = b"\n"


def relay(input_stream: BinaryIO, output_stream: BinaryIO) -> None:
    """Copy input_stream to output_stream, appending a trailing newline if needed.

    Bytes are read one at a time until ``read`` returns ``b""``. If at least
    one byte was copied and the last one was not ``\\n``, a single ``\\n`` is
    written after the copy. Empty input produces empty output.

    Errors raised by either stream propagate unchanged; the trailing newline
    check is skipped in that case. Neither stream is flushed or closed.

    Args:
        input_stream: Binary stream to read from
        output_stream: Binary stream to write to
    """
    last: Optional[bytes] = None

    while True:
        byte = input_stream.read(1)
        if not byte:
            break
        output_stream.write(byte)
        last = byte

    if last is not None and last != LINE_TERMINATOR:
        output_stream.write(LINE_TERMINATOR)
