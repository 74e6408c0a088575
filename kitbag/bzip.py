"""A writer that bzip2-compresses everything written to it."""

from __future__ import annotations

import argparse
import bz2
import shutil
import sys
from types import TracebackType
from typing import BinaryIO

_BLOCK_SIZE = 9
_CHUNK = 64 * 1024


class BzipWriter:
    """Compress written bytes with bzip2 onto an underlying binary stream.

    Closing flushes the compressed stream; the underlying stream stays open.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(_BLOCK_SIZE)

    @property
    def closed(self) -> bool:
        """Whether :meth:`close` has been called."""
        return self._compressor is None

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Compress ``data`` and return the number of uncompressed bytes taken."""
        if self._compressor is None:
            raise ValueError("write to closed BzipWriter")
        chunk = self._compressor.compress(data)
        if chunk:
            self._out.write(chunk)
        return memoryview(data).nbytes

    def close(self) -> None:
        """Flush the compressed data and end the stream."""
        if self._compressor is None:
            raise ValueError("BzipWriter already closed")
        compressor, self._compressor = self._compressor, None
        tail = compressor.flush()
        if tail:
            self._out.write(tail)

    def __enter__(self) -> BzipWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.closed:
            self.close()


def main(argv: list[str] | None = None) -> int:
    """Compress standard input with bzip2 onto standard output."""
    argparse.ArgumentParser(
        prog="bzipper", description="bzip2-compress standard input to standard output."
    ).parse_args(argv)
    out = sys.stdout.buffer
    writer = BzipWriter(out)
    try:
        shutil.copyfileobj(sys.stdin.buffer, writer, _CHUNK)
    except OSError as err:
        print(f"bzipper: {err}", file=sys.stderr)
        return 1
    try:
        writer.close()
        out.flush()
    except OSError as err:
        print(f"bzipper: close: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())