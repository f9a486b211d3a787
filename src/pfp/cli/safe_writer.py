"""Signal-aware output for the pfp CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from pfp.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes lines to a file descriptor or file, stopping on SIGPIPE or SIGINT.

    Writing raises BrokenPipeError once the reading end has gone away or the
    user interrupted the program; callers treat that as a normal end of output.

    Attributes:
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, Path]):
        """Initialize the writer.

        Args:
            file: A file descriptor (int), or a path to create or truncate.
        """
        self._closed = False
        self._file_obj = None

        if isinstance(file, int):
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write a string.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        try:
            os.write(self.fd, data.encode("utf-8"))
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each line followed by a newline."""
        for line in lines:
            self.write(f"{line}\n")

    def close(self) -> None:
        """Close the file if this writer opened it. Broken pipes on close are ignored."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # an exception from the with block takes priority
            if exc_type is None:
                raise
