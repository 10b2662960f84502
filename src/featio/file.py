# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "featio"
__all__ = ["StreamFile", "InvalidFileError", "wrap_bytes"]

import abc
import io
from os import PathLike


class StreamFile(metaclass=abc.ABCMeta):
    """
    Base class for all line based, streamed file readers and writers.

    In contrast to a file that is read into memory as a whole, a
    :class:`StreamFile` wraps an open binary stream and processes it
    one line at a time.
    If a file path is given, the file is opened by the object and the
    object takes ownership of it.
    A given file-like object is used as is, but it is closed as well,
    when :meth:`close()` is called.

    A :class:`StreamFile` can be used as context manager.

    Parameters
    ----------
    file : file-like object or str
        The binary stream to operate on.
        Alternatively a file path can be supplied.
    mode : {'rb', 'wb'}
        The mode a file path is opened with.
    """

    def __init__(self, file, mode):
        if is_open_compatible(file):
            file = open(file, mode)
        elif is_text(file):
            raise TypeError("A file opened in 'binary' mode is required")
        self._stream = file

    @property
    def stream(self):
        return self._stream

    @property
    def closed(self):
        return self._stream.closed

    def close(self):
        """
        Close the underlying stream.
        """
        self._stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class InvalidFileError(Exception):
    """
    Indicates that the file is malformed in a way that parsing cannot
    continue, e.g. a truncated directive or a corrupt sequence block.

    Parameters
    ----------
    message : str
        The error message.
    line : bytes, optional
        The offending line.
    line_number : int, optional
        The 1-based number of the offending line in the stream.
    """

    def __init__(self, message, line=None, line_number=None):
        if line_number is not None and line is not None:
            message = f"{message} (line {line_number}: {line!r})"
        elif line_number is not None:
            message = f"{message} (line {line_number})"
        elif line is not None:
            message = f"{message} ({line!r})"
        super().__init__(message)
        self.line = line
        self.line_number = line_number


def wrap_bytes(data, width):
    """
    Split the given `data` into chunks of at most `width` bytes.

    Parameters
    ----------
    data : bytes
        The data to be wrapped.
    width : int
        The maximum number of bytes per line.

    Returns
    -------
    lines : list of bytes
        The wrapped lines.
    """
    lines = []
    for i in range(0, len(data), width):
        lines.append(data[i : i + width])
    return lines


def as_bytes(value):
    if isinstance(value, str):
        return value.encode("UTF-8")
    return bytes(value)


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))
