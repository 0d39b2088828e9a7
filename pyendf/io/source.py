#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Line sources for the ENDF decoders

The decoders never depend on a concrete file type.  Anything exposing
``readline()`` satisfies :class:`LineSource`: text or binary file
objects, :class:`io.StringIO`, :class:`io.BytesIO`, or a wrapper around
a network stream.  Sources that additionally expose ``seek()`` and
``tell()`` satisfy :class:`SeekableLineSource`, which only the
descriptive-data reader and the optional section index require.

Binary sources are decoded as Latin-1 so that a stray non-ASCII byte in
a TEXT record never aborts decoding.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Protocol, runtime_checkable

from pyendf.exceptions import FileFormatError, SourceError

logger = logging.getLogger(__name__)

SOURCE_ENCODING: str = "latin-1"
"""Encoding used when opening files and decoding binary sources."""


@runtime_checkable
class LineSource(Protocol):
    """Forward-readable, line-oriented source"""

    def readline(self) -> str | bytes: ...


@runtime_checkable
class SeekableLineSource(LineSource, Protocol):
    """Line source that also supports absolute positioning"""

    def seek(self, offset: int, whence: int = ...) -> int: ...

    def tell(self) -> int: ...


def read_line(source: LineSource) -> str:
    """Read the next physical line from *source*

    Returns
    -------
    str
        The line, including its terminator if the source supplies one.
        An empty string means the source is exhausted.

    Raises
    ------
    SourceError
        If the underlying stream raises :class:`OSError`.
    """
    try:
        line = source.readline()
    except OSError as exc:
        raise SourceError(f"Failed to read a line from {source!r}: {exc}") from exc
    if isinstance(line, bytes):
        line = line.decode(SOURCE_ENCODING)
    return line


def rewind(source: SeekableLineSource, offset: int = 0) -> None:
    """Move *source* to the absolute position *offset*

    Raises
    ------
    TypeError
        If *source* cannot seek.
    SourceError
        If the seek itself fails.
    """
    if not isinstance(source, SeekableLineSource):
        raise TypeError(
            f"Source {type(source).__name__} does not support seek(); "
            "an absolutely seekable source is required here"
        )
    try:
        source.seek(offset)
    except OSError as exc:
        raise SourceError(f"Failed to seek {source!r} to {offset}: {exc}") from exc


def position(source: SeekableLineSource) -> int:
    """Return the current position of *source* as reported by ``tell()``"""
    try:
        return source.tell()
    except OSError as exc:
        raise SourceError(f"Failed to query position of {source!r}: {exc}") from exc


def open_endf(path: Path | str | os.PathLike) -> IO[str]:
    """Open an ENDF file for reading

    The returned text stream keeps the original line terminators
    (``newline=""``); the record decoders strip them.

    Raises
    ------
    FileFormatError
        If *path* does not name an existing file.
    SourceError
        If the file exists but cannot be opened.

    Examples
    --------
    >>> with open_endf("n_9437_94-Pu-239.dat") as fh:
    ...     line = seek_section(fh, 1, 451)
    """
    filepath = Path(path)
    if not filepath.is_file():
        raise FileFormatError(f"ENDF file not found: {filepath}")
    logger.debug("Opening ENDF file: %s", filepath)
    try:
        return open(filepath, "r", encoding=SOURCE_ENCODING, newline="")
    except OSError as exc:
        raise SourceError(f"Failed to open {filepath}: {exc}") from exc
