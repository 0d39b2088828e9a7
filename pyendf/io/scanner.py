#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Forward section scanner

An ENDF file is an ordered concatenation of sections, and every line
carries its ``(MAT, MF, MT)`` key in the identifier trailer.  The scanner
reads lines from the current position until the trailer matches the
requested key and returns that line; the lines after it are left in the
source for the record decoders.

The scanner only ever moves forward.  Re-scanning from the top of a file
is the caller's job (see :func:`pyendf.io.source.rewind`).  For repeated
look-ups, :func:`index_sections` builds a ``key -> offset`` map in one
pass which the caller can combine with ``rewind`` and a scan.
"""

from __future__ import annotations

import logging
from typing import Callable

from pyendf.exceptions import EndOfInputError
from pyendf.io.source import LineSource, SeekableLineSource, position, read_line
from pyendf.models.records import RecordIdentifier
from pyendf.utils.parsing import decode_identifier

logger = logging.getLogger(__name__)

SectionKey = tuple[int, int, int]
"""``(MAT, MF, MT)`` triple identifying one section of a tape."""


def _scan(
    source: LineSource,
    matches: Callable[[RecordIdentifier], bool],
    label: str,
) -> str:
    n_lines = 0
    while True:
        line = read_line(source)
        if not line:
            logger.debug("%s not found after %d lines", label, n_lines)
            raise EndOfInputError(
                f"Reached end of input after {n_lines} lines without finding {label}"
            )
        n_lines += 1
        if matches(decode_identifier(line)):
            logger.debug("Found %s after %d lines", label, n_lines)
            return line


def seek_section(source: LineSource, file: int, section: int) -> str:
    """Advance *source* to the first line of section ``(MF, MT)``

    Parameters
    ----------
    source : LineSource
        Source positioned anywhere before the wanted section.
    file : int
        File number (MF).
    section : int
        Section number (MT).

    Returns
    -------
    str
        The first matching line.  The source is left positioned on the
        line that follows it.

    Raises
    ------
    EndOfInputError
        If the source is exhausted before a match.  This is the normal
        outcome for an absent section.
    RecordTooShortError, InvalidIntegerError
        If a line's identifier trailer cannot be decoded.
    """
    return _scan(
        source,
        lambda ident: ident.file == file and ident.section == section,
        f"MF={file}, MT={section}",
    )


def seek_material_section(
    source: LineSource,
    material: int,
    file: int,
    section: int,
) -> str:
    """Advance *source* to the first line of ``(MAT, MF, MT)``

    Same contract as :func:`seek_section`, additionally matching the
    material number.
    """
    return _scan(
        source,
        lambda ident: (ident.material, ident.file, ident.section) == (material, file, section),
        f"MAT={material}, MF={file}, MT={section}",
    )


def index_sections(source: SeekableLineSource) -> dict[SectionKey, int]:
    """Record the position of the first line of every section

    Reads *source* from its current position to the end.  Control
    records (SEND, FEND, MEND, TEND and the tape identifier, i.e. any
    line with ``MF == 0`` or ``MT == 0``) are not indexed.

    Returns
    -------
    dict[tuple[int, int, int], int]
        ``(MAT, MF, MT) -> offset`` where *offset* is the value of
        ``tell()`` just before the section's first line.  Pass it to
        :func:`~pyendf.io.source.rewind`.

    Examples
    --------
    >>> index = index_sections(fh)
    >>> rewind(fh, index[(9437, 1, 460)])
    >>> head = seek_material_section(fh, 9437, 1, 460)
    """
    index: dict[SectionKey, int] = {}
    while True:
        offset = position(source)
        line = read_line(source)
        if not line:
            break
        ident = decode_identifier(line)
        if ident.file == 0 or ident.section == 0:
            continue
        index.setdefault((ident.material, ident.file, ident.section), offset)
    logger.debug("Indexed %d sections", len(index))
    return index
