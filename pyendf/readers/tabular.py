#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
TAB1 / TAB2 tabulated-function decoders

Both record shapes start with a CONT header whose ``N1`` is the number of
interpolation ranges ``NR``.  The header is followed by the flattened
``(NBT, INT)`` boundary/scheme pairs, six integers per line.  A TAB1 then
carries ``NP`` ``(x, y)`` pairs, six reals per line; a TAB2 carries
``NZ`` complete TAB1 records.

Supported record shapes
-----------------------
* **TAB1** (§0.6.3.7) — :func:`read_tab1`
* **TAB2** (§0.6.3.8) — :func:`read_tab2`, nesting TAB1 slices
* **LIST** payloads of reals — :func:`read_real_list`

Line counts
-----------
The interval header of a TAB1 spans ``ceil(2 * NR / 6)`` lines.  The
TAB2 decoder reads its interval header over ``ceil(NR / 6)`` lines, and
still requires ``2 * NR`` integers.  The two formulas are kept apart on
purpose: a TAB2 whose ``NR`` exceeds 3 fails with
:class:`~pyendf.exceptions.ElementCountError` here.

Every failure aborts the record being decoded; nothing partially built is
returned.
"""

from __future__ import annotations

import logging

import numpy as np

from pyendf.exceptions import ElementCountError
from pyendf.io.source import LineSource, read_line
from pyendf.models.records import (
    InterpolationInterval,
    InterpolationScheme,
    Tab1,
    Tab2,
)
from pyendf.utils.parsing import (
    decode_cont,
    decode_int_row,
    decode_real_row,
    lines_for,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Line counts
# ---------------------------------------------------------------------------

def tab1_range_lines(range_count: int) -> int:
    """Lines holding a TAB1 interval header: ``ceil(2 * NR / 6)``."""
    return lines_for(2 * range_count)


def tab1_point_lines(point_count: int) -> int:
    """Lines holding a TAB1 data payload: ``ceil(2 * NP / 6)``."""
    return lines_for(2 * point_count)


def tab2_range_lines(range_count: int) -> int:
    """Lines read for a TAB2 interval header: ``ceil(NR / 6)``."""
    return lines_for(range_count)


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

def read_real_list(source: LineSource, n: int) -> list[float]:
    """Read the ``ceil(n / 6)`` data lines of an *n*-element real list

    Parameters
    ----------
    source : LineSource
        Source positioned at the first data line.
    n : int
        Number of values declared by the list header.

    Returns
    -------
    list[float]
        Every value found on the lines read.  Short rows end early, so
        the length equals *n* for well-formed input.
    """
    values: list[float] = []
    for _ in range(lines_for(n)):
        decode_real_row(read_line(source), values)
    return values


def _read_intervals(
    source: LineSource,
    range_count: int,
    n_lines: int,
) -> list[InterpolationInterval]:
    """Read an interval header and convert it to interval objects."""
    flat: list[int] = []
    for _ in range(n_lines):
        decode_int_row(read_line(source), flat)
    if len(flat) != 2 * range_count:
        raise ElementCountError(
            f"Interpolation header holds {len(flat)} integers, "
            f"expected 2 * NR = {2 * range_count}"
        )

    intervals: list[InterpolationInterval] = []
    start = 0
    for boundary, code in zip(flat[0::2], flat[1::2]):
        intervals.append(
            InterpolationInterval(
                scheme=InterpolationScheme.from_code(code),
                start=start,
                end=boundary,
            )
        )
        start = boundary
    return intervals


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_tab1(source: LineSource) -> Tab1:
    """Decode one TAB1 record starting at the current line

    Parameters
    ----------
    source : LineSource
        Source positioned at the TAB1 header (CONT) line.

    Returns
    -------
    Tab1
        Header fields, interpolation intervals over ``[0, NP)`` and an
        ``(NP, 2)`` array of ``(x, y)`` pairs in file order.

    Raises
    ------
    RecordTooShortError
        If any line is narrower than 66 columns, including an empty line
        at end of input.
    ElementCountError
        If the interval header does not hold ``2 * NR`` integers or the
        payload does not hold ``2 * NP`` reals.
    InvalidInterpolationError
        If an interpolation code is outside 1-6.
    InvalidFloatError, InvalidIntegerError
        If a field is not numeric.

    Examples
    --------
    >>> tab = read_tab1(io.StringIO(text))
    >>> tab.intervals[0].scheme
    <InterpolationScheme.LINEAR_LINEAR: 2>
    >>> tab.data.shape
    (3, 2)
    """
    c1, c2, l1, l2, range_count, point_count = decode_cont(read_line(source))
    intervals = _read_intervals(source, range_count, tab1_range_lines(range_count))

    raw: list[float] = []
    for _ in range(tab1_point_lines(point_count)):
        decode_real_row(read_line(source), raw)
    if len(raw) != 2 * point_count:
        raise ElementCountError(
            f"TAB1 payload holds {len(raw)} reals, "
            f"expected 2 * NP = {2 * point_count}"
        )

    data = np.asarray(raw, dtype="f8").reshape(point_count, 2)
    logger.debug("TAB1: NR=%d, NP=%d", range_count, point_count)
    return Tab1(head=(c1, c2, l1, l2), intervals=intervals, data=data)


def read_tab2(source: LineSource) -> Tab2:
    """Decode one TAB2 record and its ``NZ`` nested TAB1 slices

    Parameters
    ----------
    source : LineSource
        Source positioned at the TAB2 header (CONT) line.

    Returns
    -------
    Tab2
        Header fields, interpolation intervals over ``[0, NZ)`` and the
        list of decoded TAB1 slices.

    Raises
    ------
    ElementCountError
        If the ``ceil(NR / 6)`` header lines do not hold ``2 * NR``
        integers.
    ParseError
        Any error raised while decoding a nested TAB1.
    """
    c1, c2, l1, l2, range_count, slice_count = decode_cont(read_line(source))
    intervals = _read_intervals(source, range_count, tab2_range_lines(range_count))

    slices = [read_tab1(source) for _ in range(slice_count)]
    logger.debug("TAB2: NR=%d, NZ=%d", range_count, slice_count)
    return Tab2(head=(c1, c2, l1, l2), intervals=intervals, data=slices)
