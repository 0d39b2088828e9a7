#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Field decoding and line-level record grammar for ENDF-6 files

All low-level text parsing and numeric conversion routines live here so
that none of the tabular decoders or section readers duplicates
format-specific logic.  Every function works on a single physical line;
reading lines from a source is the job of :mod:`pyendf.io`.

ENDF-6 Fixed-Width Format
-------------------------
Every ENDF record line is 80 characters wide:

* **Columns 0–65** (66 chars): six data fields, each 11 characters wide.
* **Columns 66–69** (4 chars):  MAT number.
* **Columns 70–71** (2 chars):  MF number.
* **Columns 72–74** (3 chars):  MT number.
* **Columns 75–79** (5 chars):  line sequence number (NS).

A trailing line terminator (``\\n`` or ``\\r\\n``) is not a column and is
ignored by every decoder.

Floating-point fields usually omit the exponent marker and embed the
exponent sign in the mantissa (``" 6.15077-10"`` is 6.15077e-10).  Fields
that already contain ``E`` are parsed as-is; a Fortran ``D`` marker is
normalised to ``E``.

References
----------
.. [1] ENDF-6 Formats Manual (ENDF-102), BNL-90365-2009 Rev. 2, §0.6.
"""

from __future__ import annotations

import logging

from pyendf.exceptions import (
    InvalidFloatError,
    InvalidIntegerError,
    RecordTooShortError,
)
from pyendf.models.records import ContRecord, RecordIdentifier
from pyendf.utils.constants import (
    ENDF_DATA_WIDTH,
    ENDF_FIELD_WIDTH,
    ENDF_FIELDS_PER_LINE,
    ENDF_LINE_WIDTH,
    IDENT_MAT_COLUMNS,
    IDENT_MF_COLUMNS,
    IDENT_MT_COLUMNS,
    IDENT_NS_COLUMNS,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def decode_real(field: str) -> float:
    """Convert an ENDF-6 real field to a Python float

    Parameters
    ----------
    field : str
        An 11-character (or already stripped) field taken from the data
        portion of a line.  May contain leading/trailing whitespace.

    Returns
    -------
    float
        The converted numeric value.

    Raises
    ------
    InvalidFloatError
        If the field is blank or is not a floating-point literal after
        the exponent normalisation.

    Notes
    -----
    Conversion strategy:

    1. Strip whitespace.  If ``e``/``E`` is present, parse directly; a
       ``D`` marker is first rewritten to ``E``.
    2. Otherwise set aside one leading sign character, split the rest at
       the first ``+`` or ``-`` (the exponent sign) and insert ``e``.
    3. Call ``float()`` on the rebuilt string.

    Examples
    --------
    >>> decode_real(" 9.423900+4")
    94239.0
    >>> decode_real("-1.5-3")
    -0.0015
    >>> decode_real(" 1.23456E+03")
    1234.56
    """
    t = field.strip()
    if "e" in t or "E" in t:
        candidate = t
    elif "D" in t or "d" in t:
        candidate = t.replace("D", "E").replace("d", "E")
    else:
        sign = ""
        body = t
        if body[:1] in ("+", "-"):
            sign, body = body[0], body[1:]
        idx = next((i for i, c in enumerate(body) if c in "+-"), -1)
        if idx >= 0:
            body = body[:idx] + "e" + body[idx:]
        candidate = sign + body

    try:
        return float(candidate)
    except ValueError as exc:
        raise InvalidFloatError(
            f"Cannot convert ENDF field {field!r} to float (after transform: {candidate!r})"
        ) from exc


def decode_int(field: str) -> int:
    """Convert a right-justified ENDF integer field to a Python int

    Raises
    ------
    InvalidIntegerError
        If the stripped field is blank or not a decimal integer.

    Examples
    --------
    >>> decode_int("         42")
    42
    """
    t = field.strip()
    try:
        return int(t)
    except ValueError as exc:
        raise InvalidIntegerError(
            f"Cannot convert ENDF field {field!r} to int"
        ) from exc


# ---------------------------------------------------------------------------
# Column handling
# ---------------------------------------------------------------------------

def _require_columns(line: str, width: int) -> str:
    """Drop the line terminator and check that *width* columns remain."""
    text = line.rstrip("\r\n")
    if len(text) < width:
        raise RecordTooShortError(
            f"Record has {len(text)} columns, at least {width} required: {text!r}"
        )
    return text


def split_fields(line: str) -> list[str]:
    """Return the six raw 11-character fields of a line's data portion

    Raises
    ------
    RecordTooShortError
        If the line has fewer than 66 columns.
    """
    text = _require_columns(line, ENDF_DATA_WIDTH)
    return [
        text[i : i + ENDF_FIELD_WIDTH]
        for i in range(0, ENDF_FIELDS_PER_LINE * ENDF_FIELD_WIDTH, ENDF_FIELD_WIDTH)
    ]


# ---------------------------------------------------------------------------
# Record shapes
# ---------------------------------------------------------------------------

def decode_cont(line: str) -> ContRecord:
    """Decode a CONT record (ENDF-6 §0.6.3.2)

    The six fields are read as ``(C1, C2, L1, L2, N1, N2)``: two reals
    followed by four integers.

    Raises
    ------
    RecordTooShortError
        If the line has fewer than 66 columns.
    InvalidFloatError, InvalidIntegerError
        If any field is not numeric.

    Examples
    --------
    >>> decode_cont(" 9.423900+4 2.369986+2          1"
    ...             "          1          0          5")
    ContRecord(c1=94239.0, c2=236.9986, l1=1, l2=1, n1=0, n2=5)
    """
    f = split_fields(line)
    return ContRecord(
        decode_real(f[0]),
        decode_real(f[1]),
        decode_int(f[2]),
        decode_int(f[3]),
        decode_int(f[4]),
        decode_int(f[5]),
    )


def decode_text(line: str) -> str:
    """Return the 66-column payload of a TEXT record verbatim

    Embedded and trailing spaces inside the payload are preserved.

    Raises
    ------
    RecordTooShortError
        If the line has fewer than 66 columns.
    """
    return _require_columns(line, ENDF_DATA_WIDTH)[:ENDF_DATA_WIDTH]


def decode_real_row(line: str, out: list[float]) -> int:
    """Append the reals of one LIST line to *out*

    Fields are read left to right; the first blank field ends the row.
    A short row is how a list that does not fill its last line is
    terminated, so it is not an error.

    Parameters
    ----------
    line : str
        A data line of at least 66 columns.
    out : list[float]
        Caller-owned accumulator; values are appended in order, which
        allows one list to be assembled across many lines.

    Returns
    -------
    int
        Number of values appended from this line (0-6).

    Raises
    ------
    RecordTooShortError
        If the line has fewer than 66 columns.
    InvalidFloatError
        If a non-blank field is not numeric.
    """
    n = 0
    for raw in split_fields(line):
        w = raw.strip()
        if not w:
            break
        out.append(decode_real(w))
        n += 1
    return n


def decode_int_row(line: str, out: list[int]) -> int:
    """Append the integers of one LIST line to *out*

    Integer analogue of :func:`decode_real_row` with the same
    blank-field-ends-the-row rule.
    """
    n = 0
    for raw in split_fields(line):
        w = raw.strip()
        if not w:
            break
        out.append(decode_int(w))
        n += 1
    return n


def decode_identifier(line: str) -> RecordIdentifier:
    """Decode the ``(MAT, MF, MT, NS)`` trailer in columns 67–80

    Raises
    ------
    RecordTooShortError
        If the line has fewer than 80 columns.
    InvalidIntegerError
        If any of the four fields is not an integer.

    Examples
    --------
    >>> decode_identifier(" 6.15077-10 1.41078-10 1.323138-8"
    ...                   " 1.205944-8 1.093930-8 9.896124-9"
    ...                   "943735 18 6342")
    RecordIdentifier(material=9437, file=35, section=18, index=6342)
    """
    text = _require_columns(line, ENDF_LINE_WIDTH)
    return RecordIdentifier(
        decode_int(text[slice(*IDENT_MAT_COLUMNS)]),
        decode_int(text[slice(*IDENT_MF_COLUMNS)]),
        decode_int(text[slice(*IDENT_MT_COLUMNS)]),
        decode_int(text[slice(*IDENT_NS_COLUMNS)]),
    )


# ---------------------------------------------------------------------------
# Line counts
# ---------------------------------------------------------------------------

def lines_for(n_values: int) -> int:
    """Number of data lines needed for *n_values* six-per-line fields

    Examples
    --------
    >>> lines_for(0), lines_for(6), lines_for(7)
    (0, 1, 2)
    """
    return -(-n_values // ENDF_FIELDS_PER_LINE)
