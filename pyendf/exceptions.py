#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyENDF package

All exceptions raised by PyENDF inherit from :class:`PyENDFError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyENDFError
    ├── ParseError                        # Malformed record content
    │   ├── InvalidIntegerError           # Non-numeric integer field
    │   ├── InvalidFloatError             # Non-numeric real field
    │   ├── RecordTooShortError           # Line narrower than required
    │   ├── ElementCountError             # List length != header count
    │   ├── InvalidInterpolationError     # Unknown interpolation code
    │   └── MissingSectionTerminatorError # No SEND record after a section
    ├── EndOfInputError                   # Section not found before EOF
    ├── SourceError                       # Underlying I/O failure
    ├── ValidationError                   # Failed post-parse checks
    ├── FileFormatError                   # Missing or unreadable file
    ├── ConversionError                   # HDF5 write failures
    └── DownloadError                     # Network errors
"""

from __future__ import annotations


class PyENDFError(Exception):
    """Base exception for all PyENDF errors

    Every exception raised by PyENDF is a subclass of this type.
    Catching ``PyENDFError`` therefore catches any library-specific failure
    while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class ParseError(PyENDFError):
    """Raised when an ENDF record contains malformed or unparseable content

    This is the common parent of every record-level decoding failure:
    non-numeric data in numeric fields, truncated records, inconsistent
    element counts, and unknown interpolation codes.  A ``ParseError``
    always aborts the structure being decoded; no partial result is
    returned.
    """


class InvalidIntegerError(ParseError):
    """Raised when an integer field cannot be converted to ``int``

    Parameters
    ----------
    message : str
        Description of the failure, including the offending field text.
    """


class InvalidFloatError(ParseError):
    """Raised when a real field cannot be converted to ``float``

    Covers blank fields, fields with no recognisable exponent and any
    other text that is not a floating-point literal after the ENDF
    implicit-exponent normalisation.
    """


class RecordTooShortError(ParseError):
    """Raised when a line has fewer columns than the record shape requires

    CONT, TEXT and LIST records need the 66-column payload; the
    identifier trailer needs all 80 columns.  An empty string (end of
    input while a multi-line record is being read) also lands here.
    """


class ElementCountError(ParseError):
    """Raised when a flattened list disagrees with its header count

    For TAB1 this means the interval header did not hold exactly
    ``2 * NR`` integers, or the data payload did not hold exactly
    ``2 * NP`` reals.
    """


class InvalidInterpolationError(ParseError):
    """Raised for an interpolation-scheme code outside the known set (1-6)"""


class MissingSectionTerminatorError(ParseError):
    """Raised when a section is not followed by its SEND record

    A SEND record carries ``MT = 0`` and ``NS = 99999`` in its identifier
    trailer.
    """


class EndOfInputError(PyENDFError):
    """Raised when a forward section scan exhausts the source

    This is the expected outcome when a requested ``(MF, MT)`` section is
    absent from the file; it does not indicate corruption.
    """


class SourceError(PyENDFError):
    """Raised when the underlying stream fails to deliver a line

    The original :class:`OSError` is always chained as ``__cause__``.
    """


class ValidationError(PyENDFError):
    """Raised when decoded data fails post-parse validation checks

    Validation checks include interpolation-interval coverage and
    monotonicity of tabulated abscissae.  A ``ValidationError`` means the
    record was *parseable* but the resulting structure violates the
    ENDF-6 layout rules.
    """


class FileFormatError(PyENDFError):
    """Raised when a path does not name a readable ENDF file

    This is raised *before* any decoding begins, for example when the
    file does not exist.
    """


class ConversionError(PyENDFError):
    """Raised when HDF5 export fails

    This covers any error during HDF5 file creation: permission denied,
    disk full, or an existing output file when overwriting is disabled.
    """


class DownloadError(PyENDFError):
    """Raised when fetching an evaluation file over HTTP fails

    Covers HTTP errors, connection failures and timeouts.

    Parameters
    ----------
    message : str
        Description of the network failure, including the URL attempted.
    """
