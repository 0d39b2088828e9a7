#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Post-parse validation routines for decoded ENDF structures

Every validation function raises :class:`~pyendf.exceptions.ValidationError`
when a layout rule is violated.  The record decoders themselves rely on
well-formed input and do not call these functions; the section readers
call them when constructed with ``validate=True``.

Checked Constraints
-------------------
* Interpolation boundaries are non-decreasing and the last one equals the
  number of points (or slices) they partition.
* Tabulated abscissae are non-decreasing (equal neighbours mark a
  discontinuity and are allowed).
* Directory entries are listed in ascending ``(MF, MT)`` order.

Design Note
-----------
Validation functions accept raw NumPy arrays, sequences or scalar values
— **not** dataclass model instances — so that this module stays free of
model imports and can be reused on data from any source.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from pyendf.exceptions import ValidationError

logger = logging.getLogger(__name__)


def validate_breakpoints(
    breakpoints: np.ndarray,
    count: int,
    label: str = "breakpoints",
) -> None:
    """Verify that interval boundaries partition ``[0, count)``

    Parameters
    ----------
    breakpoints : numpy.ndarray
        Interval end boundaries (``NBT``) in file order.
    count : int
        Number of points (TAB1) or slices (TAB2) being partitioned.
    label : str, optional
        Human-readable name for error messages.

    Raises
    ------
    ValidationError
        If a boundary decreases, or the last boundary is not *count*.

    Examples
    --------
    >>> import numpy as np
    >>> validate_breakpoints(np.array([3, 10]), 10)
    >>> validate_breakpoints(np.array([3, 8]), 10)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyendf.exceptions.ValidationError: ...
    """
    arr = np.asarray(breakpoints, dtype="i8")
    if arr.size == 0:
        if count > 0:
            raise ValidationError(
                f"'{label}' has no interpolation ranges for {count} entries."
            )
        return
    diff = np.diff(arr)
    if arr[0] < 0 or np.any(diff < 0):
        raise ValidationError(
            f"'{label}' boundaries are not non-decreasing: {arr.tolist()}."
        )
    if int(arr[-1]) != count:
        raise ValidationError(
            f"'{label}' last boundary is {int(arr[-1])}, expected {count}."
        )
    logger.debug("'%s' (%d ranges) passed partition check.", label, arr.size)


def validate_abscissae(x: np.ndarray, label: str = "x") -> None:
    """Verify that tabulated abscissae are monotonically non-decreasing

    Raises
    ------
    ValidationError
        If any ``x[i] > x[i+1]``.
    """
    arr = np.asarray(x, dtype="f8")
    if arr.size < 2:
        return
    diff = np.diff(arr)
    if np.any(diff < 0):
        first_bad = int(np.argmax(diff < 0))
        raise ValidationError(
            f"Array '{label}' is not monotonically non-decreasing.  "
            f"First violation at index {first_bad}: "
            f"{arr[first_bad]:.6e} > {arr[first_bad + 1]:.6e}."
        )
    logger.debug("Array '%s' (%d points) passed monotonicity check.", label, arr.size)


def validate_directory_order(
    keys: Sequence[tuple[int, int]],
    label: str = "directory",
) -> None:
    """Verify that directory ``(MF, MT)`` keys are strictly ascending

    Raises
    ------
    ValidationError
        If a key repeats or is out of order.
    """
    for i in range(1, len(keys)):
        if tuple(keys[i - 1]) >= tuple(keys[i]):
            raise ValidationError(
                f"'{label}' entry {i} (MF={keys[i][0]}, MT={keys[i][1]}) is out of "
                f"order after (MF={keys[i - 1][0]}, MT={keys[i - 1][1]})."
            )
    logger.debug("'%s' (%d entries) passed ordering check.", label, len(keys))
