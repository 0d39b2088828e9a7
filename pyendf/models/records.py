#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for decoded ENDF-6 records and sections

Line-level records (CONT, identifier trailer) are lightweight
``NamedTuple`` types so that they compare equal to plain tuples.
Tabulated functions and section contents are ``dataclass`` instances
carrying scalar metadata and NumPy arrays.  Models are the sole output of
the decoder and reader layers and the sole input accepted by the
converter layer.

Hierarchy
---------
::

    ContRecord             — (C1, C2, L1, L2, N1, N2) header line
    RecordIdentifier       — (MAT, MF, MT, NS) trailer of every line
    InterpolationScheme    — closed set of interpolation laws 1-6
    InterpolationInterval  — scheme applied over [start, end)
    Tab1                   — one-dimensional tabulated function
    Tab2                   — sequence of Tab1 slices over a second variable
    DirectoryEntry         — one MF=1/MT=451 directory line
    DescriptionCard        — MF=1/MT=451 descriptive data and directory
    DelayedPhotonData      — MF=1/MT=460 delayed photon data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Literal, NamedTuple

import numpy as np

from pyendf.exceptions import InvalidInterpolationError
from pyendf.utils.constants import (
    LIBRARY_NAMES,
    SEND_INDEX,
    SEND_SECTION,
    SUBLIBRARY_NAMES,
)


# ---------------------------------------------------------------------------
# Line-level records
# ---------------------------------------------------------------------------

class ContRecord(NamedTuple):
    """A decoded CONT record (ENDF-6 §0.6.3.2)"""

    c1: float
    c2: float
    l1: int
    l2: int
    n1: int
    n2: int


class RecordIdentifier(NamedTuple):
    """The MAT/MF/MT/NS trailer found in columns 67-80 of every line"""

    material: int
    file: int
    section: int
    index: int

    @property
    def is_send(self) -> bool:
        """``True`` when this trailer marks the end of a section."""
        return self.section == SEND_SECTION and self.index == SEND_INDEX


# ---------------------------------------------------------------------------
# Interpolation
# ---------------------------------------------------------------------------

class InterpolationScheme(IntEnum):
    """Interpolation law codes (ENDF-6 §0.5.2.1, Table 16)

    Only the six one-dimensional laws are recognised.  Any other code is
    rejected by :meth:`from_code` with
    :class:`~pyendf.exceptions.InvalidInterpolationError`.
    """

    CONSTANT_HISTOGRAM = 1
    """y is constant in x."""
    LINEAR_LINEAR = 2
    """y is linear in x."""
    LINEAR_LOG = 3
    """y is linear in ln(x)."""
    LOG_LINEAR = 4
    """ln(y) is linear in x."""
    LOG_LOG = 5
    """ln(y) is linear in ln(x)."""
    SPECIAL = 6
    """Special law used for charged-particle cross sections only."""

    @classmethod
    def from_code(cls, code: int) -> InterpolationScheme:
        """Map an integer code from a TAB1/TAB2 header to a scheme

        Raises
        ------
        InvalidInterpolationError
            If *code* is not in 1-6.
        """
        try:
            return cls(code)
        except ValueError as exc:
            raise InvalidInterpolationError(
                f"Unknown interpolation scheme code {code!r}; "
                f"expected one of {[int(s) for s in cls]}"
            ) from exc


@dataclass(frozen=True)
class InterpolationInterval:
    """One interpolation range of a tabulated function

    Parameters
    ----------
    scheme : InterpolationScheme
        Interpolation law used inside the range.
    start : int
        Index of the first point (or slice) in the range, inclusive.
    end : int
        Index one past the last point (or slice), exclusive.  This is the
        boundary value stored in the file.
    """

    scheme: InterpolationScheme
    start: int
    end: int


# ---------------------------------------------------------------------------
# Tabulated functions
# ---------------------------------------------------------------------------

Head = tuple[float, float, int, int]
"""The auxiliary ``(C1, C2, L1, L2)`` fields of a TAB1/TAB2 header."""


@dataclass(eq=False)
class Tab1:
    """TAB1 record: interpolated one-dimensional tabular data (§0.6.3.7)

    Parameters
    ----------
    head : tuple[float, float, int, int]
        ``(C1, C2, L1, L2)`` from the header line.  Their meaning depends
        on the section the record belongs to.
    intervals : list[InterpolationInterval]
        Interpolation ranges, partitioning ``[0, NP)`` in order.
    data : numpy.ndarray
        ``(NP, 2)`` float64 array of ``(x, y)`` pairs.
    """

    head: Head
    intervals: list[InterpolationInterval] = field(default_factory=list)
    data: np.ndarray = field(default_factory=lambda: np.empty((0, 2), dtype="f8"))

    @property
    def x(self) -> np.ndarray:
        """Abscissae, shape ``(NP,)``."""
        return self.data[:, 0]

    @property
    def y(self) -> np.ndarray:
        """Ordinates, shape ``(NP,)``."""
        return self.data[:, 1]

    @property
    def n_points(self) -> int:
        return int(self.data.shape[0])

    @property
    def breakpoints(self) -> np.ndarray:
        """Interval end boundaries (``NBT``) as an int64 array."""
        return np.asarray([iv.end for iv in self.intervals], dtype="i8")

    @property
    def interpolation_codes(self) -> np.ndarray:
        """Interpolation law codes (``INT``) as an int64 array."""
        return np.asarray([int(iv.scheme) for iv in self.intervals], dtype="i8")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tab1):
            return NotImplemented
        return (
            tuple(self.head) == tuple(other.head)
            and self.intervals == other.intervals
            and np.array_equal(self.data, other.data)
        )


@dataclass(eq=False)
class Tab2:
    """TAB2 record: interpolation over a sequence of TAB1 slices (§0.6.3.8)

    Parameters
    ----------
    head : tuple[float, float, int, int]
        ``(C1, C2, L1, L2)`` from the header line.
    intervals : list[InterpolationInterval]
        Interpolation ranges over the slice index, partitioning ``[0, NZ)``.
    data : list[Tab1]
        The ``NZ`` nested TAB1 slices, in file order.
    """

    head: Head
    intervals: list[InterpolationInterval] = field(default_factory=list)
    data: list[Tab1] = field(default_factory=list)

    @property
    def n_slices(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tab2):
            return NotImplemented
        return (
            tuple(self.head) == tuple(other.head)
            and self.intervals == other.intervals
            and self.data == other.data
        )


# ---------------------------------------------------------------------------
# MF=1 section models
# ---------------------------------------------------------------------------

@dataclass
class DirectoryEntry:
    """One entry of the MF=1/MT=451 section directory

    Parameters
    ----------
    MF : int
        File number of the listed section.
    MT : int
        Section number of the listed section.
    NC : int
        Number of lines in the listed section.
    MOD : int
        Modification indicator.
    """

    MF: int
    MT: int
    NC: int
    MOD: int


@dataclass
class DescriptionCard:
    """Descriptive data and directory, MF=1/MT=451 (ENDF-6 §1.1)

    Field names follow the ENDF-6 mnemonics.  Text fields are kept
    verbatim, including their padding.

    Parameters
    ----------
    ZA : float
        ``1000 * Z + A`` designation of the material.
    AWR : float
        Ratio of the atom mass to the neutron mass.
    LRP, LFI, NLIB, NMOD : int
        Resonance-parameter flag, fissionability flag, library
        identifier and modification number.
    ELIS, STA : float
        Excitation energy and stability flag of the target.
    LIS, LISO, NFOR : int
        State number, isomeric state number and library format.
    AWI, EMAX : float
        Projectile mass and upper energy limit of the evaluation.
    LREL, NSUB, NVER : int
        Release, sub-library and library version numbers.
    TEMP : float
        Target temperature.
    LDRV, NWD, NXC : int
        Derived-evaluation flag, number of text records and number of
        directory entries.
    ZSYMAM, ALAB, EDATE, AUTH : str
        Material symbol, laboratory, evaluation date and authors.
    REF, DDATE, RDATE : str
        Reference, distribution date and revision date.
    ENDATE : int
        Master file entry date (yyyymmdd).
    description : str
        Free-text comments, one newline-prefixed line per TEXT record.
    directory : list[DirectoryEntry]
        Sections present in the material.
    """

    ZA: float
    AWR: float
    LRP: int
    LFI: int
    NLIB: int
    NMOD: int
    ELIS: float
    STA: float
    LIS: int
    LISO: int
    NFOR: int
    AWI: float
    EMAX: float
    LREL: int
    NSUB: int
    NVER: int
    TEMP: float
    LDRV: int
    NWD: int
    NXC: int
    ZSYMAM: str
    ALAB: str
    EDATE: str
    AUTH: str
    REF: str
    DDATE: str
    RDATE: str
    ENDATE: int
    description: str = ""
    directory: list[DirectoryEntry] = field(default_factory=list)

    @property
    def za(self) -> tuple[int, int]:
        """Split ``ZA`` into ``(Z, A)``."""
        za = int(self.ZA)
        return za // 1000, za % 1000

    @property
    def library_name(self) -> str:
        return LIBRARY_NAMES.get(self.NLIB, f"NLIB={self.NLIB}")

    @property
    def sublibrary_name(self) -> str:
        return SUBLIBRARY_NAMES.get(self.NSUB, f"NSUB={self.NSUB}")


@dataclass(eq=False)
class DelayedPhotonData:
    """Delayed photon data, MF=1/MT=460 (ENDF-6 §1.6)

    Parameters
    ----------
    representation : ``"discrete"`` | ``"continuous"``
        ``"discrete"`` for ``LO=1``, ``"continuous"`` for ``LO=2``.
    tables : list[Tab1]
        For the discrete representation, one time-dependent multiplicity
        table per photon line (``NG`` entries).  Empty otherwise.
    decay_constants : numpy.ndarray | None
        For the continuous representation, the ``NNF`` precursor decay
        constants.  ``None`` otherwise.
    """

    representation: Literal["discrete", "continuous"]
    tables: list[Tab1] = field(default_factory=list)
    decay_constants: np.ndarray | None = None

    @property
    def is_discrete(self) -> bool:
        return self.representation == "discrete"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelayedPhotonData):
            return NotImplemented
        if self.representation != other.representation or self.tables != other.tables:
            return False
        if self.decay_constants is None or other.decay_constants is None:
            return self.decay_constants is None and other.decay_constants is None
        return np.array_equal(self.decay_constants, other.decay_constants)
