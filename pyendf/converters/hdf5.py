#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 export of decoded ENDF structures

Writes the decoded models to HDF5 without resampling: tabulated
functions keep their original grids, breakpoints and interpolation law
codes, so users can re-interpolate with their own tools.

HDF5 Layout
-----------
::

    /description/               (attrs: every numeric MF=1/MT=451 field)
        ZSYMAM, ALAB, EDATE, AUTH, REF, DDATE, RDATE   (strings)
        text                                           (string)
        directory               (NXC, 4) int64  columns MF, MT, NC, MOD

    /delayed_photons/           (attrs: representation)
        photon_{i:03d}/         one TAB1 per discrete photon line
        decay_constants         continuous representation only

    TAB1 group                  (attrs: C1, C2, L1, L2)
        x, y                    float64 (NP,)
        breakpoints             int64   (NR,)
        interpolation           int64   (NR,)

    TAB2 group                  (attrs: C1, C2, L1, L2)
        breakpoints, interpolation
        slice_{i:03d}/          one TAB1 group per slice

References
----------
.. [1] ENDF-6 Formats Manual (ENDF-102), §0.6.3.7–0.6.3.8, §1.1, §1.6.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by the HDF5 converter.  "
        "Install it with: pip install h5py"
    ) from _exc

from pyendf.exceptions import ConversionError
from pyendf.io.source import open_endf
from pyendf.models.records import DelayedPhotonData, DescriptionCard, Tab1, Tab2
from pyendf.readers.delayed_photon import DelayedPhotonReader
from pyendf.readers.description import DescriptionReader
from pyendf.utils.constants import DELAYED_PHOTON_SECTION

logger = logging.getLogger(__name__)

_DESCRIPTION_NUMBERS = (
    "ZA", "AWR", "LRP", "LFI", "NLIB", "NMOD",
    "ELIS", "STA", "LIS", "LISO", "NFOR",
    "AWI", "EMAX", "LREL", "NSUB", "NVER",
    "TEMP", "LDRV", "NWD", "NXC", "ENDATE",
)
_DESCRIPTION_STRINGS = ("ZSYMAM", "ALAB", "EDATE", "AUTH", "REF", "DDATE", "RDATE")


# ---------------------------------------------------------------------------
# Writers
# ---------------------------------------------------------------------------

def _write_head(grp: h5py.Group, head: tuple[float, float, int, int]) -> None:
    c1, c2, l1, l2 = head
    grp.attrs["C1"] = np.float64(c1)
    grp.attrs["C2"] = np.float64(c2)
    grp.attrs["L1"] = np.int64(l1)
    grp.attrs["L2"] = np.int64(l2)


def write_tab1(grp: h5py.Group, tab: Tab1) -> None:
    """Write a TAB1 record into an existing group

    Parameters
    ----------
    grp : h5py.Group
        Empty target group.
    tab : Tab1
        Decoded record.
    """
    _write_head(grp, tab.head)
    grp.create_dataset("x", data=np.ascontiguousarray(tab.x, dtype="f8"))
    grp.create_dataset("y", data=np.ascontiguousarray(tab.y, dtype="f8"))
    grp.create_dataset("breakpoints", data=tab.breakpoints)
    grp.create_dataset("interpolation", data=tab.interpolation_codes)


def write_tab2(grp: h5py.Group, tab: Tab2) -> None:
    """Write a TAB2 record and its slices into an existing group"""
    _write_head(grp, tab.head)
    grp.create_dataset(
        "breakpoints", data=np.asarray([iv.end for iv in tab.intervals], dtype="i8")
    )
    grp.create_dataset(
        "interpolation", data=np.asarray([int(iv.scheme) for iv in tab.intervals], dtype="i8")
    )
    for i, slice_ in enumerate(tab.data):
        write_tab1(grp.create_group(f"slice_{i:03d}"), slice_)


def write_description(grp: h5py.Group, card: DescriptionCard) -> None:
    """Write the MF=1/MT=451 contents into an existing group"""
    for name in _DESCRIPTION_NUMBERS:
        grp.attrs[name] = getattr(card, name)
    for name in _DESCRIPTION_STRINGS:
        grp.create_dataset(name, data=getattr(card, name))
    grp.create_dataset("text", data=card.description)

    directory = np.asarray(
        [(e.MF, e.MT, e.NC, e.MOD) for e in card.directory], dtype="i8"
    ).reshape(-1, 4)
    ds = grp.create_dataset("directory", data=directory)
    ds.attrs["columns"] = "MF,MT,NC,MOD"


def write_delayed_photons(grp: h5py.Group, data: DelayedPhotonData) -> None:
    """Write the MF=1/MT=460 contents into an existing group"""
    grp.attrs["representation"] = data.representation
    if data.is_discrete:
        for i, tab in enumerate(data.tables):
            write_tab1(grp.create_group(f"photon_{i:03d}"), tab)
    else:
        grp.create_dataset("decay_constants", data=np.asarray(data.decay_constants, dtype="f8"))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def create_hdf5(
    endf_path: Path | str | os.PathLike,
    h5_path: Path | str | os.PathLike,
    *,
    overwrite: bool = False,
    validate: bool = True,
) -> Path:
    """Decode MF=1 data from an ENDF file and write it to HDF5

    MF=1/MT=451 is always written.  MF=1/MT=460 is written when the
    material's directory lists it.

    Parameters
    ----------
    endf_path : Path | str
        Path to the ENDF source file.
    h5_path : Path | str
        Output HDF5 path.  Parent directories are created as needed.
    overwrite : bool, optional
        Replace an existing output file.  Default ``False``.
    validate : bool, optional
        Passed to the section readers.  Default ``True``.

    Returns
    -------
    Path
        The written HDF5 path.

    Raises
    ------
    ConversionError
        If the output exists and *overwrite* is ``False``, or writing fails.
    FileFormatError, ParseError, ValidationError
        Propagated from the readers.

    Examples
    --------
    >>> create_hdf5("n_9437_94-Pu-239.dat", "out/Pu239.h5", overwrite=True)
    PosixPath('out/Pu239.h5')
    """
    out = Path(h5_path)
    if out.exists() and not overwrite:
        raise ConversionError(
            f"Output file {out} already exists; pass overwrite=True to replace it."
        )

    with open_endf(endf_path) as fh:
        card = DescriptionReader().read_from(fh, validate=validate)
        photons = None
        if DELAYED_PHOTON_SECTION in {(e.MF, e.MT) for e in card.directory}:
            photons = DelayedPhotonReader().read_from(fh, validate=validate)

    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        with h5py.File(str(out), "w") as h5f:
            write_description(h5f.create_group("description"), card)
            if photons is not None:
                write_delayed_photons(h5f.create_group("delayed_photons"), photons)
    except OSError as exc:
        raise ConversionError(f"Failed to write HDF5 file {out}: {exc}") from exc

    logger.info("Wrote %s (ZA=%.1f)", out, card.ZA)
    return out
