#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Delayed photon data reader (MF=1, MT=460)

Section layout
--------------
Discrete representation (``LO = 1``)::

    HEAD  ZA  AWR  LO=1  0  NG  0
    TAB1  E_i 0.0  i     0  NR  NP  / (t, multiplicity)   × NG
    SEND

Continuous representation (``LO = 2``)::

    HEAD  ZA  AWR  LO=2  0  0   0
    LIST  0.0 0.0  0     0  NNF 0   / decay constants
    SEND

References
----------
.. [1] ENDF-6 Formats Manual (ENDF-102, BNL-90365-2009 Rev. 2), §1.6.
"""

from __future__ import annotations

import logging

import numpy as np

from pyendf.exceptions import ElementCountError, ParseError
from pyendf.io.scanner import seek_section
from pyendf.io.source import LineSource, read_line
from pyendf.models.records import DelayedPhotonData
from pyendf.readers.base import BaseReader
from pyendf.readers.tabular import read_real_list, read_tab1
from pyendf.utils.constants import (
    DELAYED_PHOTON_CONTINUOUS,
    DELAYED_PHOTON_DISCRETE,
    DELAYED_PHOTON_SECTION,
)
from pyendf.utils.parsing import decode_cont
from pyendf.utils.validation import validate_abscissae, validate_breakpoints

logger = logging.getLogger(__name__)


class DelayedPhotonReader(BaseReader):
    """Reader for delayed photon data

    Scans forward from the current position of the source, so a caller
    that has just read MF=1/MT=451 can continue with the same handle.

    Examples
    --------
    >>> data = DelayedPhotonReader().read("n_9437_94-Pu-239.dat")
    >>> data.representation
    'discrete'
    >>> len(data.tables)
    6
    """

    section = DELAYED_PHOTON_SECTION

    def read_from(
        self,
        source: LineSource,
        *,
        validate: bool = True,
    ) -> DelayedPhotonData:
        """Decode MF=1/MT=460 from *source*

        Raises
        ------
        EndOfInputError
            If no MF=1/MT=460 section follows the current position.
        ParseError
            If the ``LO`` flag is not 1 or 2, a record is malformed, or
            the SEND record is missing.
        ValidationError
            If *validate* is ``True`` and a discrete table has invalid
            interpolation ranges or decreasing times.
        """
        mf, mt = self.section
        _, _, lo, _, ng, _ = decode_cont(seek_section(source, mf, mt))

        if lo == DELAYED_PHOTON_DISCRETE:
            tables = [read_tab1(source) for _ in range(ng)]
            self.expect_section_end(source)
            if validate:
                for i, tab in enumerate(tables):
                    validate_breakpoints(tab.breakpoints, tab.n_points, label=f"photon_{i}")
                    validate_abscissae(tab.x, label=f"photon_{i}/time")
            logger.debug("MF=1/MT=460: %d discrete photon tables", len(tables))
            return DelayedPhotonData(representation="discrete", tables=tables)

        if lo == DELAYED_PHOTON_CONTINUOUS:
            _, _, _, _, nnf, _ = decode_cont(read_line(source))
            values = read_real_list(source, nnf)
            if len(values) != nnf:
                raise ElementCountError(
                    f"Decay-constant list holds {len(values)} reals, expected NNF = {nnf}"
                )
            decay_constants = np.asarray(values, dtype="f8")
            self.expect_section_end(source)
            logger.debug("MF=1/MT=460: %d precursor decay constants", decay_constants.size)
            return DelayedPhotonData(
                representation="continuous",
                decay_constants=decay_constants,
            )

        raise ParseError(
            f"MF=1/MT=460 has unknown representation flag LO={lo}; expected "
            f"{DELAYED_PHOTON_DISCRETE} (discrete) or {DELAYED_PHOTON_CONTINUOUS} (continuous)"
        )
