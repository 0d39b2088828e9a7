#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for ENDF section readers

Every concrete reader (descriptive data, delayed photons) inherits from
:class:`BaseReader` and implements :meth:`BaseReader.read_from`, which
decodes one section from an open source and returns a typed model from
:mod:`pyendf.models`.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from pyendf.exceptions import MissingSectionTerminatorError
from pyendf.io.source import LineSource, open_endf, read_line
from pyendf.models.records import DelayedPhotonData, DescriptionCard
from pyendf.utils.parsing import decode_identifier

logger = logging.getLogger(__name__)

SectionModel = Union[DescriptionCard, DelayedPhotonData]
"""Type alias for the union of all section model types."""


class BaseReader(ABC):
    """Abstract base for ENDF section readers

    Subclasses override :meth:`read_from` to locate their section with the
    scanner, decode it with the record grammar and tabular decoders, check
    the SEND record via :meth:`expect_section_end`, and return the
    appropriate model.

    The *validate* keyword argument controls whether post-parse validation
    is performed.  When ``False`` the reader skips interval-partition and
    monotonicity checks, which can be useful for exploratory work with
    non-standard data.

    Notes
    -----
    Readers must never call HDF5 writing functions — that is the
    responsibility of the converter layer.  The dependency direction is::

        utils ← models ← io ← readers ← converters
    """

    #: ``(MF, MT)`` of the section handled by the reader.
    section: tuple[int, int]

    def read(
        self,
        path: Path | str | os.PathLike,
        *,
        validate: bool = True,
    ) -> SectionModel:
        """Open an ENDF file and decode this reader's section from it

        Parameters
        ----------
        path : Path | str
            Filesystem path to the ENDF file.
        validate : bool, optional
            If ``True`` (default), run post-parse validation checks.

        Returns
        -------
        SectionModel
            The decoded section model.

        Raises
        ------
        FileFormatError
            If the file does not exist.
        EndOfInputError
            If the section is absent from the file.
        ParseError
            If the section content is malformed.
        ValidationError
            If *validate* is ``True`` and any post-parse check fails.
        """
        with open_endf(path) as fh:
            return self.read_from(fh, validate=validate)

    @abstractmethod
    def read_from(
        self,
        source: LineSource,
        *,
        validate: bool = True,
    ) -> SectionModel:
        """Decode this reader's section from an already open source"""
        ...

    def expect_section_end(self, source: LineSource) -> None:
        """Consume the next line and require it to be a SEND record

        Raises
        ------
        MissingSectionTerminatorError
            If the source is exhausted or the next line is not a SEND
            record.
        """
        mf, mt = self.section
        line = read_line(source)
        if not line:
            raise MissingSectionTerminatorError(
                f"End of input before the SEND record of MF={mf}, MT={mt}"
            )
        ident = decode_identifier(line)
        if not ident.is_send:
            raise MissingSectionTerminatorError(
                f"Section MF={mf}, MT={mt} is not terminated by a SEND record; "
                f"found MT={ident.section}, NS={ident.index}"
            )
        logger.debug("SEND record found for MF=%d, MT=%d", mf, mt)
