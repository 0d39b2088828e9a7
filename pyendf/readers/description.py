#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Descriptive data and directory reader (MF=1, MT=451)

Decodes the first section of every ENDF-6 material into a
:class:`~pyendf.models.records.DescriptionCard`.

Section layout
--------------
::

    HEAD  ZA   AWR  LRP  LFI   NLIB NMOD
    CONT  ELIS STA  LIS  LISO  0    NFOR
    CONT  AWI  EMAX LREL 0     NSUB NVER
    CONT  TEMP 0.0  LDRV 0     NWD  NXC
    TEXT  ZSYMAM ALAB EDATE AUTH
    TEXT  REF DDATE RDATE ENDATE
    TEXT  × (NWD - 2)          description
    CONT  blank blank MF MT NC MOD  × NXC
    SEND

References
----------
.. [1] ENDF-6 Formats Manual (ENDF-102, BNL-90365-2009 Rev. 2), §1.1.
"""

from __future__ import annotations

import logging

from pyendf.io.scanner import seek_section
from pyendf.io.source import SeekableLineSource, read_line, rewind
from pyendf.models.records import DescriptionCard, DirectoryEntry
from pyendf.readers.base import BaseReader
from pyendf.utils.constants import DESCRIPTION_SECTION
from pyendf.utils.parsing import (
    decode_cont,
    decode_int,
    decode_text,
    split_fields,
)
from pyendf.utils.validation import validate_directory_order

logger = logging.getLogger(__name__)


def _decode_zsymam_row(line: str) -> tuple[str, str, str, str]:
    text = decode_text(line)
    return text[0:11], text[11:22], text[22:33], text[33:66]


def _decode_reference_row(line: str) -> tuple[str, str, str, int]:
    text = decode_text(line)
    return text[0:22], text[22:33], text[33:44], decode_int(text[55:66])


def _decode_directory_entry(line: str) -> DirectoryEntry:
    # First two fields are blank.
    f = split_fields(line)
    return DirectoryEntry(
        MF=decode_int(f[2]),
        MT=decode_int(f[3]),
        NC=decode_int(f[4]),
        MOD=decode_int(f[5]),
    )


class DescriptionReader(BaseReader):
    """Reader for the descriptive data and directory section

    The reader rewinds the source to its start before scanning, so it
    requires a :class:`~pyendf.io.source.SeekableLineSource`.  When it
    returns, the source is positioned just after the section's SEND
    record, which is where every other MF=1 section begins.

    Examples
    --------
    >>> card = DescriptionReader().read("n_9437_94-Pu-239.dat")
    >>> card.za
    (94, 239)
    >>> [(e.MF, e.MT) for e in card.directory][:2]
    [(1, 451), (1, 452)]
    """

    section = DESCRIPTION_SECTION

    def read_from(
        self,
        source: SeekableLineSource,
        *,
        validate: bool = True,
    ) -> DescriptionCard:
        """Decode MF=1/MT=451 from *source*

        Raises
        ------
        TypeError
            If *source* cannot seek.
        EndOfInputError
            If the file has no MF=1/MT=451 section.
        ParseError
            If any record is malformed, or the SEND record is missing.
        ValidationError
            If *validate* is ``True`` and the directory is out of order.
        """
        rewind(source)
        mf, mt = self.section

        ZA, AWR, LRP, LFI, NLIB, NMOD = decode_cont(seek_section(source, mf, mt))
        ELIS, STA, LIS, LISO, _, NFOR = decode_cont(read_line(source))
        AWI, EMAX, LREL, _, NSUB, NVER = decode_cont(read_line(source))
        TEMP, _, LDRV, _, NWD, NXC = decode_cont(read_line(source))
        ZSYMAM, ALAB, EDATE, AUTH = _decode_zsymam_row(read_line(source))
        REF, DDATE, RDATE, ENDATE = _decode_reference_row(read_line(source))

        description = "".join(
            "\n" + decode_text(read_line(source)) for _ in range(NWD - 2)
        )
        directory = [_decode_directory_entry(read_line(source)) for _ in range(NXC)]
        self.expect_section_end(source)

        if validate:
            validate_directory_order([(e.MF, e.MT) for e in directory])

        logger.debug(
            "MF=1/MT=451: ZA=%.1f, %d text lines, %d directory entries",
            ZA, max(NWD - 2, 0), len(directory),
        )
        return DescriptionCard(
            ZA=ZA, AWR=AWR, LRP=LRP, LFI=LFI, NLIB=NLIB, NMOD=NMOD,
            ELIS=ELIS, STA=STA, LIS=LIS, LISO=LISO, NFOR=NFOR,
            AWI=AWI, EMAX=EMAX, LREL=LREL, NSUB=NSUB, NVER=NVER,
            TEMP=TEMP, LDRV=LDRV, NWD=NWD, NXC=NXC,
            ZSYMAM=ZSYMAM, ALAB=ALAB, EDATE=EDATE, AUTH=AUTH,
            REF=REF, DDATE=DDATE, RDATE=RDATE, ENDATE=ENDATE,
            description=description,
            directory=directory,
        )
