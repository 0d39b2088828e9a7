#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tabulated-record decoders and ENDF section readers

* :func:`~pyendf.readers.tabular.read_tab1` /
  :func:`~pyendf.readers.tabular.read_tab2` — TAB1 and TAB2 records
* :class:`~pyendf.readers.description.DescriptionReader` — MF=1/MT=451
* :class:`~pyendf.readers.delayed_photon.DelayedPhotonReader` — MF=1/MT=460

All section readers share the :class:`~pyendf.readers.base.BaseReader`
interface.
"""

from __future__ import annotations

from pyendf.readers.tabular import read_tab1, read_tab2, read_real_list
from pyendf.readers.description import DescriptionReader
from pyendf.readers.delayed_photon import DelayedPhotonReader

__all__ = [
    "read_tab1",
    "read_tab2",
    "read_real_list",
    "DescriptionReader",
    "DelayedPhotonReader",
]
