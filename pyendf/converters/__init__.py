#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 converters for decoded ENDF data

* :func:`~pyendf.converters.hdf5.create_hdf5`
    Reads MF=1 sections from an ENDF file and writes them to HDF5.
* :func:`~pyendf.converters.hdf5.write_tab1` /
  :func:`~pyendf.converters.hdf5.write_tab2`
    Write individual tabulated functions into an open HDF5 group.
"""

from __future__ import annotations

from pyendf.converters.hdf5 import (
    create_hdf5,
    write_tab1,
    write_tab2,
)

__all__ = ["create_hdf5", "write_tab1", "write_tab2"]
