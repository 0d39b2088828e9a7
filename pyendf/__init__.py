#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyENDF - Python library for decoding ENDF-6 nuclear data files

Decode the fixed-width, 80-column ENDF-6 text format: real-number fields
with implicit exponents, CONT/TEXT/LIST records, identifier trailers,
forward section scanning, and TAB1/TAB2 tabulated functions.  Section
readers built on this core decode the descriptive data and directory
(MF=1/MT=451) and the delayed photon data (MF=1/MT=460).

Modules
-------
utils
    Field decoders, record grammar, constants and validation.
models
    Named tuples, enums and dataclasses returned by the decoders.
io
    Line sources, the section scanner and the downloader.
readers
    TAB1/TAB2 decoders and MF=1 section readers.
converters
    HDF5 export of decoded data.

Examples
--------
>>> from pyendf import open_endf, seek_section, read_tab1
>>> with open_endf("n_9437_94-Pu-239.dat") as fh:
...     seek_section(fh, 1, 460)
...     tab = read_tab1(fh)
>>> tab.data.shape
(9, 2)
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyendf.utils.parsing import (
    decode_real,
    decode_int,
    decode_cont,
    decode_text,
    decode_real_row,
    decode_int_row,
    decode_identifier,
)
from pyendf.io.source import open_endf
from pyendf.io.scanner import seek_section, seek_material_section, index_sections
from pyendf.readers.tabular import read_tab1, read_tab2, read_real_list
from pyendf.readers.description import DescriptionReader
from pyendf.readers.delayed_photon import DelayedPhotonReader
from pyendf.converters.hdf5 import create_hdf5
from pyendf.models.records import (
    InterpolationScheme,
    InterpolationInterval,
    Tab1,
    Tab2,
)
from pyendf.exceptions import (
    PyENDFError,
    ParseError,
    InvalidIntegerError,
    InvalidFloatError,
    RecordTooShortError,
    ElementCountError,
    InvalidInterpolationError,
    MissingSectionTerminatorError,
    EndOfInputError,
    SourceError,
    ValidationError,
    FileFormatError,
    ConversionError,
    DownloadError,
)

__all__ = [
    # Version
    "__version__",
    # Record grammar
    "decode_real",
    "decode_int",
    "decode_cont",
    "decode_text",
    "decode_real_row",
    "decode_int_row",
    "decode_identifier",
    # Sources and scanning
    "open_endf",
    "seek_section",
    "seek_material_section",
    "index_sections",
    # Tabular data
    "read_tab1",
    "read_tab2",
    "read_real_list",
    "InterpolationScheme",
    "InterpolationInterval",
    "Tab1",
    "Tab2",
    # Section readers
    "DescriptionReader",
    "DelayedPhotonReader",
    # Converter
    "create_hdf5",
    # Exceptions
    "PyENDFError",
    "ParseError",
    "InvalidIntegerError",
    "InvalidFloatError",
    "RecordTooShortError",
    "ElementCountError",
    "InvalidInterpolationError",
    "MissingSectionTerminatorError",
    "EndOfInputError",
    "SourceError",
    "ValidationError",
    "FileFormatError",
    "ConversionError",
    "DownloadError",
]
