#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Layout constants and code-mapping tables used across PyENDF

Column widths follow the ENDF-6 fixed-width record layout [1]_.  Mapping
dictionaries are keyed by the integer codes that appear in the files
(``NLIB``, ``NSUB``, ``MF``, ``(MF, MT)``) so that look-ups from decoded
header fields are O(1).

References
----------
.. [1] ENDF-6 Formats Manual (ENDF-102), BNL-90365-2009 Rev. 2, §0.6
   and §1.1.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# ENDF-6 fixed-width column layout
# ---------------------------------------------------------------------------

ENDF_LINE_WIDTH: int = 80
"""Total width of an ENDF record line in characters."""

ENDF_DATA_WIDTH: int = 66
"""Width of the data portion of an ENDF record line (first 66 chars)."""

ENDF_FIELD_WIDTH: int = 11
"""Width of a single numeric field inside the data portion."""

ENDF_FIELDS_PER_LINE: int = 6
"""Number of numeric fields per data line (66 / 11)."""

IDENT_MAT_COLUMNS: tuple[int, int] = (66, 70)
"""Zero-based slice of the MAT number (columns 67-70)."""

IDENT_MF_COLUMNS: tuple[int, int] = (70, 72)
"""Zero-based slice of the MF number (columns 71-72)."""

IDENT_MT_COLUMNS: tuple[int, int] = (72, 75)
"""Zero-based slice of the MT number (columns 73-75)."""

IDENT_NS_COLUMNS: tuple[int, int] = (75, 80)
"""Zero-based slice of the line sequence number (columns 76-80)."""

# ---------------------------------------------------------------------------
# Control records
# ---------------------------------------------------------------------------

SEND_SECTION: int = 0
"""MT value carried by the section-end (SEND) record."""

SEND_INDEX: int = 99999
"""NS value carried by the section-end (SEND) record."""

# ---------------------------------------------------------------------------
# Well-known sections
# ---------------------------------------------------------------------------

DESCRIPTION_SECTION: tuple[int, int] = (1, 451)
"""``(MF, MT)`` of the descriptive data and directory section."""

DELAYED_PHOTON_SECTION: tuple[int, int] = (1, 460)
"""``(MF, MT)`` of the delayed photon data section."""

DELAYED_PHOTON_DISCRETE: int = 1
"""``LO`` flag for the discrete delayed-photon representation."""

DELAYED_PHOTON_CONTINUOUS: int = 2
"""``LO`` flag for the continuous delayed-photon representation."""

# ---------------------------------------------------------------------------
# Code tables
# ---------------------------------------------------------------------------

LIBRARY_NAMES: dict[int, str] = {
    0:  "ENDF/B",
    1:  "ENDF/A",
    2:  "JEFF",
    3:  "EFF",
    4:  "ENDF/B High Energy",
    5:  "CENDL",
    6:  "JENDL",
    17: "TENDL",
    18: "ROSFOND",
    21: "SG-23",
    31: "INDL/V",
    32: "INDL/A",
    33: "FENDL",
    34: "IRDF",
    35: "BROND (IAEA version)",
    36: "INGDB-90",
    37: "FENDL/A",
    38: "IAEA/PDD",
    41: "BROND",
}
"""Library identifiers (``NLIB``) from the MF=1/MT=451 header."""

SUBLIBRARY_NAMES: dict[int, str] = {
    0:     "Photo-nuclear data",
    1:     "Photo-induced fission product yields",
    3:     "Photo-atomic interaction data",
    4:     "Radioactive decay data",
    5:     "Spontaneous fission product yields",
    6:     "Atomic relaxation data",
    10:    "Incident-neutron data",
    11:    "Neutron-induced fission product yields",
    12:    "Thermal neutron scattering data",
    19:    "Neutron cross section standards",
    113:   "Electro-atomic interaction data",
    10010: "Incident-proton data",
    10011: "Proton-induced fission product yields",
    10020: "Incident-deuteron data",
    10030: "Incident-triton data",
    20030: "Incident-helion (3He) data",
    20040: "Incident-alpha data",
}
"""Sub-library identifiers (``NSUB``) from the MF=1/MT=451 header."""

FILE_NAMES: dict[int, str] = {
    1:  "General information",
    2:  "Resonance parameter data",
    3:  "Reaction cross sections",
    4:  "Angular distributions for emitted particles",
    5:  "Energy distributions for emitted particles",
    6:  "Energy-angle distributions for emitted particles",
    7:  "Thermal neutron scattering law data",
    8:  "Radioactivity and fission-product yield data",
    9:  "Multiplicities for radioactive nuclide production",
    10: "Cross sections for radioactive nuclide production",
    12: "Multiplicities for photon production",
    13: "Cross sections for photon production",
    14: "Angular distributions for photon production",
    15: "Energy distributions for photon production",
    23: "Photo- or electro-atomic interaction cross sections",
    26: "Secondary distributions for photo- and electro-atomic data",
    27: "Atomic form factors or scattering functions",
    28: "Atomic relaxation data",
    31: "Covariances of average number of neutrons per fission",
    32: "Covariances of resonance parameters",
    33: "Covariances of neutron cross sections",
    34: "Covariances for angular distributions",
    35: "Covariances for energy distributions",
    40: "Covariances for radionuclide production",
}
"""Human-readable names of ENDF file numbers (``MF``)."""

SECTION_NAMES: dict[tuple[int, int], str] = {
    (1, 451): "Descriptive data and directory",
    (1, 452): "Number of neutrons per fission",
    (1, 455): "Delayed neutron data",
    (1, 456): "Number of prompt neutrons per fission",
    (1, 458): "Components of energy release due to fission",
    (1, 460): "Delayed photon data",
}
"""Human-readable names of the MF=1 sections, keyed by ``(MF, MT)``."""
