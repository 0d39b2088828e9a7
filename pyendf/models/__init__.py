#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for decoded ENDF-6 data

Named tuples for line-level records and ``dataclasses`` carrying NumPy
arrays for tabulated functions and section contents.  They are the sole
output format of the decoder and reader layers and the sole input format
accepted by the converter layer.
"""

from __future__ import annotations

from pyendf.models.records import (
    ContRecord,
    RecordIdentifier,
    InterpolationScheme,
    InterpolationInterval,
    Tab1,
    Tab2,
    DirectoryEntry,
    DescriptionCard,
    DelayedPhotonData,
)

__all__ = [
    "ContRecord",
    "RecordIdentifier",
    "InterpolationScheme",
    "InterpolationInterval",
    "Tab1",
    "Tab2",
    "DirectoryEntry",
    "DescriptionCard",
    "DelayedPhotonData",
]
