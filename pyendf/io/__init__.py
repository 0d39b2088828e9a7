#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Line sources, the forward section scanner and the evaluation downloader

* :mod:`pyendf.io.source`   — ``LineSource`` protocol, ``open_endf``
* :mod:`pyendf.io.scanner`  — ``seek_section``, ``index_sections``
* :mod:`pyendf.io.download` — ``download_evaluation``
"""

from __future__ import annotations
