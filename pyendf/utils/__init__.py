#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for decoding and validation

This sub-package centralises the fixed-width field decoders, the
line-level record grammar and post-parse validation routines so that no
logic is duplicated across the tabular decoders and section readers.
"""

from __future__ import annotations
