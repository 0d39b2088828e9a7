#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for line sources and the forward section scanner

Covers matching by (MF, MT) and (MAT, MF, MT), the end-of-input outcome
for absent sections, forward-only behaviour, binary sources, I/O error
wrapping and the optional section index.
"""

from __future__ import annotations

import io

import pytest

from pyendf.exceptions import (
    EndOfInputError,
    FileFormatError,
    RecordTooShortError,
    SourceError,
)
from pyendf.io.scanner import index_sections, seek_material_section, seek_section
from pyendf.io.source import open_endf, read_line, rewind
from pyendf.utils.parsing import decode_cont, decode_identifier


class _FailingSource:
    """Line source whose stream breaks on every read"""

    def readline(self) -> str:
        raise OSError("device not ready")


class TestReadLine:
    """Tests for the source helpers"""

    def test_text_source(self) -> None:
        assert read_line(io.StringIO("abc\n")) == "abc\n"

    def test_binary_source_decoded(self) -> None:
        assert read_line(io.BytesIO(b"abc\n")) == "abc\n"

    def test_exhausted_source(self) -> None:
        assert read_line(io.StringIO("")) == ""

    def test_os_error_wrapped(self) -> None:
        with pytest.raises(SourceError) as info:
            read_line(_FailingSource())
        assert isinstance(info.value.__cause__, OSError)

    def test_rewind_requires_seek(self) -> None:
        with pytest.raises(TypeError):
            rewind(_FailingSource())

    def test_open_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileFormatError):
            open_endf(tmp_path / "nonexistent.endf")


class TestSeekSection:
    """Tests for forward scanning by (MF, MT)"""

    def test_finds_first_line(self, material_text: str) -> None:
        source = io.StringIO(material_text)
        line = seek_section(source, 1, 460)
        ident = decode_identifier(line)
        assert (ident.file, ident.section, ident.index) == (1, 460, 1)
        assert decode_cont(line).n1 == 2

    def test_leaves_source_after_match(self, material_text: str) -> None:
        source = io.StringIO(material_text)
        seek_section(source, 1, 451)
        assert decode_identifier(read_line(source)).index == 2

    def test_absent_section_consumes_everything(self, material_text: str) -> None:
        source = io.StringIO(material_text)
        with pytest.raises(EndOfInputError):
            seek_section(source, 3, 102)
        assert source.readline() == ""

    def test_never_moves_backward(self, material_text: str) -> None:
        source = io.StringIO(material_text)
        seek_section(source, 3, 1)
        with pytest.raises(EndOfInputError):
            seek_section(source, 1, 451)

    def test_rescan_after_rewind(self, material_text: str) -> None:
        source = io.StringIO(material_text)
        seek_section(source, 3, 1)
        rewind(source)
        assert decode_identifier(seek_section(source, 1, 451)).section == 451

    def test_binary_source(self, material_text: str) -> None:
        source = io.BytesIO(material_text.encode("ascii"))
        assert decode_identifier(seek_section(source, 3, 1)).file == 3

    def test_empty_source(self) -> None:
        with pytest.raises(EndOfInputError):
            seek_section(io.StringIO(""), 1, 451)

    def test_corrupt_trailer_propagates(self) -> None:
        with pytest.raises(RecordTooShortError):
            seek_section(io.StringIO("short line\n"), 1, 451)

    def test_io_failure_propagates(self) -> None:
        with pytest.raises(SourceError):
            seek_section(_FailingSource(), 1, 451)


class TestSeekMaterialSection:
    """Tests for scanning by (MAT, MF, MT)"""

    def test_matching_material(self, material_text: str) -> None:
        line = seek_material_section(io.StringIO(material_text), 9437, 3, 1)
        assert decode_identifier(line).material == 9437

    def test_other_material_not_matched(self, material_text: str) -> None:
        with pytest.raises(EndOfInputError):
            seek_material_section(io.StringIO(material_text), 9228, 3, 1)


class TestIndexSections:
    """Tests for the optional key -> offset index"""

    def test_keys(self, material_text: str) -> None:
        index = index_sections(io.StringIO(material_text))
        assert set(index) == {(9437, 1, 451), (9437, 1, 460), (9437, 3, 1)}

    def test_offsets_lead_to_sections(self, material_text: str) -> None:
        source = io.StringIO(material_text)
        index = index_sections(source)
        for key in [(9437, 3, 1), (9437, 1, 451), (9437, 1, 460)]:
            rewind(source, index[key])
            ident = decode_identifier(read_line(source))
            assert (ident.material, ident.file, ident.section) == key
            assert ident.index == 1

    def test_file_source(self, material_file) -> None:
        with open_endf(material_file) as fh:
            index = index_sections(fh)
            rewind(fh, index[(9437, 1, 460)])
            line = seek_material_section(fh, 9437, 1, 460)
        assert decode_identifier(line).index == 1
