#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the field decoders and line-level record grammar

Covers implicit-exponent real conversion, CONT/TEXT/LIST decoding,
identifier trailers, and the record-too-short and non-numeric error paths.
"""

from __future__ import annotations

import pytest

from pyendf.exceptions import (
    InvalidFloatError,
    InvalidIntegerError,
    ParseError,
    RecordTooShortError,
)
from pyendf.models.records import ContRecord, RecordIdentifier
from pyendf.utils.parsing import (
    decode_cont,
    decode_identifier,
    decode_int,
    decode_int_row,
    decode_real,
    decode_real_row,
    decode_text,
    lines_for,
    split_fields,
)

CONT_RECORD = (
    " 9.423900+4 2.369986+2          1"
    "          1          0          5"
    "9437 1451    1"
)
REALS_EXAMPLE = (
    " 6.15077-10 1.41078-10 1.323138-8"
    " 1.205944-8 1.093930-8 9.896124-9"
    "943735 18 6342"
)


# -----------------------------------------------------------------------
# decode_real / decode_int
# -----------------------------------------------------------------------

class TestDecodeReal:
    """Tests for ENDF real conversion"""

    def test_implicit_positive_exponent(self) -> None:
        assert decode_real(" 9.423900+4") == 9.4239e4

    def test_implicit_negative_exponent(self) -> None:
        assert decode_real(" 6.15077-10") == 6.15077e-10

    def test_negative_mantissa_and_exponent(self) -> None:
        assert decode_real("-1.500000-3") == -1.5e-3

    def test_leading_plus_sign(self) -> None:
        assert decode_real("+2.500000+1") == 25.0

    def test_marked_exponent_parsed_as_is(self) -> None:
        assert decode_real(" 1.23456E+03") == decode_real(" 1.23456+03")
        assert decode_real("1.5e-3") == 1.5e-3

    def test_fortran_d_marker(self) -> None:
        assert decode_real(" 1.23456D-03") == pytest.approx(0.00123456)

    def test_no_exponent(self) -> None:
        assert decode_real("   123.25  ") == 123.25

    def test_integer_literal(self) -> None:
        assert decode_real("          7") == 7.0

    def test_zero(self) -> None:
        assert decode_real(" 0.000000+0") == 0.0

    def test_blank_field_raises(self) -> None:
        with pytest.raises(InvalidFloatError):
            decode_real("           ")

    def test_garbage_raises(self) -> None:
        with pytest.raises(InvalidFloatError):
            decode_real("not_a_num")

    def test_is_parse_error(self) -> None:
        with pytest.raises(ParseError):
            decode_real("1.0+abc")


class TestDecodeInt:
    """Tests for ENDF integer conversion"""

    def test_padded_integer(self) -> None:
        assert decode_int("         42") == 42

    def test_negative(self) -> None:
        assert decode_int("         -1") == -1

    def test_blank_raises(self) -> None:
        with pytest.raises(InvalidIntegerError):
            decode_int("           ")

    def test_real_in_int_field_raises(self) -> None:
        with pytest.raises(InvalidIntegerError):
            decode_int(" 1.000000+0")


# -----------------------------------------------------------------------
# Record shapes
# -----------------------------------------------------------------------

class TestDecodeCont:
    """Tests for CONT record decoding"""

    def test_reference_record(self) -> None:
        assert decode_cont(CONT_RECORD) == (9.4239e4, 2.369986e2, 1, 1, 0, 5)

    def test_named_fields(self) -> None:
        cont = decode_cont(CONT_RECORD)
        assert isinstance(cont, ContRecord)
        assert cont.n2 == 5
        assert cont.c2 == pytest.approx(236.9986)

    def test_payload_only_is_enough(self) -> None:
        assert decode_cont(CONT_RECORD[:66]).l1 == 1

    def test_short_line(self) -> None:
        with pytest.raises(RecordTooShortError):
            decode_cont(CONT_RECORD[:65])

    def test_newline_not_counted(self) -> None:
        with pytest.raises(RecordTooShortError):
            decode_cont(CONT_RECORD[:65] + "\n")

    def test_non_numeric_int_field(self) -> None:
        bad = CONT_RECORD[:22] + "        abc" + CONT_RECORD[33:]
        with pytest.raises(InvalidIntegerError):
            decode_cont(bad)

    def test_non_numeric_real_field(self) -> None:
        bad = "     bogus " + CONT_RECORD[11:]
        with pytest.raises(InvalidFloatError):
            decode_cont(bad)


class TestDecodeText:
    """Tests for TEXT record decoding"""

    TEXT_RECORD = (
        "   Modifications were made to MT=458 based"
        " on a new analysis by   9437 1451   91"
    )

    def test_verbatim_payload(self) -> None:
        assert decode_text(self.TEXT_RECORD) == (
            "   Modifications were made to MT=458"
            " based on a new analysis by   "
        )

    def test_keeps_spacing(self) -> None:
        assert len(decode_text(self.TEXT_RECORD + "\n")) == 66

    def test_short_line(self) -> None:
        with pytest.raises(RecordTooShortError):
            decode_text("too short")


class TestDecodeRealRow:
    """Tests for LIST real rows"""

    def test_full_row(self) -> None:
        buf: list[float] = []
        assert decode_real_row(REALS_EXAMPLE, buf) == 6
        assert buf == [
            6.15077e-10, 1.41078e-10, 1.323138e-8,
            1.205944e-8, 1.093930e-8, 9.896124e-9,
        ]

    def test_blank_field_ends_row(self) -> None:
        # Garbage after the blank fourth field must never be read.
        line = " 1.000000+0 2.000000+0 3.000000+0" + " " * 11 + "    garbage" + " " * 11
        buf: list[float] = []
        assert decode_real_row(line, buf) == 3
        assert buf == [1.0, 2.0, 3.0]

    def test_accumulates_across_lines(self) -> None:
        buf = [0.5]
        decode_real_row(REALS_EXAMPLE, buf)
        decode_real_row(" 4.000000+0".ljust(66), buf)
        assert len(buf) == 8
        assert buf[0] == 0.5 and buf[-1] == 4.0

    def test_empty_row(self) -> None:
        buf: list[float] = []
        assert decode_real_row(" " * 66, buf) == 0
        assert buf == []

    def test_short_line(self) -> None:
        with pytest.raises(RecordTooShortError):
            decode_real_row(" 1.000000+0", [])

    def test_end_of_input_is_too_short(self) -> None:
        with pytest.raises(RecordTooShortError):
            decode_real_row("", [])


class TestDecodeIntRow:
    """Tests for LIST integer rows"""

    INTS_EXAMPLE = (
        "          1          2          3"
        "                                 "
        "943735 18 6342"
    )

    def test_three_values(self) -> None:
        buf: list[int] = []
        assert decode_int_row(self.INTS_EXAMPLE, buf) == 3
        assert buf == [1, 2, 3]

    def test_non_numeric(self) -> None:
        with pytest.raises(InvalidIntegerError):
            decode_int_row("          1        x.y".ljust(66), [])


class TestDecodeIdentifier:
    """Tests for the MAT/MF/MT/NS trailer"""

    def test_reference_trailer(self) -> None:
        assert decode_identifier(REALS_EXAMPLE) == (9437, 35, 18, 6342)

    def test_named_fields(self) -> None:
        ident = decode_identifier(CONT_RECORD)
        assert isinstance(ident, RecordIdentifier)
        assert (ident.material, ident.file, ident.section, ident.index) == (9437, 1, 451, 1)
        assert not ident.is_send

    def test_send_record(self) -> None:
        ident = decode_identifier(" " * 66 + "9437 1  099999")
        assert ident.is_send

    def test_trailing_newline(self) -> None:
        assert decode_identifier(REALS_EXAMPLE + "\r\n").index == 6342

    def test_79_columns(self) -> None:
        with pytest.raises(RecordTooShortError):
            decode_identifier(REALS_EXAMPLE[:79])

    def test_payload_only(self) -> None:
        with pytest.raises(RecordTooShortError):
            decode_identifier(CONT_RECORD[:66])

    def test_non_numeric(self) -> None:
        with pytest.raises(InvalidIntegerError):
            decode_identifier(CONT_RECORD[:66] + "94x7 1451    1")


class TestHelpers:
    """Tests for column and line-count helpers"""

    def test_split_fields(self) -> None:
        fields = split_fields(CONT_RECORD)
        assert len(fields) == 6
        assert all(len(f) == 11 for f in fields)
        assert fields[0] == " 9.423900+4"

    @pytest.mark.parametrize(
        "n, expected",
        [(0, 0), (1, 1), (6, 1), (7, 2), (12, 2), (13, 3)],
    )
    def test_lines_for(self, n: int, expected: int) -> None:
        assert lines_for(n) == expected
