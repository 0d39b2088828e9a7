#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyENDF tests

Provides synthetic 80-column ENDF-6 text for testing the record grammar,
scanner, tabular decoders, section readers and HDF5 converter without
requiring real evaluation files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

MAT = 9437


class RecordBuilder:
    """Formats payloads and whole lines in ENDF-6 fixed-width layout"""

    @staticmethod
    def real(x: float) -> str:
        """11-column real with implicit exponent, e.g. `` 1.500000+0``."""
        mantissa, exp = f"{x:.6e}".split("e")
        e = int(exp)
        return f"{mantissa}{'+' if e >= 0 else '-'}{abs(e)}".rjust(11)

    @staticmethod
    def integer(n: int) -> str:
        return f"{n:11d}"

    def cont(self, c1: float, c2: float, l1: int, l2: int, n1: int, n2: int) -> str:
        return (
            self.real(c1) + self.real(c2)
            + self.integer(l1) + self.integer(l2)
            + self.integer(n1) + self.integer(n2)
        )

    @staticmethod
    def rows(fields: list[str]) -> list[str]:
        """Group pre-formatted fields six per payload, blank padded."""
        return [
            "".join(fields[i : i + 6]).ljust(66)
            for i in range(0, len(fields), 6)
        ]

    def int_rows(self, values: list[int]) -> list[str]:
        return self.rows([self.integer(v) for v in values])

    def real_rows(self, values: list[float]) -> list[str]:
        return self.rows([self.real(v) for v in values])

    def tab1(
        self,
        head: tuple[float, float, int, int],
        ranges: list[tuple[int, int]],
        points: list[tuple[float, float]],
    ) -> list[str]:
        """Payloads of a TAB1 record."""
        c1, c2, l1, l2 = head
        out = [self.cont(c1, c2, l1, l2, len(ranges), len(points))]
        out += self.int_rows([v for pair in ranges for v in pair])
        out += self.real_rows([v for pair in points for v in pair])
        return out

    @staticmethod
    def ident(mat: int, mf: int, mt: int, ns: int) -> str:
        return f"{mat:4d}{mf:2d}{mt:3d}{ns:5d}"

    def line(self, payload: str, mat: int = MAT, mf: int = 1, mt: int = 451, ns: int = 1) -> str:
        return payload.ljust(66)[:66] + self.ident(mat, mf, mt, ns) + "\n"

    def section(self, payloads: list[str], mat: int, mf: int, mt: int) -> str:
        """Number the payloads as one section and append its SEND record."""
        body = "".join(
            self.line(p, mat, mf, mt, ns) for ns, p in enumerate(payloads, start=1)
        )
        return body + self.line(self.cont(0.0, 0.0, 0, 0, 0, 0), mat, mf, 0, 99999)

    def with_ident(self, payloads: list[str], mf: int = 1, mt: int = 451) -> str:
        """Lines without a SEND record, for decoding a bare record."""
        return "".join(
            self.line(p, MAT, mf, mt, ns) for ns, p in enumerate(payloads, start=1)
        )


@pytest.fixture
def records() -> RecordBuilder:
    return RecordBuilder()


@pytest.fixture
def description_payloads(records: RecordBuilder) -> list[str]:
    """MF=1/MT=451 payloads for a synthetic Pu-239 evaluation (no SEND)"""
    r = records
    return [
        r.cont(94239.0, 236.9986, 1, 1, 0, 5),
        r.cont(0.0, 0.0, 0, 0, 0, 6),
        r.cont(1.0, 2.0e7, 0, 0, 10, 8),
        r.cont(0.0, 0.0, 0, 0, 5, 4),
        " 94-Pu-239 LANL       EVAL-DEC05 P.G.Young, M.B.Chadwick et al.",
        " Ref. 1".ljust(22) + "DIST-DEC06 " + "REV1-11DEC " + " " * 11 + r.integer(20111222),
        " ----ENDF/B-VIII.0   MATERIAL 9437",
        " -----INCIDENT NEUTRON DATA",
        "   Modifications were made to MT=458 based on a new analysis by",
        " " * 22 + r.integer(1) + r.integer(451) + r.integer(12) + r.integer(0),
        " " * 22 + r.integer(1) + r.integer(460) + r.integer(9) + r.integer(0),
        " " * 22 + r.integer(3) + r.integer(1) + r.integer(4) + r.integer(0),
        " " * 22 + r.integer(3) + r.integer(18) + r.integer(3) + r.integer(0),
    ]


@pytest.fixture
def delayed_photon_payloads(records: RecordBuilder) -> list[str]:
    """MF=1/MT=460 payloads with two discrete photon lines (no SEND)"""
    r = records
    return (
        [r.cont(94239.0, 236.9986, 1, 0, 2, 0)]
        + r.tab1((1.5e5, 0.0, 1, 0), [(3, 2)], [(0.0, 1.0), (1.0, 0.5), (2.0, 0.25)])
        + r.tab1(
            (2.5e5, 0.0, 2, 0),
            [(4, 1)],
            [(0.0, 2.0), (1.0, 1.5), (2.0, 1.0), (4.0, 0.125)],
        )
    )


@pytest.fixture
def material_text(
    records: RecordBuilder,
    description_payloads: list[str],
    delayed_photon_payloads: list[str],
) -> str:
    """A complete single-material tape: TPID, MF=1 (451, 460), MF=3 (1)"""
    r = records
    tpid = r.line("Synthetic PyENDF test tape", mat=1, mf=0, mt=0, ns=0)
    mf1 = (
        r.section(description_payloads, MAT, 1, 451)
        + r.section(delayed_photon_payloads, MAT, 1, 460)
        + r.line(r.cont(0.0, 0.0, 0, 0, 0, 0), MAT, 0, 0, 0)
    )
    mf3 = (
        r.section(
            [r.cont(94239.0, 236.9986, 0, 0, 0, 0)]
            + r.tab1(
                (0.0, 0.0, 0, 0),
                [(2, 2), (5, 5)],
                [(1.0e-5, 10.0), (1.0, 8.0), (10.0, 6.0), (100.0, 4.0), (2.0e7, 2.0)],
            ),
            MAT, 3, 1,
        )
        + r.line(r.cont(0.0, 0.0, 0, 0, 0, 0), MAT, 0, 0, 0)
    )
    mend = r.line(r.cont(0.0, 0.0, 0, 0, 0, 0), 0, 0, 0, 0)
    tend = r.line(r.cont(0.0, 0.0, 0, 0, 0, 0), -1, 0, 0, 0)
    return tpid + mf1 + mf3 + mend + tend


@pytest.fixture
def material_file(tmp_path: Path, material_text: str) -> Path:
    """The synthetic tape written to disk"""
    path = tmp_path / "n_9437_94-Pu-239.dat"
    path.write_text(material_text)
    return path
