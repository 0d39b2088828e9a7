#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyENDF command-line interface

Small drivers around the decoders and section readers:

1. **parse-real**      — Decode ENDF real fields and print the values
2. **ident**           — Decode the MAT/MF/MT/NS trailer of a line
3. **directory**       — Print MF=1/MT=451 header fields and directory
4. **delayed-photons** — Summarise MF=1/MT=460 and report read time
5. **hdf5**            — Export MF=1 data to HDF5
6. **download**        — Fetch an evaluation file over HTTP

Usage
-----
::

    python -m pyendf.cli parse-real " 9.423900+4" " 6.15077-10"
    python -m pyendf.cli directory n_9437_94-Pu-239.dat
    python -m pyendf.cli delayed-photons n_9437_94-Pu-239.dat
    python -m pyendf.cli hdf5 n_9437_94-Pu-239.dat Pu239.h5 --overwrite
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pyendf.exceptions import PyENDFError
from pyendf.utils.constants import FILE_NAMES, SECTION_NAMES

logger = logging.getLogger("pyendf.cli")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_parse_real(args) -> int:
    """Decode each field argument as an ENDF real."""
    from pyendf.utils.parsing import decode_real

    for field in args.fields:
        print(f"{field!r:>16} -> {decode_real(field)!r}")
    return 0


def cmd_ident(args) -> int:
    """Decode the identifier trailer of a full 80-column line."""
    from pyendf.utils.parsing import decode_identifier

    ident = decode_identifier(args.line)
    print(
        f"MAT={ident.material} MF={ident.file} MT={ident.section} NS={ident.index}"
        + ("  (SEND)" if ident.is_send else "")
    )
    return 0


def cmd_directory(args) -> int:
    """Print the descriptive data header and section directory."""
    from pyendf.readers.description import DescriptionReader

    card = DescriptionReader().read(args.path, validate=not args.no_validate)
    Z, A = card.za
    print(f"{card.ZSYMAM.strip()}  (Z={Z}, A={A}, AWR={card.AWR:g})")
    print(f"  Library:     {card.library_name}, release {card.LREL}, version {card.NVER}")
    print(f"  Sub-library: {card.sublibrary_name}")
    print(f"  Lab/authors: {card.ALAB.strip()} / {card.AUTH.strip()}")
    print(f"  Evaluated:   {card.EDATE.strip()}")
    if args.text:
        print(card.description)
    print(f"\n  {'MF':>3} {'MT':>4} {'NC':>6} {'MOD':>4}  Description")
    for e in card.directory:
        name = SECTION_NAMES.get((e.MF, e.MT), FILE_NAMES.get(e.MF, ""))
        print(f"  {e.MF:>3} {e.MT:>4} {e.NC:>6} {e.MOD:>4}  {name}")
    return 0


def cmd_delayed_photons(args) -> int:
    """Read MF=1/MT=460 and print a short summary."""
    from pyendf.readers.delayed_photon import DelayedPhotonReader

    t0 = time.time()
    data = DelayedPhotonReader().read(args.path, validate=not args.no_validate)
    elapsed = time.time() - t0

    if data.is_discrete:
        print(f"Discrete representation: {len(data.tables)} photon lines")
        for i, tab in enumerate(data.tables):
            print(f"  E={tab.head[0]:.6e} eV  {tab.n_points} time points")
    else:
        print(f"Continuous representation: {data.decay_constants.size} precursor families")
        for lam in data.decay_constants:
            print(f"  lambda={lam:.6e} 1/s")
    print(f"Reading took {elapsed:.3f}s")
    return 0


def cmd_hdf5(args) -> int:
    """Export MF=1 data to HDF5."""
    from pyendf.converters.hdf5 import create_hdf5

    out = create_hdf5(
        args.path,
        args.output,
        overwrite=args.overwrite,
        validate=not args.no_validate,
    )
    print(f"Wrote {out}")
    return 0


def cmd_download(args) -> int:
    """Download an evaluation file."""
    from pyendf.io.download import download_evaluation

    out = download_evaluation(args.url, args.out_dir, timeout=args.timeout)
    print(f"Downloaded {out}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyendf",
        description="PyENDF command-line tools for ENDF-6 files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pyendf.cli parse-real " 9.423900+4"              # 94239.0
    python -m pyendf.cli directory n_9437_94-Pu-239.dat         # MF=1/MT=451
    python -m pyendf.cli delayed-photons n_9437_94-Pu-239.dat   # MF=1/MT=460
    python -m pyendf.cli hdf5 n_9437_94-Pu-239.dat Pu239.h5     # export
""",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    p = sub.add_parser("parse-real", help="Decode ENDF real fields")
    p.add_argument("fields", nargs="+", help="Fields such as ' 9.423900+4'")
    p.set_defaults(func=cmd_parse_real)

    p = sub.add_parser("ident", help="Decode the identifier trailer of a line")
    p.add_argument("line", help="A full 80-column record line")
    p.set_defaults(func=cmd_ident)

    for name, func, help_ in (
        ("directory", cmd_directory, "Print MF=1/MT=451 header and directory"),
        ("delayed-photons", cmd_delayed_photons, "Summarise MF=1/MT=460"),
    ):
        p = sub.add_parser(name, help=help_)
        p.add_argument("path", help="ENDF file")
        p.add_argument("--no-validate", action="store_true", help="Skip post-parse checks")
        if name == "directory":
            p.add_argument("--text", action="store_true", help="Also print the comment text")
        p.set_defaults(func=func)

    p = sub.add_parser("hdf5", help="Export MF=1 data to HDF5")
    p.add_argument("path", help="ENDF file")
    p.add_argument("output", help="Output HDF5 file")
    p.add_argument("--overwrite", action="store_true", help="Overwrite an existing output file")
    p.add_argument("--no-validate", action="store_true", help="Skip post-parse checks")
    p.set_defaults(func=cmd_hdf5)

    p = sub.add_parser("download", help="Download an evaluation file")
    p.add_argument("url", help="URL of the ENDF file")
    p.add_argument("--out-dir", "-o", default=None, help="Output directory (default: cwd)")
    p.add_argument("--timeout", type=float, default=60, help="Timeout in seconds (default: 60)")
    p.set_defaults(func=cmd_download)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except PyENDFError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
