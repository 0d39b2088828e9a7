#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Evaluation file downloader

Fetches a single ENDF evaluation file over HTTP(S), for example from the
IAEA Nuclear Data Services or NNDC library pages, and stores it on disk
under its remote file name.

Examples
--------
>>> from pyendf.io.download import download_evaluation
>>> download_evaluation(
...     "https://www-nds.iaea.org/public/download-endf/ENDF-B-VIII.0/n/n_094-Pu-239.dat",
...     "endf",
... )
PosixPath('endf/n_094-Pu-239.dat')
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from pyendf.exceptions import DownloadError

logger = logging.getLogger(__name__)

CHUNK_SIZE: int = 8192
"""Bytes written per streamed chunk."""


def download_evaluation(
    url: str,
    out_dir: Path | str | os.PathLike | None = None,
    *,
    timeout: float = 60,
) -> Path:
    """Download one ENDF file into *out_dir*

    Parameters
    ----------
    url : str
        Location of the file.  The last path component is used as the
        local file name.
    out_dir : Path | str | None, optional
        Output directory, created if missing.  Defaults to the current
        working directory.
    timeout : float, optional
        Connect/read timeout in seconds.  Default 60.

    Returns
    -------
    Path
        Path of the downloaded file.

    Raises
    ------
    DownloadError
        If the URL has no file name, ``requests`` is not installed, or
        the request fails.
    """
    try:
        import requests
    except ImportError as exc:
        raise DownloadError(
            "Download requires 'requests'.  Install with: pip install requests"
        ) from exc

    name = PurePosixPath(urlparse(url).path).name
    if not name:
        raise DownloadError(f"Cannot derive a file name from URL {url!r}")

    out = Path(out_dir) if out_dir is not None else Path.cwd()
    out.mkdir(parents=True, exist_ok=True)
    dst = out / name

    logger.info("Downloading %s -> %s", url, dst)
    try:
        with requests.get(url, stream=True, timeout=timeout) as r:
            r.raise_for_status()
            with open(dst, "wb") as f:
                for chunk in r.iter_content(CHUNK_SIZE):
                    f.write(chunk)
    except requests.RequestException as exc:
        raise DownloadError(f"Failed to download {url}: {exc}") from exc

    logger.debug("Downloaded %d bytes to %s", dst.stat().st_size, dst)
    return dst
