# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Plain-text share files.

Layout::

    <n>;<t>
    <y_1>
    ...
    <y_n>

The x-coordinate of a share is its 1-based line number after the header and
is never written. A secret split into several chunks stores the y-values of
every chunk on the same line, joined by ``+``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .errors import ShareFormatError
from .sharing import Share, recover_secret

_logger = logging.getLogger(__name__)

CHUNK_SEPARATOR = "+"


@dataclass(frozen=True)
class ShareFile:
    """Parsed content of a share file."""

    total: int
    threshold: int
    rows: tuple[tuple[int, ...], ...]

    @property
    def chunk_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def shares(self, chunk: int = 0) -> list[Share]:
        """Return the ``(x, y)`` points of one chunk."""
        return [Share(x, row[chunk]) for x, row in enumerate(self.rows, start=1)]


def format_shares(chunk_shares: Sequence[Sequence[tuple[int, int]]], threshold: int) -> str:
    """Render per-chunk share lists into the text layout."""
    if not chunk_shares:
        raise ShareFormatError("no shares to write")
    total = len(chunk_shares[0])
    if any(len(shares) != total for shares in chunk_shares):
        raise ShareFormatError("every chunk must have the same number of shares")
    lines = [f"{total};{threshold}"]
    for index in range(total):
        lines.append(CHUNK_SEPARATOR.join(str(shares[index][1]) for shares in chunk_shares))
    return "\n".join(lines) + "\n"


def dump_shares(path: str | os.PathLike[str], shares: Sequence[tuple[int, int]], threshold: int) -> Path:
    """Write the shares of a single secret to ``path``."""
    return dump_chunked_shares(path, [shares], threshold)


def dump_chunked_shares(
    path: str | os.PathLike[str],
    chunk_shares: Sequence[Sequence[tuple[int, int]]],
    threshold: int,
) -> Path:
    """Write the shares of a chunked secret to ``path``."""
    target = Path(path)
    target.write_text(format_shares(chunk_shares, threshold), encoding="ascii")
    _logger.info("saved %d share line(s) to %s", len(chunk_shares[0]), target)
    return target


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token.strip())
    except ValueError as exc:
        raise ShareFormatError(f"cannot parse {what}: {token!r}") from exc


def parse_shares(text: str) -> ShareFile:
    """Parse and validate the text layout."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ShareFormatError("share file needs a header and at least one share")

    header = lines[0].split(";")
    if len(header) != 2:
        raise ShareFormatError("header must look like '<total>;<threshold>'")
    total = _parse_int(header[0], "total")
    threshold = _parse_int(header[1], "threshold")
    if threshold < 1 or threshold > total:
        raise ShareFormatError("threshold exceeds share count")
    if len(lines) - 1 != total:
        raise ShareFormatError(f"expected {total} share lines, found {len(lines) - 1}")

    rows = tuple(
        tuple(_parse_int(token, f"share {index}") for token in line.split(CHUNK_SEPARATOR))
        for index, line in enumerate(lines[1:], start=1)
    )
    if len({len(row) for row in rows}) != 1:
        raise ShareFormatError("share lines carry different chunk counts")
    return ShareFile(total=total, threshold=threshold, rows=rows)


def load_share_file(path: str | os.PathLike[str]) -> ShareFile:
    """Read and validate a share file."""
    try:
        text = Path(path).read_text(encoding="ascii")
    except UnicodeDecodeError as exc:
        raise ShareFormatError(f"{path} is not an ASCII share file") from exc
    return parse_shares(text)


def recover_from_file(
    share_file: ShareFile,
    prime: int,
    *,
    subset: Iterable[int] | None = None,
) -> list[int]:
    """Recover every chunk using the first ``t`` shares or the given 1-based indices."""
    if subset is None:
        indices = list(range(1, share_file.threshold + 1))
    else:
        indices = list(subset)
        if any(i < 1 or i > share_file.total for i in indices):
            raise ShareFormatError(f"share indices must lie in 1..{share_file.total}")
    values = []
    for chunk in range(share_file.chunk_count):
        points = share_file.shares(chunk)
        values.append(recover_secret([points[i - 1] for i in indices], prime))
    return values


__all__ = [
    "ShareFile",
    "format_shares",
    "dump_shares",
    "dump_chunked_shares",
    "parse_shares",
    "load_share_file",
    "recover_from_file",
]
