"""Exceptions raised by scratchdir."""

from __future__ import annotations


class TempDirReleasedError(RuntimeError):
    """
    Raised when a TempDir is used after it stopped owning its directory.

    A handle gives up ownership through release(), close(), or implicit
    cleanup at the end of a ``with`` block. Any later access is a
    programming error.
    """


__all__ = [
    "TempDirReleasedError",
]
