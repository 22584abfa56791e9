"""
Temporary directory handles.

A TempDir owns exactly one freshly created directory and removes it (with
everything inside) when its scope ends:

    - explicitly, via close(), which raises on failure
    - implicitly, at the end of a ``with`` block or when the handle is
      garbage collected, in which case failures are ignored

release() hands the path to the caller and disarms deletion.

Directory names are ``<prefix>.<12 random alphanumerics>`` under the chosen
parent. Creation relies on os.mkdir failing when anything already occupies
the path; a collision simply draws a new name, any other error is raised
as-is.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from .config import DEFAULT_CONFIG, ScratchDirConfig
from .errors import TempDirReleasedError
from .naming import compose_leaf, random_suffix

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]


class TempDir:
    """
    Owner of a temporary directory with scope-based deletion.

    Instances come from TempDir.create() or TempDir.create_in_system_temp();
    there is one handle per created directory and it cannot be copied.

    Usage
    -----
    with TempDir.create_in_system_temp("build") as tmp:
        (tmp.path / "out.txt").write_text("...")
    # directory is gone here

    tmp = TempDir.create("/var/scratch", "job")
    try:
        ...
    finally:
        tmp.close()   # raises if removal fails
    """

    __slots__ = ("_path",)

    def __init__(self, path: Path):
        self._path: Optional[Path] = path

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        parent_directory: PathArg,
        prefix: str = "",
        *,
        config: Optional[ScratchDirConfig] = None,
    ) -> "TempDir":
        """
        Create a new uniquely named directory inside ``parent_directory``.

        Parameters
        ----------
        parent_directory : str or PathLike
            Existing directory to create into. A relative path is resolved
            against the current working directory at call time.
        prefix : str
            Leading part of the directory name. May be empty.
        config : Optional[ScratchDirConfig]
            Retry ceiling and logging switch. Defaults to DEFAULT_CONFIG.

        Returns
        -------
        TempDir
            Handle owning the new directory.

        Raises
        ------
        FileExistsError
            If every attempt within the retry budget hit an existing name.
        OSError
            Any other failure of os.mkdir (missing parent, permissions,
            disk full, ...), raised on the first occurrence.
        """
        cfg = config or DEFAULT_CONFIG

        if cfg.enable_logging:
            logging.basicConfig(level=logging.DEBUG)

        parent = Path(os.fspath(parent_directory))
        if not parent.is_absolute():
            parent = Path.cwd() / parent

        for attempt in range(cfg.max_retries):
            candidate = parent / compose_leaf(prefix, random_suffix())
            try:
                os.mkdir(candidate)
            except FileExistsError:
                logger.debug(
                    "Name collision on %s (attempt %d), retrying", candidate, attempt + 1
                )
                continue

            logger.debug("Created temporary directory %s", candidate)
            return cls(candidate)

        raise FileExistsError(
            errno.EEXIST, "too many temporary directories already exist", str(parent)
        )

    @classmethod
    def create_in_system_temp(
        cls,
        prefix: str = "",
        *,
        config: Optional[ScratchDirConfig] = None,
    ) -> "TempDir":
        """
        Same as create(), with the platform temp directory as parent.

        The parent is whatever tempfile.gettempdir() reports (honouring
        TMPDIR, TEMP and TMP).
        """
        return cls.create(tempfile.gettempdir(), prefix, config=config)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        """Absolute path of the owned directory."""
        if self._path is None:
            raise TempDirReleasedError(
                "TempDir no longer owns a directory (released or closed)"
            )
        return self._path

    def __fspath__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r})"

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def release(self) -> Path:
        """
        Give up ownership and return the path.

        The directory stays on disk and this handle will never delete it;
        the caller is responsible for it from now on.
        """
        path = self.path
        self._path = None
        return path

    def close(self) -> None:
        """
        Remove the directory and all its contents now.

        Unlike implicit cleanup, errors from the removal are raised
        (e.g. FileNotFoundError if the directory was deleted behind our
        back). The handle is spent afterwards either way.
        """
        path = self.path
        self._path = None
        shutil.rmtree(path)

    def _cleanup_quietly(self) -> None:
        path = self._path
        if path is None:
            return
        self._path = None
        try:
            shutil.rmtree(path)
        except Exception:
            # Best-effort; close() is the way to observe failures.
            logger.debug("Ignoring failure removing %s", path, exc_info=True)

    # ------------------------------------------------------------------
    # Scope
    # ------------------------------------------------------------------

    def __enter__(self) -> "TempDir":
        if self._path is None:
            raise TempDirReleasedError("cannot enter a released or closed TempDir")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._cleanup_quietly()

    def __del__(self):
        if getattr(self, "_path", None) is None:
            return
        try:
            self._cleanup_quietly()
        except Exception:
            # Interpreter teardown can leave module globals unset.
            pass

    # Single owner: duplicating the handle would duplicate the deletion.

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError(f"{type(self).__name__} cannot be pickled")


@contextmanager
def temporary_directory(
    prefix: str = "",
    parent_directory: Optional[PathArg] = None,
    *,
    config: Optional[ScratchDirConfig] = None,
) -> Iterator[Path]:
    """
    Yield the path of a fresh temporary directory, removing it afterwards.

    Parameters
    ----------
    prefix : str
        Leading part of the directory name. May be empty.
    parent_directory : Optional[str or PathLike]
        Where to create the directory. None means the system temp dir.
    config : Optional[ScratchDirConfig]
        Passed through to TempDir.create().

    Cleanup runs however the block exits and never raises; use TempDir
    and close() directly when removal failures matter.
    """
    if parent_directory is None:
        tmp = TempDir.create_in_system_temp(prefix, config=config)
    else:
        tmp = TempDir.create(parent_directory, prefix, config=config)

    with tmp:
        yield tmp.path


__all__ = [
    "TempDir",
    "temporary_directory",
]
