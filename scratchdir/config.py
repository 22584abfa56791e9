"""
Configuration settings for scratchdir.

This module centralizes the knobs of the temporary-directory machinery:

    - retry ceiling for unique-name generation
    - feature flags (logging)

It provides:
    ScratchDirConfig – structured config object
    load_config()    – load from environment variables or defaults

Nothing in the package calls load_config() implicitly; callers that want
environment-driven settings pass the result through ``config=``.
"""

from __future__ import annotations

from dataclasses import dataclass
import os


# How many times to (re)try finding an unused random name. Large enough
# that an attacker runs out of luck before we run out of patience.
DEFAULT_MAX_RETRIES = 1 << 31


@dataclass(frozen=True)
class ScratchDirConfig:
    """
    Canonical configuration for temporary-directory creation.

    Attributes
    ----------
    max_retries:
        Upper bound on creation attempts before giving up with
        FileExistsError. Only name collisions consume attempts.

    enable_logging:
        Whether to switch on DEBUG logging when a directory is created.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    enable_logging: bool = False

    def __post_init__(self) -> None:
        if self.max_retries < 1:
            raise ValueError(
                f"max_retries must be at least 1, got {self.max_retries}"
            )


DEFAULT_CONFIG = ScratchDirConfig()


def load_config() -> ScratchDirConfig:
    """
    Load ScratchDirConfig from environment variables, falling back to defaults.

    Recognized variables:
        SCRATCHDIR_MAX_RETRIES     (positive integer)
        SCRATCHDIR_ENABLE_LOGGING  ("true" / "false" / "1" / "0")

    Returns
    -------
    ScratchDirConfig
    """

    def _env_flag(name: str, default: bool) -> bool:
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in ("1", "true", "yes", "on")

    def _env_int(name: str, default: int) -> int:
        val = os.getenv(name)
        if val is None or not val.strip():
            return default
        try:
            return int(val.strip())
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {val!r}") from None

    return ScratchDirConfig(
        max_retries=_env_int(
            "SCRATCHDIR_MAX_RETRIES",
            DEFAULT_MAX_RETRIES
        ),

        enable_logging=_env_flag(
            "SCRATCHDIR_ENABLE_LOGGING",
            default=False
        ),
    )


__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_CONFIG",
    "ScratchDirConfig",
    "load_config",
]
