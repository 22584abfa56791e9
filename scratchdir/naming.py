"""
Name builders for temporary directories.

Leaf names are either ``<prefix>.<suffix>`` or, for an empty prefix, the
bare ``<suffix>``. Suffixes are drawn uniformly from ASCII letters and
digits; the goal is avoiding collisions with other well-behaved creators,
not resisting an adversary.
"""

from __future__ import annotations

import random
import string


# Enough characters to dissuade anyone from pre-creating every name of
# that length, without draining the random generator for nothing.
NUM_RAND_CHARS = 12

SUFFIX_ALPHABET = string.ascii_letters + string.digits
SEPARATOR = "."

_rng = random.Random()


def random_suffix(length: int = NUM_RAND_CHARS) -> str:
    """
    Return a fresh random alphanumeric suffix.

    Every call draws again; nothing is cached between calls.

    Example:
        random_suffix()
        -> "q3ZkP0aW9xLm"
    """
    return "".join(_rng.choices(SUFFIX_ALPHABET, k=length))


def compose_leaf(prefix: str, suffix: str) -> str:
    """
    Join prefix and suffix into a directory leaf name.

    An empty prefix yields the bare suffix, so the name never starts with
    the separator (dot-names are hidden by many file browsers).

    Example:
        compose_leaf("build", "q3ZkP0aW9xLm") -> "build.q3ZkP0aW9xLm"
        compose_leaf("", "q3ZkP0aW9xLm")      -> "q3ZkP0aW9xLm"
    """
    if prefix:
        return f"{prefix}{SEPARATOR}{suffix}"
    return suffix


__all__ = [
    "NUM_RAND_CHARS",
    "SUFFIX_ALPHABET",
    "random_suffix",
    "compose_leaf",
]
