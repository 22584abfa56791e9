"""
scratchdir

Self-deleting temporary directories.

This package aggregates:

    - temp:    the TempDir handle and the temporary_directory() helper
    - naming:  random suffix and leaf-name builders
    - config:  ScratchDirConfig and the environment loader
    - errors:  TempDirReleasedError

All public symbols from these modules are re-exported for convenience.
"""

from . import config
from . import errors
from . import naming
from . import temp

# Re-export all public symbols from the submodules
from .config import *  # noqa: F401,F403
from .errors import *  # noqa: F401,F403
from .naming import *  # noqa: F401,F403
from .temp import *    # noqa: F401,F403

__version__ = "0.1.0"

__all__ = (
    temp.__all__
    + naming.__all__
    + config.__all__
    + errors.__all__
)
