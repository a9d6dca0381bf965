# sdtinfo/__init__.py

from .sdtinfo import *
from .sdtinfo import __all__, __doc__, __version__

# constants are repeated for documentation

__version__ = __version__
"""Sdtinfo version string."""
