"""Top-level package for slotbits."""

import importlib.metadata as importlib_metadata

from slotbits.api import *  # noqa: F401,F403
from slotbits.bitset import Bitset  # noqa: F401

__version__ = importlib_metadata.version(__name__)
