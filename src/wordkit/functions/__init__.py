"""
String manipulation functions behind `wordkit.Word`.

This module provides functions for converting between casing formats,
extracting and editing substrings, and performing text replacements.
"""

from .functions import __all__
from .functions import *

__all__ = __all__
