"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import functions
from . import inflection
from . import regex
from .errors import InvalidOperationResult
from .word import Word, of

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Word',
    'of',
    'InvalidOperationResult',
    'functions',
    'inflection',
    'regex'
]
