"""Fluent wrapper around a single string.

A `Word` holds one string. Editing methods change it in place and return
the same `Word`, so calls can be chained; query and casing methods return a
new value and leave the held string alone.

Example:
    >>> of('  boxes ').trim().singular().append('!').get()
    'box!'
    >>> of('user first name').camel_case()
    'userFirstName'
"""

__docformat__ = 'google'

__all__ = [
    'Word',
    'of'
]

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from wordkit import functions
from wordkit import inflection
from wordkit import regex
from wordkit.errors import InvalidOperationResult
from wordkit.functions.functions import Words
from wordkit.regex import PatternLike

logger = logging.getLogger(__name__)

@dataclass
class Word:
    string: str

    def __post_init__(self):
        if not isinstance(self.string, str):
            raise TypeError(f'Word requires a string, got {type(self.string).__name__}')

    def __str__(self) -> str:
        return self.string

    def __len__(self) -> int:
        return len(self.string)

    def __bool__(self) -> bool:
        return True

    @classmethod
    def of(cls, string: str) -> 'Word':
        """
        Create a Word holding string.

        Example:
            >>> Word.of('hello').get()
            'hello'
        """
        return cls(string)

    def get(self) -> str:
        """The held string."""
        return self.string

    def apply(self, operation: Callable[['Word'], str]) -> 'Word':
        """
        Replace the held string with the result of a custom operation.

        Args:
            operation: Called with this Word, must return a string

        Raises:
            InvalidOperationResult: If operation returns anything but a string.
                The held string is left unchanged.

        Example:
            >>> of('abc').apply(lambda w: w.get()[::-1]).get()
            'cba'
        """
        original = self.string
        result = operation(self)
        if not isinstance(result, str):
            self.string = original
            logger.debug('Rejected %r result from %r', type(result).__name__, operation)
            raise InvalidOperationResult(result)
        self.string = result
        return self

    ## Casing
    def pascal_case(self) -> str:
        return functions.pascal_case(self.string)

    def kebab_case(self) -> str:
        return functions.kebab_case(self.string)

    def snake_case(self) -> str:
        return functions.snake_case(self.string)

    def camel_case(self) -> str:
        return functions.camel_case(self.string)

    def title_case(self) -> str:
        return functions.title_case(self.string)

    def to_lower(self) -> str:
        return self.string.lower()

    def to_upper(self) -> str:
        return self.string.upper()

    ## Queries
    def substring(self, start: int, length: Optional[int] = None) -> str:
        """See `wordkit.functions.substring`."""
        return functions.substring(self.string, start, length)

    def length(self) -> int:
        return len(self.string)

    def match(self, pattern: PatternLike) -> Optional[List[str]]:
        """
        Groups of the first match of a delimited pattern.

        Example:
            >>> of('foo123').match('/\\\\d+/')
            ['123']
            >>> of('abc').match('/\\\\d+/') is None
            True
        """
        return regex.first_match(pattern, self.string)

    def contains(self, word: Words) -> bool:
        """See `wordkit.functions.contains`."""
        return functions.contains(self.string, word)

    ## Editing
    def trim(self) -> 'Word':
        self.string = functions.trim(self.string)
        return self

    def replace(self, search: str, replacement: str) -> 'Word':
        self.string = functions.replace(self.string, search, replacement)
        return self

    def replace_regex(self, pattern: PatternLike, replacement: str) -> 'Word':
        """
        Replace every match of a delimited pattern.

        Example:
            >>> of('2024-01-31').replace_regex('/(\\\\d+)-(\\\\d+)-(\\\\d+)/', '$3.$2.$1').get()
            '31.01.2024'
        """
        self.string = regex.substitute(pattern, replacement, self.string)
        return self

    def prepend(self, *strings: str) -> 'Word':
        self.string = ''.join(strings) + self.string
        return self

    def append(self, *strings: str) -> 'Word':
        self.string += ''.join(strings)
        return self

    def concatenate(self, *strings: str) -> 'Word':
        """Same as `append`."""
        return self.append(*strings)

    def remove_letters(self, letters: Words) -> 'Word':
        """See `wordkit.functions.remove_letters`."""
        self.string = functions.remove_letters(self.string, letters)
        return self

    def capitalize_appended_word(self, word: str) -> 'Word':
        """See `wordkit.functions.capitalize_appended_word`."""
        self.string = functions.capitalize_appended_word(self.string, word)
        return self

    def singular(self) -> 'Word':
        """See `wordkit.inflection.singularize`."""
        self.string = inflection.singularize(self.string)
        return self

    def plural(self) -> 'Word':
        """See `wordkit.inflection.pluralize`."""
        self.string = inflection.pluralize(self.string)
        return self

def of(string: str) -> Word:
    """
    Create a Word holding string.

    Example:
        >>> of('hello world').pascal_case()
        'HelloWorld'
    """
    return Word.of(string)
