"""Regex building blocks and character sets shared by the string functions.
"""

__docformat__ = 'google'

import re
from typing import Dict

## Whitespace
TRIM_CHARACTERS: str = " \t\n\r\0\x0B"
"""Characters stripped from both ends by `wordkit.functions.trim`.

Space, tab, line feed, carriage return, NUL and vertical tab. Unicode
whitespace is deliberately left alone."""

WORD_DELIMITERS: str = " \t\r\n\f\v"
"""Characters that start a new word for `wordkit.functions.ucwords`."""

# Building blocks
ASCII_WHITESPACE: str = "[ \\t\\n\\v\\f\\r]"
WORD_BREAK: str = f"(?:{ASCII_WHITESPACE}|_)+"
""" Uncompiled regex building block for a run of whitespace or underscores."""

NOT_LOWER_ALNUM: str = "[^a-z0-9]+"
""" Uncompiled regex building block for a run of anything but lowercase letters and digits.

Uppercase letters fall in this class, so they act as separators."""

WORD_START: str = f"(?:^|(?<=[{re.escape(WORD_DELIMITERS)}]))([^{re.escape(WORD_DELIMITERS)}])"

# Patterns
WORD_BREAK_PATTERN: re.Pattern = re.compile(WORD_BREAK)
"""Compiled regex splitting text into fragments for Pascal and camel case.

Used in `wordkit.functions.pascal_case` and `wordkit.functions.camel_case`."""

NOT_LOWER_ALNUM_PATTERN: re.Pattern = re.compile(NOT_LOWER_ALNUM)
"""Used in `wordkit.functions.kebab_case` and `wordkit.functions.snake_case`."""

WHITESPACE_RUN_PATTERN: re.Pattern = re.compile(f"{ASCII_WHITESPACE}+")
"""Compiled regex matching a run of ASCII whitespace."""

WORD_START_PATTERN: re.Pattern = re.compile(WORD_START)
"""Compiled regex matching the first character of each word.

Used in `wordkit.functions.ucwords`."""

## Delimited regular expressions
BRACKET_DELIMITERS: Dict[str, str] = {
    '(': ')',
    '[': ']',
    '{': '}',
    '<': '>'
}
"""Opening delimiters that close with a different character.

Any other delimiter closes with itself, e.g. '/\\d+/' or '#\\d+#i'."""

MODIFIERS: Dict[str, re.RegexFlag] = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE
}
"""Trailing pattern modifiers and the `re` flags they map to.

The 'u' modifier is handled separately: without it, character classes such
as `\\d`, `\\s` and `\\w` only match ASCII.

Used in `wordkit.regex.compile_pattern`."""

UNICODE_MODIFIER: str = 'u'

BACKREFERENCE: str = "\\\\\\\\|\\\\\\$|\\\\(\\d{1,2})|\\$(\\d{1,2})|\\$\\{(\\d{1,2})\\}"
""" Uncompiled regex matching an escape or group reference in a replacement template.

Recognized forms are `\\\\`, `\\$`, `\\1`, `$1` and `${1}`."""

BACKREFERENCE_PATTERN: re.Pattern = re.compile(BACKREFERENCE)
"""Used in `wordkit.regex.expand_replacement`."""
