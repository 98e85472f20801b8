"""Perl-style delimited regular expressions on top of the `re` module.

Patterns are written the way they are in Perl or PHP, wrapped in delimiters
and followed by modifiers:

    >>> compile_pattern('/\\\\d+/').pattern
    '\\\\d+'
    >>> compile_pattern('#hello#i').flags & re.IGNORECASE == re.IGNORECASE
    True

Replacement templates use numbered backreferences (`\\1`, `$1`, `${1}`), with
group 0 standing for the whole match.
"""

__docformat__ = 'google'

__all__ = [
    'compile_pattern',
    'expand_replacement',
    'first_match',
    'substitute'
]

import logging
import re
from functools import lru_cache
from typing import List, Optional, Union

from wordkit.patterns import (
    BRACKET_DELIMITERS,
    MODIFIERS,
    UNICODE_MODIFIER,
    BACKREFERENCE_PATTERN
)

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern]

def compile_pattern(pattern: PatternLike) -> re.Pattern:
    """
    Compile a delimited pattern string.

    Args:
        pattern: A delimited pattern such as '/\\\\d+/i', or an already compiled pattern

    Returns:
        Compiled pattern. Compiled input is returned unchanged.

    Raises:
        re.error: If the delimiters are malformed, a modifier is unknown or the body is invalid

    Example:
        >>> compile_pattern('/[a-z]+/i')
        re.compile('[a-z]+', re.IGNORECASE|re.ASCII)
        >>> compile_pattern('{^\\\\w+$}u')
        re.compile('^\\\\w+$')
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    return _compile_delimited(pattern)

@lru_cache(maxsize=256)
def _compile_delimited(pattern: str) -> re.Pattern:
    body, modifiers = _split_delimiters(pattern)

    flags = 0
    for modifier in modifiers:
        if modifier == UNICODE_MODIFIER or modifier.isspace():
            continue
        if modifier not in MODIFIERS:
            raise re.error(f'Unknown modifier {modifier!r} in pattern {pattern!r}')
        flags |= MODIFIERS[modifier]

    if UNICODE_MODIFIER not in modifiers:
        flags |= re.ASCII

    logger.debug('Compiling %r with flags %r', body, flags)
    return re.compile(body, flags)

def _split_delimiters(pattern: str):
    """
    Separate the body of a delimited pattern from its trailing modifiers.

    Example:
        >>> _split_delimiters('/ab+c/im')
        ('ab+c', 'im')
        >>> _split_delimiters('(a(b)c)')
        ('a(b)c', '')
    """
    stripped = pattern.lstrip()
    if not stripped:
        raise re.error('Empty regular expression')

    opening = stripped[0]
    if opening.isalnum() or opening == '\\':
        raise re.error(f'Delimiter must not be alphanumeric or backslash: {pattern!r}')

    closing = BRACKET_DELIMITERS.get(opening, opening)
    end = _find_closing(stripped, opening, closing)
    if end < 0:
        raise re.error(f'No ending delimiter {closing!r} found: {pattern!r}')

    return stripped[1:end], stripped[end + 1:]

def _find_closing(pattern: str, opening: str, closing: str) -> int:
    """
    Position of the first unescaped closing delimiter, or -1.

    Bracket delimiters nest, so inner pairs are skipped.

    Example:
        >>> _find_closing('/a\\\\/b/i', '/', '/')
        5
        >>> _find_closing('{a{2}}x', '{', '}')
        5
    """
    depth = 0
    position = 1
    while position < len(pattern):
        char = pattern[position]
        if char == '\\':
            position += 2
            continue
        if char == closing:
            if depth == 0:
                return position
            depth -= 1
        elif char == opening:
            depth += 1
        position += 1
    return -1

def expand_replacement(template: str, match: re.Match) -> str:
    """
    Expand a replacement template against a match.

    Groups that did not participate in the match, or that do not exist in the
    pattern, expand to an empty string.

    Args:
        template: Replacement text with `\\N`, `$N` or `${N}` references
        match: The match being replaced

    Returns:
        Replacement text

    Example:
        >>> m = re.search('(b)(x)?', 'abc')
        >>> expand_replacement('[$1|\\\\2|${0}]', m)
        '[b||b]'
        >>> expand_replacement('\\\\$1 costs \\\\\\\\', m)
        '$1 costs \\\\'
    """
    def _expand(reference: re.Match) -> str:
        token = reference.group(0)
        if token in ('\\\\', '\\$'):
            return token[1]

        number = int(next(filter(None, reference.groups())))
        if number > match.re.groups:
            return ''
        return match.group(number) or ''

    return BACKREFERENCE_PATTERN.sub(_expand, template)

def substitute(pattern: PatternLike, replacement: str, text: str) -> str:
    """
    Replace every match of pattern in text.

    Example:
        >>> substitute('/(\\\\w+)@(\\\\w+)/', '$2 at \\\\1', 'me@home')
        'home at me'
        >>> substitute('/x/', 'y', 'abc')
        'abc'
    """
    compiled = compile_pattern(pattern)
    return compiled.sub(lambda m: expand_replacement(replacement, m), text)

def first_match(pattern: PatternLike, text: str) -> Optional[List[str]]:
    """
    Groups of the first match of pattern in text.

    Args:
        pattern: Delimited pattern string or compiled pattern
        text: Text to search

    Returns:
        List with the full match followed by each group, or None if nothing matches.
        Groups that did not participate are empty strings, and trailing ones are dropped.

    Example:
        >>> first_match('/(\\\\d+)(px)?/', 'width: 120')
        ['120', '120']
        >>> first_match('/(a)?(b)/', 'b')
        ['b', '', 'b']
        >>> first_match('/\\\\d+/', 'abc') is None
        True
    """
    found = compile_pattern(pattern).search(text)
    if found is None:
        return None

    groups = [found.group(0)] + list(found.groups())
    while groups and groups[-1] is None:
        groups.pop()
    return [g or '' for g in groups]
