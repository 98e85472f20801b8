__docformat__ = 'google'

__all__ = [
    # Helpers
    'chain_operations',
    'replace_all',
    'ucfirst',
    'lcfirst',
    'ucwords',
    # Casing
    'pascal_case',
    'camel_case',
    'kebab_case',
    'snake_case',
    'title_case',
    # Editing
    'trim',
    'replace',
    'remove_letters',
    'capitalize_appended_word',
    # Queries
    'substring',
    'contains'
]

from functools import reduce
from typing import Callable, Dict, Iterable, List, Optional, Union

from wordkit.patterns import (
    TRIM_CHARACTERS,
    WORD_BREAK_PATTERN,
    NOT_LOWER_ALNUM_PATTERN,
    WHITESPACE_RUN_PATTERN,
    WORD_START_PATTERN
)

Words = Union[str, Iterable[str]]

def chain_operations(value: str, functions: List[Callable[[str], str]]) -> str:
    """
    Pass a value through each function in turn.

    Example:
        >>> chain_operations(' Hi ', [str.strip, str.upper])
        'HI'
    """
    return reduce(lambda result, f: f(result), functions, value)

def replace_all(replacements: Dict[str, str], text: str) -> str:
    """
    Apply literal replacements one after another, in dict order.

    Empty search strings are skipped.

    Args:
        replacements: Mapping of search string to replacement
        text: Text to edit

    Example:
        >>> replace_all({'a': 'b', 'b': 'c'}, 'ab')
        'cc'
    """
    for search, replacement in replacements.items():
        if search:
            text = text.replace(search, replacement)
    return text

def ucfirst(text: str) -> str:
    """
    Upper-case the first character, leaving the rest untouched.

    Example:
        >>> ucfirst('hello World')
        'Hello World'
    """
    return text[:1].upper() + text[1:]

def lcfirst(text: str) -> str:
    """
    Lower-case the first character, leaving the rest untouched.

    Example:
        >>> lcfirst('HelloWorld')
        'helloWorld'
    """
    return text[:1].lower() + text[1:]

def ucwords(text: str) -> str:
    """
    Upper-case the first character of each whitespace-delimited word.

    Only whitespace starts a new word, so hyphenated words keep their
    inner case.

    Example:
        >>> ucwords('dover-foxcroft and  bar harbor')
        'Dover-foxcroft And  Bar Harbor'
    """
    return WORD_START_PATTERN.sub(lambda m: m.group(1).upper(), text)

def _fragments(text: str) -> List[str]:
    return WORD_BREAK_PATTERN.split(text)

def pascal_case(text: str) -> str:
    """
    Convert text to PascalCase.

    Text is split on runs of whitespace or underscores and the first letter
    of every fragment is capitalized. Other characters are kept as they are.

    Example:
        >>> pascal_case('hello world')
        'HelloWorld'
        >>> pascal_case('user_first name')
        'UserFirstName'
        >>> pascal_case('already PascalCase')
        'AlreadyPascalCase'
    """
    return ''.join(map(ucfirst, _fragments(text)))

def camel_case(text: str) -> str:
    """
    Convert text to camelCase.

    Example:
        >>> camel_case('hello world')
        'helloWorld'
        >>> camel_case('User_first name')
        'userFirstName'
    """
    first, *rest = _fragments(text)
    return lcfirst(first + ''.join(map(ucfirst, rest)))

def _delimit(text: str, separator: str) -> str:
    return chain_operations(text, [
        lambda t: NOT_LOWER_ALNUM_PATTERN.sub(' ', t)
        , trim
        , lambda t: WHITESPACE_RUN_PATTERN.sub(separator, t)
        , str.lower
    ])

def kebab_case(text: str) -> str:
    """
    Convert text to kebab-case.

    Every run of characters other than lowercase letters and digits becomes a
    single hyphen. Uppercase letters count as separators and are dropped.

    Example:
        >>> kebab_case('hello world')
        'hello-world'
        >>> kebab_case('  user_id: 42 ')
        'user-id-42'
        >>> kebab_case('HelloWorld')
        'ello-orld'
    """
    return _delimit(text, '-')

def snake_case(text: str) -> str:
    """
    Convert text to snake_case.

    Follows the same rules as `kebab_case`, joining with underscores.

    Example:
        >>> snake_case('hello world')
        'hello_world'
        >>> snake_case('first-name')
        'first_name'
    """
    return _delimit(text, '_')

def title_case(text: str) -> str:
    """
    Convert text to Title Case.

    Example:
        >>> title_case('hELLO wORLD')
        'Hello World'
    """
    return ucwords(text.lower())

def trim(text: str) -> str:
    """
    Strip ASCII whitespace and NUL characters from both ends of text.

    Example:
        >>> trim('\\t hello \\n')
        'hello'
    """
    return text.strip(TRIM_CHARACTERS)

def replace(text: str, search: str, replacement: str) -> str:
    """
    Replace all literal occurrences of search. An empty search changes nothing.

    Example:
        >>> replace('a-b-c', '-', '+')
        'a+b+c'
        >>> replace('abc', '', '+')
        'abc'
    """
    return replace_all({search: replacement}, text)

def remove_letters(text: str, letters: Words) -> str:
    """
    Remove every occurrence of one or more substrings.

    Each substring is removed in turn, in the order given, so removing one
    can bring pieces of another together.

    Args:
        text: Text to edit
        letters: A substring, or an iterable of substrings

    Example:
        >>> remove_letters('banana', 'an')
        'ba'
        >>> remove_letters('abcabc', ['a', 'bc'])
        ''
        >>> remove_letters('xaby', ['b', 'ab'])
        'xay'
    """
    if isinstance(letters, str):
        letters = [letters]
    return replace_all(dict.fromkeys(letters, ''), text)

def capitalize_appended_word(text: str, word: str) -> str:
    """
    Capitalize every occurrence of word.

    The search ignores case. When the word is found, the rest of the text is
    lower-cased as well.

    Args:
        text: Text to edit
        word: Word to capitalize

    Returns:
        Edited text, or the unchanged text if word does not occur

    Raises:
        TypeError: If word is not a string

    Example:
        >>> capitalize_appended_word('the cat sat', 'cat')
        'the Cat sat'
        >>> capitalize_appended_word('The CAT saw a cat', 'cat')
        'the Cat saw a Cat'
        >>> capitalize_appended_word('The Dog', 'cat')
        'The Dog'
    """
    if not isinstance(word, str):
        raise TypeError(f'word must be a string, got {type(word).__name__}')

    target = word.lower()
    if not target:
        return text

    head, found, tail = text.lower().partition(target)
    if not found:
        return text

    capitalized = ucfirst(word)
    return replace(head + capitalized + tail, target, capitalized)

def substring(text: str, start: int, length: Optional[int] = None) -> str:
    """
    Extract part of text by offset and length.

    Args:
        text: Text to read
        start: Offset of the first character. Negative offsets count back from the end.
        length: Number of characters to read. Negative lengths leave that many
            characters off the end. Reads to the end when omitted.

    Example:
        >>> substring('hello', 1, 3)
        'ell'
        >>> substring('hello', -3)
        'llo'
        >>> substring('hello', 1, -1)
        'ell'
        >>> substring('hello', 10)
        ''
    """
    size = len(text)
    if start < 0:
        start = max(size + start, 0)
    if start > size:
        return ''
    if length is None:
        return text[start:]

    end = start + length if length >= 0 else size + length
    if end <= start:
        return ''
    return text[start:end]

def contains(text: str, words: Words) -> bool:
    """
    Case-insensitive check for one or more substrings.

    Args:
        text: Text to search
        words: A substring, or an iterable of candidates

    Returns:
        True if any candidate occurs in text, else False

    Example:
        >>> contains('Hello World', 'world')
        True
        >>> contains('Hello', ['xyz', 'ELL'])
        True
        >>> contains('Hello', [])
        False
    """
    if isinstance(words, str):
        words = [words]
    haystack = text.lower()
    return any(w.lower() in haystack for w in words)
