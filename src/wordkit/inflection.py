"""Naive English singularization and pluralization.

Words are converted with a short list of suffix rules. The first rule whose
pattern matches is applied and the rest are ignored. This is a heuristic,
not a morphological analyzer: irregular nouns are not handled.

The default rules live in `wordkit/data/inflections.yaml`. A different rule
table can be loaded with `load_rules` and passed to `singularize` or
`pluralize`.
"""

__docformat__ = 'google'

__all__ = [
    'load_rules',
    'default_rules',
    'singular_rules',
    'plural_rules',
    'singularize',
    'pluralize'
]

import logging
from functools import cache
from typing import Iterable, Optional, Tuple

from wordkit.entities import InflectionRule
from wordkit.lookups import InflectionData
from wordkit.regex import substitute

logger = logging.getLogger(__name__)

def load_rules(path) -> InflectionData:
    """
    Load a rule table from a YAML file.

    Args:
        path: Path to a file laid out like the packaged `inflections.yaml`

    Raises:
        ValueError: If the file is malformed
    """
    return InflectionData(path)

@cache
def default_rules() -> InflectionData:
    """Packaged rule table, loaded once."""
    return InflectionData()

def singular_rules() -> Tuple[InflectionRule, ...]:
    return default_rules().singular

def plural_rules() -> Tuple[InflectionRule, ...]:
    return default_rules().plural

def _apply_first_rule(word: str, rules: Iterable[InflectionRule]) -> Optional[str]:
    for rule in rules:
        if rule.matches(word):
            logger.debug('Rule %r matched %r', rule.description, word)
            return substitute(rule.pattern, rule.replacement, word)
    return None

def singularize(word: str, rules: Optional[InflectionData] = None) -> str:
    """
    Convert a plural English noun to its singular form.

    Args:
        word: A single word
        rules: Rule table to use instead of the packaged one

    Returns:
        Singular form, or the unchanged word if no rule applies

    Example:
        >>> singularize('boxes')
        'box'
        >>> singularize('cities')
        'city'
        >>> singularize('knives')
        'knive'
        >>> singularize('sheep')
        'sheep'
    """
    rules = rules or default_rules()
    singular = _apply_first_rule(word, rules.singular)
    return word if singular is None else singular

def pluralize(word: str, rules: Optional[InflectionData] = None) -> str:
    """
    Convert a singular English noun to its plural form.

    Args:
        word: A single word
        rules: Rule table to use instead of the packaged one

    Returns:
        Plural form. Words no rule applies to get a plain 's'.

    Example:
        >>> pluralize('box')
        'boxes'
        >>> pluralize('city')
        'cities'
        >>> pluralize('day')
        'days'
        >>> pluralize('leaf')
        'leafs'
        >>> pluralize('cat')
        'cats'
    """
    rules = rules or default_rules()
    plural = _apply_first_rule(word, rules.plural)
    if plural is None:
        logger.debug('No plural rule matched %r, appending %r', word, rules.plural_fallback)
        return word + rules.plural_fallback
    return plural
