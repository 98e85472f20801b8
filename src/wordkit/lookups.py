import logging
import re
from pathlib import Path
from typing import Tuple

import yaml

from wordkit.connections import InflectionDataSource
from wordkit.entities import InflectionRule
from wordkit.regex import compile_pattern

logger = logging.getLogger(__name__)

RULE_KEYS = ('pattern', 'replacement')

class InflectionData(InflectionDataSource):
    """
    Singular and plural rule lists read from a YAML file.

    The file holds a `singular` list and a `plural` list of rules, each a
    mapping with `pattern`, `replacement` and an optional `description`,
    plus an optional `plural_fallback` suffix. Without a path the packaged
    rules are loaded.

    Raises:
        ValueError: If the file does not follow this layout
    """
    def __init__(self, path=None):
        source = Path(path) if path else self.yaml_path()
        logger.debug('Loading inflection rules from %s', source)
        with source.open('r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f'Inflection rule file {source} must contain a mapping')

        self.source = source
        self.singular = self._parse_rules(data, 'singular')
        self.plural = self._parse_rules(data, 'plural')
        self.plural_fallback = str(data.get('plural_fallback', 's'))

    @staticmethod
    def _parse_rules(data: dict, key: str) -> Tuple[InflectionRule, ...]:
        entries = data.get(key) or []
        if not isinstance(entries, list):
            raise ValueError(f'{key!r} rules must be a list, got {type(entries).__name__}')

        rules = []
        for position, entry in enumerate(entries):
            if not isinstance(entry, dict) or not all(k in entry for k in RULE_KEYS):
                raise ValueError(f'{key!r} rule {position} needs a pattern and a replacement: {entry!r}')
            try:
                pattern = compile_pattern(str(entry['pattern']))
            except re.error as e:
                raise ValueError(f'{key!r} rule {position} has an invalid pattern: {e}') from e
            rules.append(InflectionRule(
                pattern = pattern,
                replacement = str(entry['replacement'] or ''),
                description = entry.get('description')
            ))
        return tuple(rules)
