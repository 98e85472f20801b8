import re
from dataclasses import dataclass

@dataclass(frozen=True)
class InflectionRule:
    """
    A single suffix rule used by `wordkit.inflection`.

    Args:
        pattern: Compiled pattern the word must match for the rule to fire
        replacement: Replacement template, see `wordkit.regex.expand_replacement`
        description: Human readable summary of the rule
    """
    pattern: re.Pattern
    replacement: str
    description: str = None

    def matches(self, word: str) -> bool:
        return self.pattern.search(word) is not None
