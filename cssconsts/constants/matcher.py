"""Decides which custom properties are constants."""

import re
from typing import Optional, Pattern, Union


# Names with no lowercase ASCII letters, e.g. --BRAND-RED or --SPACING_2
NO_LOWER_CASE = re.compile(r'^[^a-z]+$')


class ConstantMatcher:
    """Predicate over full declaration names (``--`` prefix included)."""

    def __init__(self, pattern: Optional[Union[str, Pattern[str]]] = None):
        if pattern is None:
            pattern = NO_LOWER_CASE
        elif isinstance(pattern, str):
            pattern = re.compile(pattern)
        self.pattern: Pattern[str] = pattern

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None

    def __repr__(self) -> str:
        return f"ConstantMatcher({self.pattern.pattern!r})"
