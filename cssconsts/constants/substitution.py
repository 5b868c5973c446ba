"""
Value substitution implementation.
Replaces var(--NAME) references with values from a constant table.
"""

import logging
import re
from typing import Mapping, Set


logger = logging.getLogger(__name__)


class ValueSubstitutor:
    """
    Substitutes constant references inside declaration values.

    A reference is ``var(--NAME)`` where NAME runs up to the next ``)``.
    References to names absent from the table are kept verbatim. A fallback
    is part of the name: ``var(--x, red)`` looks up the key ``"x, red"``.
    Replacement text is not rescanned within the same call.
    """

    REFERENCE_MARKER = 'var(--'
    REFERENCE_PATTERN = re.compile(r'var\(--([^)]+)\)')

    def __init__(self):
        """Initialize the substitutor."""
        self.unresolved: Set[str] = set()

    def resolve(self, value: str, constants: Mapping[str, str]) -> str:
        """
        Substitute every resolvable reference in a value.

        Args:
            value: Declaration value text
            constants: Constant table, names without the ``--`` prefix

        Returns:
            Value with known references replaced. Names that could not be
            resolved are left in ``self.unresolved`` until the next call.
        """
        self.unresolved.clear()

        if self.REFERENCE_MARKER not in value:
            return value

        def replace_reference(match):
            name = match.group(1)
            if name in constants:
                return constants[name]
            self.unresolved.add(name)
            return match.group(0)

        result = self.REFERENCE_PATTERN.sub(replace_reference, value)

        if self.unresolved:
            logger.debug(f"Unresolved references left in place: {sorted(self.unresolved)}")

        return result
