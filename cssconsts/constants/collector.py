"""Harvest constant declarations from the root-scope rule."""

import logging
from typing import Dict, Optional

from cssconsts.stylesheet import Node, Rule, Stylesheet
from .matcher import ConstantMatcher
from .substitution import ValueSubstitutor


logger = logging.getLogger(__name__)

ROOT_SELECTOR = ':root'
CUSTOM_PROPERTY_PREFIX = '--'


class ConstantCollector:
    """
    Builds a constant table from the first ``:root`` rule of a stylesheet.

    Declarations are visited once in source order. Each matched value is
    resolved against the entries collected before it, so a constant may
    reference earlier constants but never later ones. Matched declarations
    are removed from the tree.
    """

    def __init__(self, matcher: Optional[ConstantMatcher] = None,
                 substitutor: Optional[ValueSubstitutor] = None):
        self.matcher = matcher or ConstantMatcher()
        self.substitutor = substitutor or ValueSubstitutor()

    def collect(self, sheet: Stylesheet,
                seed: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """
        Collect constants from ``sheet``.

        Args:
            sheet: Stylesheet to harvest; matched declarations are removed
            seed: Optional table to extend in place. Seeded entries are
                visible to references and may be overridden.

        Returns:
            The constant table (``seed`` itself when given)
        """
        constants = seed if seed is not None else {}

        def visit(node: Node) -> Optional[bool]:
            if isinstance(node, Rule) and node.selector == ROOT_SELECTOR:
                self._harvest(node, constants)
                return False
            return None

        sheet.walk(visit)
        return constants

    def _harvest(self, rule: Rule, constants: Dict[str, str]) -> None:
        harvested = 0
        for decl in rule.declarations:
            if not decl.name.startswith(CUSTOM_PROPERTY_PREFIX):
                continue
            if not self.matcher.matches(decl.name):
                continue

            name = decl.name[len(CUSTOM_PROPERTY_PREFIX):]
            constants[name] = self.substitutor.resolve(decl.value, constants)
            decl.remove()
            harvested += 1

        logger.debug(f"Collected {harvested} constant(s) from {ROOT_SELECTOR} at line {rule.source_line}")
