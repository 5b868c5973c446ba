"""Build a Stylesheet tree from CSS text using tinycss2."""

import logging
from typing import Iterable, Optional

import tinycss2

from .tree import AtRule, Comment, Container, Declaration, Node, Rule, Stylesheet


logger = logging.getLogger(__name__)


def parse_stylesheet(text: str, source: Optional[str] = None) -> Stylesheet:
    """
    Parse CSS text into a mutable Stylesheet.

    Args:
        text: Full stylesheet text
        source: Optional origin (file path) used in log messages

    Returns:
        Stylesheet tree. Parse errors reported by tinycss2 are logged and
        dropped; they never abort parsing.
    """
    sheet = Stylesheet(source=source)
    components = tinycss2.parse_stylesheet(text, skip_comments=False, skip_whitespace=True)
    _append_all(sheet, components, source)
    return sheet


def _append_all(container: Container, components: Iterable, source: Optional[str]) -> None:
    for component in components:
        node = _convert(component, source)
        if node is not None:
            container.append(node)


def _parse_block(content) -> list:
    return tinycss2.parse_blocks_contents(content, skip_comments=False, skip_whitespace=True)


def _convert(component, source: Optional[str]) -> Optional[Node]:
    line = component.source_line

    if component.type == 'qualified-rule':
        rule = Rule(tinycss2.serialize(component.prelude).strip(), source_line=line)
        _append_all(rule, _parse_block(component.content), source)
        return rule

    if component.type == 'at-rule':
        params = tinycss2.serialize(component.prelude).strip()
        if component.content is None:
            return AtRule(component.at_keyword, params, has_block=False, source_line=line)
        at_rule = AtRule(component.at_keyword, params, source_line=line)
        _append_all(at_rule, _parse_block(component.content), source)
        return at_rule

    if component.type == 'declaration':
        return Declaration(
            component.name,
            tinycss2.serialize(component.value).strip(),
            important=component.important,
            source_line=line,
        )

    if component.type == 'comment':
        return Comment(component.value, source_line=line)

    if component.type == 'error':
        logger.warning(
            f"Dropping unparsable CSS in {source or '<string>'} "
            f"at line {line}, column {component.source_column}: {component.message}"
        )
        return None

    # Stray whitespace or tokens outside any rule carry no declarations
    return None
