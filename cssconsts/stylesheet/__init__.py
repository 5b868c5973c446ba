"""
Stylesheet tree module.
Wraps tinycss2 output in a small mutable tree of rules and declarations.
"""

from .tree import AtRule, Comment, Declaration, Node, Rule, Stylesheet
from .parser import parse_stylesheet

__all__ = [
    'AtRule',
    'Comment',
    'Declaration',
    'Node',
    'Rule',
    'Stylesheet',
    'parse_stylesheet',
]
