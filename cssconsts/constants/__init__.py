"""
Constant resolution module.
Collects constant custom properties from :root and substitutes var() references.
"""

from .matcher import ConstantMatcher, NO_LOWER_CASE
from .substitution import ValueSubstitutor
from .collector import ConstantCollector, CUSTOM_PROPERTY_PREFIX, ROOT_SELECTOR
from .cache import ConstantsFileCache

__all__ = [
    'ConstantMatcher',
    'NO_LOWER_CASE',
    'ValueSubstitutor',
    'ConstantCollector',
    'CUSTOM_PROPERTY_PREFIX',
    'ROOT_SELECTOR',
    'ConstantsFileCache',
]
