"""
Constant resolution pipeline.

Collects constants (optionally seeded from a shared constants file), then
rewrites every declaration value in the stylesheet against the merged table.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from cssconsts.config import ResolverConfig
from cssconsts.constants import ConstantCollector, ConstantsFileCache, ValueSubstitutor
from cssconsts.stylesheet import Declaration, Stylesheet, parse_stylesheet


logger = logging.getLogger(__name__)


class ConstantsProcessor:
    """Resolves constant custom properties in stylesheets."""

    def __init__(self, options: Any = None, cache: Optional[ConstantsFileCache] = None):
        """
        Args:
            options: Anything ResolverConfig.from_options accepts
            cache: Shared file cache. A private one is created when omitted.
        """
        self.config = ResolverConfig.from_options(options)
        self.cache = cache if cache is not None else ConstantsFileCache()
        self.matcher = self.config.matcher()
        self.substitutor = ValueSubstitutor()

    def process(self, sheet: Stylesheet) -> Dict[str, str]:
        """
        Resolve constants in ``sheet`` in place.

        Runs its own event loop when a constants file is configured, so it
        must not be called from a running loop; use process_async there.

        Returns:
            The constant table used for substitution

        Raises:
            OSError: If the constants file cannot be read
        """
        if self.config.file:
            return asyncio.run(self.process_async(sheet))

        constants = self._collect(sheet)
        self._rewrite(sheet, constants)
        return constants

    async def process_async(self, sheet: Stylesheet) -> Dict[str, str]:
        """Async variant of process(). The tree is untouched until the file table is loaded."""
        seed: Dict[str, str] = {}
        if self.config.file:
            # Copy; the cached table is shared with other stylesheets
            seed = dict(await self.cache.load(self.config.file, self.matcher))

        constants = self._collect(sheet, seed)
        self._rewrite(sheet, constants)
        return constants

    def process_text(self, text: str, source: Optional[str] = None) -> str:
        """Parse, resolve and serialize CSS text."""
        sheet = parse_stylesheet(text, source=source)
        self.process(sheet)
        return sheet.to_css()

    async def process_text_async(self, text: str, source: Optional[str] = None) -> str:
        sheet = parse_stylesheet(text, source=source)
        await self.process_async(sheet)
        return sheet.to_css()

    def _collect(self, sheet: Stylesheet, seed: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        return ConstantCollector(self.matcher, self.substitutor).collect(sheet, seed)

    def _rewrite(self, sheet: Stylesheet, constants: Dict[str, str]) -> None:
        unresolved = set()

        def rewrite(decl: Declaration) -> None:
            decl.value = self.substitutor.resolve(decl.value, constants)
            unresolved.update(self.substitutor.unresolved)

        sheet.walk_decls(rewrite)

        if unresolved:
            logger.debug(
                f"{sheet.source or '<string>'}: {len(unresolved)} reference(s) left unresolved: "
                f"{sorted(unresolved)}"
            )
