"""
Process-wide store of constant tables read from files.

A ConstantsFileCache is created once (per CLI run, per test) and passed to
every processor that should share it. Entries are written once per path and
never refreshed.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from cssconsts.stylesheet import parse_stylesheet
from .collector import ConstantCollector
from .matcher import ConstantMatcher


logger = logging.getLogger(__name__)

PathLike = Union[str, 'os.PathLike[str]']


def read_text(path: str) -> str:
    """Default reader: whole file as UTF-8."""
    return Path(path).read_text(encoding='utf-8')


class ConstantsFileCache:
    """Maps a path, exactly as supplied, to the constants parsed from it."""

    def __init__(self, reader: Optional[Callable[[str], str]] = None):
        """
        Args:
            reader: Callable returning a file's text. Runs in a worker thread.
                Errors it raises propagate to ``load`` callers uncached.
        """
        self._reader = reader or read_text
        self._entries: Dict[str, Dict[str, str]] = {}

    def __contains__(self, path: PathLike) -> bool:
        return os.fspath(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    async def load(self, path: PathLike, matcher: Optional[ConstantMatcher] = None) -> Dict[str, str]:
        """
        Return the constant table for ``path``, reading it on first use.

        Args:
            path: Constants file. Not normalized; ``a.css`` and ``./a.css``
                are separate entries.
            matcher: Selects constants on a miss. Ignored on a hit.

        Returns:
            The cached table. Callers must copy it before mutating.

        Raises:
            OSError: If the file cannot be read
        """
        key = os.fspath(path)

        cached = self._entries.get(key)
        if cached is not None:
            logger.debug(f"Constants cache hit: {key}")
            return cached

        logger.debug(f"Constants cache miss, reading: {key}")
        text = await asyncio.to_thread(self._reader, key)

        sheet = parse_stylesheet(text, source=key)
        constants = ConstantCollector(matcher).collect(sheet)

        self._entries[key] = constants
        logger.debug(f"Cached {len(constants)} constant(s) from {key}")
        return constants
