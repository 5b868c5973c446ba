"""Resolver options: normalization and YAML config file loading."""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern

import yaml

from cssconsts.constants import ConstantMatcher
from cssconsts.exceptions import ValidationError, ConfigValidationError


@dataclass
class ResolverConfig:
    """Options for one resolver invocation.

    ``file`` is an optional constants file shared across stylesheets.
    ``regex`` selects constants by full declaration name; ``None`` means the
    default no-lowercase rule.
    """
    file: Optional[str] = None
    regex: Optional[Pattern[str]] = None

    KNOWN_FIELDS = ('file', 'regex')

    def matcher(self) -> ConstantMatcher:
        return ConstantMatcher(self.regex)

    @classmethod
    def from_options(cls, options: Any = None) -> "ResolverConfig":
        """
        Normalize any accepted option shape.

        Accepts None, a path (str or os.PathLike), a compiled pattern, a
        dict with ``file``/``regex`` keys, or a ResolverConfig.

        Raises:
            ConfigValidationError: Unknown keys, wrong types or bad patterns
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, (str, os.PathLike)):
            return cls(file=os.fspath(options))
        if isinstance(options, re.Pattern):
            return cls(regex=options)
        if isinstance(options, dict):
            return cls._from_mapping(options)

        raise ConfigValidationError([ValidationError(
            f"Options must be a path, a pattern or a mapping, got {type(options).__name__}"
        )])

    @classmethod
    def _from_mapping(cls, options: Dict[str, Any], base_dir: Optional[Path] = None,
                      source: str = "") -> "ResolverConfig":
        errors: List[ValidationError] = []

        for key in options:
            if key not in cls.KNOWN_FIELDS:
                errors.append(ValidationError(f"Unknown option '{key}'", path=source))

        file = options.get('file')
        if file is None or file is False:
            file = None
        elif isinstance(file, (str, os.PathLike)):
            file = os.fspath(file)
            if not file:
                errors.append(ValidationError("'file' cannot be empty", path=source))
            elif base_dir is not None and not os.path.isabs(file):
                file = str(base_dir / file)
        else:
            errors.append(ValidationError(
                f"'file' must be a path string, got {type(file).__name__}", path=source
            ))

        regex = options.get('regex')
        if regex is None or isinstance(regex, re.Pattern):
            pass
        elif isinstance(regex, str):
            try:
                regex = re.compile(regex)
            except re.error as e:
                errors.append(ValidationError(f"Invalid 'regex' pattern {regex!r}: {e}", path=source))
        else:
            errors.append(ValidationError(
                f"'regex' must be a pattern string, got {type(regex).__name__}", path=source
            ))

        if errors:
            raise ConfigValidationError(errors)

        return cls(file=file, regex=regex)


class ConfigLoader:
    """Loads resolver options from a YAML file."""

    def load(self, config_path: Path) -> ResolverConfig:
        """
        Load and validate a YAML config file.

        Relative ``file`` entries resolve against the config file's directory.

        Raises:
            ConfigValidationError: Unreadable file, invalid YAML or bad options
        """
        config_path = Path(config_path)
        source = str(config_path)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigValidationError([ValidationError(f"Failed to load config: {e}", path=source)])

        if data is None:
            return ResolverConfig()

        if not isinstance(data, dict):
            raise ConfigValidationError([ValidationError(
                "Config must be a YAML mapping", path=source
            )])

        return ResolverConfig._from_mapping(data, base_dir=config_path.parent, source=source)
