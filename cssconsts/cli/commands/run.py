"""Run command: resolve constants in one or more stylesheets."""

import logging
import sys
from argparse import Namespace
from pathlib import Path

from cssconsts.config import ConfigLoader, ResolverConfig
from cssconsts.constants import ConstantsFileCache
from cssconsts.exceptions import ConfigValidationError
from cssconsts.processor import ConstantsProcessor


logger = logging.getLogger(__name__)


def build_config(args: Namespace) -> ResolverConfig:
    """
    Merge --config with command line overrides.

    --file and --regex win over values from the config file.
    """
    config = ConfigLoader().load(Path(args.config)) if args.config else ResolverConfig()

    options = {'file': config.file, 'regex': config.regex}
    if args.file:
        options['file'] = args.file
    if args.regex:
        options['regex'] = args.regex

    return ResolverConfig.from_options(options)


def run_resolver(args: Namespace) -> int:
    """
    Resolve constants in every stylesheet given on the command line.

    All stylesheets share one constants file cache, so --file is read once.
    """
    log_level = getattr(logging, args.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    inputs = [Path(p) for p in args.stylesheets]

    if len(inputs) > 1 and not args.out_dir:
        logger.error("--out-dir is required when processing more than one stylesheet")
        return 2
    if args.output and args.out_dir:
        logger.error("--output and --out-dir are mutually exclusive")
        return 2
    if args.out_dir:
        seen = set()
        for input_path in inputs:
            if input_path.name in seen:
                logger.error(f"Two stylesheets would both be written to --out-dir as {input_path.name}")
                return 2
            seen.add(input_path.name)

    try:
        config = build_config(args)
    except ConfigValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message}")
        return e.exit_code

    processor = ConstantsProcessor(config, cache=ConstantsFileCache())

    out_dir = Path(args.out_dir) if args.out_dir else None
    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)

    for input_path in inputs:
        if not input_path.exists():
            logger.error(f"Stylesheet not found: {input_path}")
            return 1

        logger.info(f"Resolving constants: {input_path}")
        try:
            text = input_path.read_text(encoding='utf-8')
            output = processor.process_text(text, source=str(input_path))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to process {input_path}: {e}")
            return 1

        if out_dir is not None:
            target = out_dir / input_path.name
            target.write_text(output, encoding='utf-8')
            logger.info(f"Wrote {target}")
        elif args.output:
            Path(args.output).write_text(output, encoding='utf-8')
            logger.info(f"Wrote {args.output}")
        else:
            sys.stdout.write(output)

    return 0
