"""Command-line interface for translation-sync."""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from .__version__ import __version__
from .utils.colors import Colors
from .utils.config import Config, CONFIG_FILE_NAME, create_default_config, ConfigValidationError
from .utils.logging import configure_logging, get_logger
from .core.errors import (
    TranslationSyncError,
    IncompleteBatchError,
    MergeInvariantError,
)
from .core.locale_store import LocaleStoreAccessor
from .features.synchronizer import KeySynchronizer
from .features.merger import MergeValidator


def load_and_validate_config(
    config_path: Optional[str] = None,
    validate: bool = True,
    verbose: bool = False
) -> Config:
    """
    Load configuration and optionally validate it.

    Args:
        config_path: Explicit config file (default: ./.translation-sync.yml if present)
        validate: Whether to validate the config
        verbose: Whether to print warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If loading or validation fails with errors
    """
    try:
        config = Config.from_file(Path(config_path) if config_path else None)
    except (OSError, ConfigValidationError) as e:
        errors = e.errors if isinstance(e, ConfigValidationError) else [str(e)]
        print(f"{Colors.error('❌')} Could not load configuration:")
        for error in errors:
            print(f"   • {error}")
        raise ConfigValidationError(errors) from e

    if validate:
        errors, warnings = config.validate()

        if verbose and warnings:
            for warning in warnings:
                print(f"{Colors.warning('⚠️')}  Config warning: {warning}")

        if errors:
            print(f"{Colors.error('❌')} Configuration errors:")
            for error in errors:
                print(f"   • {error}")
            raise ConfigValidationError(errors)

    return config


def _configure_logging(args):
    configure_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        log_file=Path(args.log_file) if args.log_file else None,
        use_colors=not args.no_color,
    )


def cmd_init(args):
    """Initialize configuration file."""
    config_path = Path(args.config) if args.config else Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not args.force:
        print(f"{Colors.error('❌')} Config already exists: {config_path}")
        print(f"   Use --force to overwrite")
        return 1

    config = create_default_config()
    config.save(config_path)

    print(f"{Colors.success('✅')} Created: {config_path}")
    print(f"\n{Colors.bold('Next steps:')}")
    print(f"1. Edit {config_path.name} to list your locales and source folder")
    print(f"2. Run: translation-sync synchronize")

    return 0


def cmd_synchronize(args):
    """Extract tr() keys and rebuild every locale file."""
    try:
        config = load_and_validate_config(args.config, validate=True, verbose=args.verbose)
    except ConfigValidationError:
        return 1

    _configure_logging(args)
    log = get_logger()

    synchronizer = KeySynchronizer.from_config(config)

    try:
        summary = synchronizer.synchronize(dry_run=args.dry_run)
    except TranslationSyncError as e:
        log.fail(str(e))
        log.hint("No files were modified.")
        return 1

    if not args.quiet:
        synchronizer.print_summary(summary, verbose=args.verbose)

    if args.output:
        output_path = Path(args.output)
        fmt = args.format or ('md' if output_path.suffix == '.md' else 'json')
        synchronizer.export_report(summary, output_path, format=fmt)

    return 0


def cmd_merge(args):
    """Merge a completed toTranslate.json into the locale files."""
    try:
        config = load_and_validate_config(args.config, validate=True, verbose=args.verbose)
    except ConfigValidationError:
        return 1

    _configure_logging(args)
    log = get_logger()

    accessor = LocaleStoreAccessor(
        Path(config.paths.translations),
        pending_file=config.paths.pending_file
    )
    merger = MergeValidator(accessor)

    try:
        summary = merger.merge()
    except IncompleteBatchError as e:
        log.fail(f"{accessor.pending_path.name} hasn't been fully translated yet!")
        log.error(f"\n🚨 The following translations are still empty:")
        for locale, key in e.entries:
            log.error(f"   - {IncompleteBatchError.describe(locale, key)}")
        log.hint("Please translate all empty strings before running merge.")
        return 1
    except MergeInvariantError as e:
        log.error(f"⚠️  {e}")
        return 1
    except TranslationSyncError as e:
        log.fail(str(e))
        return 1

    if not args.quiet:
        merger.print_summary(summary)

    return 0 if summary.success else 1


def _add_common_options(parser: argparse.ArgumentParser):
    # SUPPRESS keeps a top-level --config from being reset by the subcommand
    parser.add_argument('--config', '-c', metavar='PATH', default=argparse.SUPPRESS,
                        help='Config file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show detailed output')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only show warnings and errors')
    parser.add_argument('--log-file', metavar='PATH', help='Also write a full log to PATH')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='translation-sync',
        description='Keep JSON locale files in sync with tr() calls in your source',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', '-c', metavar='PATH',
                        help=f'Config file (default: ./{CONFIG_FILE_NAME})')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # init command
    init_parser = subparsers.add_parser('init', help='Create a configuration file')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')
    init_parser.add_argument('--config', '-c', metavar='PATH', default=argparse.SUPPRESS,
                             help='Where to write the config file')

    # synchronize command
    sync_parser = subparsers.add_parser(
        'synchronize', aliases=['sync'],
        help='Extract tr() keys, update locale files and write toTranslate.json'
    )
    sync_parser.add_argument('--dry-run', action='store_true', help='Preview only')
    sync_parser.add_argument('--output', '-o', metavar='PATH', help='Export sync report to file')
    sync_parser.add_argument('--format', '-f', choices=['json', 'md'], help='Report format')
    _add_common_options(sync_parser)

    # merge command
    merge_parser = subparsers.add_parser(
        'merge', help='Merge a fully translated toTranslate.json into the locale files'
    )
    _add_common_options(merge_parser)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        return cmd_init(args)
    elif args.command in ('synchronize', 'sync'):
        return cmd_synchronize(args)
    elif args.command == 'merge':
        return cmd_merge(args)
    else:
        parser.print_help()
        return 0


def update_translations():
    """Entry point for the ``update-translations`` script."""
    sys.exit(main(['synchronize'] + sys.argv[1:]))


def merge_translations():
    """Entry point for the ``merge-translations`` script."""
    sys.exit(main(['merge'] + sys.argv[1:]))


if __name__ == '__main__':
    sys.exit(main())
