"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting and error reporting
"""
import argparse
import os
import sys
import traceback
from typing import Any, Callable, Dict, List, Optional, Tuple

from pattern_catalog._version import __version__
from pattern_catalog.catalog import PatternCatalog, PatternCategory, get_catalog
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config import OUTPUT_FORMATS, get_config_manager
from pattern_catalog.domain.base.exceptions import DomainException
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.patterns.creational import abstract_factory, factory

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if argv is None else "pattern-catalog",
        description="Pattern Catalog - classic object-oriented design patterns, explained and runnable",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list                         # List all patterns
  %(prog)s patterns list --category structural   # Only structural patterns
  %(prog)s patterns show builder                 # Description, pros and cons
  %(prog)s patterns run singleton                # Run a demonstration
  %(prog)s vehicles create truck                 # Use the vehicle factory
  %(prog)s vehicles create boat --family water   # Use the abstract factory
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (YAML or JSON)')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Set logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Patterns resource
    patterns_parser = subparsers.add_parser('patterns', help='Browse the pattern catalog')
    patterns_subparsers = patterns_parser.add_subparsers(dest='action', help='Pattern actions')

    patterns_list = patterns_subparsers.add_parser('list', help='List all patterns')
    patterns_list.add_argument('--category', choices=[c.value for c in PatternCategory],
                               help='Filter by pattern category')

    patterns_show = patterns_subparsers.add_parser('show', help='Show pattern details')
    patterns_show.add_argument('slug', help='Pattern slug, e.g. abstract-factory')

    patterns_run = patterns_subparsers.add_parser('run', help='Run a pattern demonstration')
    patterns_run.add_argument('slug', help='Pattern slug, e.g. abstract-factory')

    # Vehicles resource
    vehicles_parser = subparsers.add_parser('vehicles', help='Create vehicles through the factories')
    vehicles_subparsers = vehicles_parser.add_subparsers(dest='action', help='Vehicle actions')

    vehicles_create = vehicles_subparsers.add_parser('create', help='Create a vehicle')
    vehicles_create.add_argument('kind', help='Vehicle kind, e.g. car')
    vehicles_create.add_argument('--family',
                                 help='Vehicle family; resolves through the abstract factory')

    vehicles_subparsers.add_parser('kinds', help='List vehicle families and their kinds')

    return parser.parse_args(argv)


def _list_patterns(args: argparse.Namespace, catalog: PatternCatalog) -> Dict[str, Any]:
    entries = catalog.list_entries(getattr(args, 'category', None))
    return {"patterns": [entry.to_dict(include_details=False) for entry in entries]}


def _show_pattern(args: argparse.Namespace, catalog: PatternCatalog) -> Dict[str, Any]:
    return {"pattern": catalog.get(args.slug).to_dict()}


def _run_pattern(args: argparse.Namespace, catalog: PatternCatalog) -> Dict[str, Any]:
    return {"pattern": args.slug, "output": catalog.run(args.slug)}


def _create_vehicle(args: argparse.Namespace, catalog: PatternCatalog) -> Dict[str, Any]:
    if args.family is not None:
        vehicle = abstract_factory.create_vehicle(args.family, args.kind)
    else:
        vehicle = factory.create_vehicle(args.kind)
    return {"vehicle": vehicle.model_dump(), "description": vehicle.describe()}


def _list_vehicle_kinds(args: argparse.Namespace, catalog: PatternCatalog) -> Dict[str, Any]:
    return {
        "families": {
            family: abstract_factory.resolve_family(family).supported_keys()
            for family in abstract_factory.supported_families()
        }
    }


COMMAND_HANDLERS: Dict[Tuple[str, str], Callable[[argparse.Namespace, PatternCatalog], Dict[str, Any]]] = {
    ('patterns', 'list'): _list_patterns,
    ('patterns', 'show'): _show_pattern,
    ('patterns', 'run'): _run_pattern,
    ('vehicles', 'create'): _create_vehicle,
    ('vehicles', 'kinds'): _list_vehicle_kinds,
}


def execute_command(args: argparse.Namespace, catalog: Optional[PatternCatalog] = None) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)

    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    return COMMAND_HANDLERS[handler_key](args, catalog or get_catalog())


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not getattr(args, 'action', None):
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        # Load configuration and configure logging
        try:
            config = get_config_manager(args.config).config
        except DomainException as e:
            print(f"Error: {e}")
            sys.exit(1)

        logging_config = config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        elif args.verbose:
            logging_config = logging_config.model_copy(update={"level": "DEBUG"})
        setup_logging(logging_config)
        logger = get_logger(__name__)

        # Execute command
        try:
            result = execute_command(args)

            output_format = args.format or config.output.format
            formatted_output = format_output(result, output_format)

            if args.output:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(formatted_output + "\n")
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

        except DomainException as e:
            logger.error(f"Domain error: {e}")
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
