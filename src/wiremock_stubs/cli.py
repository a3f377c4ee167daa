#!/usr/bin/env python3
"""
WireMock Stubs - mapping file generator

Builds WireMock stub mappings from a YAML/JSON definition file and writes
them to a mappings directory.

Usage:
    wiremock-stubs stubs.yaml --output wiremock/mappings
"""

import argparse
import logging
import sys
from typing import List, Optional

from .export import StubDefinitionLoader, MappingExporter, ExportConfig


# ============================================================================
# COMMAND-LINE INTERFACE
# ============================================================================

def parse_args(argv: Optional[List[str]] = None):
    """
    Parse command-line arguments.

    Returns:
        Namespace object with parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog='wiremock-stubs',
        description='Generate WireMock stub mappings from definition files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One mapping file per stub
  %(prog)s stubs.yaml --output wiremock/mappings/

  # Also write a single import bundle
  %(prog)s stubs.yaml --output mappings/ --bundle bundle.json

  # Compact JSON
  %(prog)s stubs.json --output mappings/ --indent 0
        """
    )

    parser.add_argument('definitions',
                        help='Stub definition file (.yaml, .yml or .json)')

    parser.add_argument('--output', '-o',
                        required=True,
                        help='Output directory for mapping files')

    parser.add_argument('--bundle', '-b',
                        help='Also write all mappings into one {"mappings": [...]} file')

    parser.add_argument('--indent',
                        type=int,
                        default=2,
                        help='JSON indentation, 0 for compact output (default: 2)')

    parser.add_argument('--sort-keys',
                        action='store_true',
                        help='Sort keys in the written JSON')

    parser.add_argument('--no-overwrite',
                        action='store_true',
                        help='Fail instead of replacing existing mapping files')

    parser.add_argument('--log-level',
                        default='warning',
                        choices=['debug', 'info', 'warning', 'error'],
                        help='Logging level (default: warning)')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    level = getattr(logging, args.log_level.upper())
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    logging.getLogger("wiremock_stubs").setLevel(level)

    config = ExportConfig(
        output_dir=args.output,
        indent=args.indent,
        sort_keys=args.sort_keys,
        overwrite=not args.no_overwrite,
    )

    print(f"📄 Loading definitions: {args.definitions}")
    try:
        definitions = StubDefinitionLoader(args.definitions).load()
    except (FileNotFoundError, ValueError) as e:
        print(f"✗ Error loading definitions: {e}", file=sys.stderr)
        return 1
    print(f"  ✓ Loaded {len(definitions)} stub definitions")

    exporter = MappingExporter(config)
    try:
        paths = exporter.export(definitions)
        bundle_path = exporter.export_bundle(definitions, args.bundle) if args.bundle else None
    except OSError as e:
        print(f"✗ Error writing mappings: {e}", file=sys.stderr)
        return 1

    for path in paths:
        print(f"  ✓ {path.name}")
    print(f"\n✓ Successfully created {len(paths)} WireMock mappings in {config.output_dir}")
    if bundle_path:
        print(f"✓ Bundle → {bundle_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
