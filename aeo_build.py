#!/usr/bin/env python3
"""
Build a full HTML page and a JSON-LD file from one AEO XML document.

Usage: aeo-build <file.xml> [--out-dir <dir>]
- If --out-dir is omitted and the input lives under .../examples/source/,
  outputs are written to the sibling .../examples/output/ directory.
- Otherwise, outputs are written next to the input file.
"""

import argparse
import logging
import sys

from aeo_transform.config import DEFAULT_CONFIG_PATH, read_build_config
from aeo_transform.errors import TransformError
from aeo_transform.loggings import setup_logging
from aeo_transform.page import build_file


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Convert an AEO XML document to HTML and JSON-LD.')
    parser.add_argument('input', help='Input XML file')
    parser.add_argument('--out-dir', default=None, help='Directory to write the .html and .jsonld files to')
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH, help='YAML configuration file')
    parser.add_argument('--verbose', action='store_true', help='Show debug output')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = read_build_config(args.config)
    setup_logging(config.log_dir, verbose=args.verbose)

    try:
        build_file(args.input, out_dir=args.out_dir,
                   parse_tag_values=config.parse_tag_values,
                   title_fallback=config.default_title)
    except FileNotFoundError as e:
        logging.error(f"Input file not found: {e.filename}")
        return 1
    except TransformError as e:
        logging.error(f"Could not transform {args.input}: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
