#!/usr/bin/env python3
"""
Run every example document through the transform.
Reads XML from the examples source directory and writes the HTML fragment
and pretty-printed JSON-LD for each one into the examples output directory.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd

from aeo_transform.config import DEFAULT_CONFIG_PATH, read_build_config
from aeo_transform.dispatch import find_root, transform
from aeo_transform.errors import TransformError
from aeo_transform.loggings import setup_logging
from aeo_transform.page import write_outputs
from aeo_transform.tree import parse_xml


def run_example(xml_path: Path, output_dir: Path, parse_tag_values: bool = True) -> Dict[str, str]:
    """Transform one example file and report how it went."""
    name = xml_path.stem
    result = {'name': name, 'root': '', 'status': 'ok', 'error': ''}

    try:
        document = parse_xml(xml_path.read_bytes(), parse_tag_values=parse_tag_values)
        result['root'] = find_root(document) or ''
        output = transform(document)
        write_outputs(name, output.html, output.json_ld, output_dir)
    except TransformError as e:
        logging.error(f"Error processing {xml_path.name}: {e}")
        result['status'] = 'failed'
        result['error'] = str(e)

    return result


def run_all(source_dir, output_dir, parse_tag_values=True) -> List[Dict[str, str]]:
    """Transform every *.xml file in source_dir, in name order."""
    source_dir = Path(source_dir)
    xml_files = sorted(source_dir.glob('*.xml'))

    if not xml_files:
        logging.warning(f"No XML files found in '{source_dir}'")
        return []

    logging.debug(f"Found {len(xml_files)} XML files to process")
    return [run_example(xml_path, Path(output_dir), parse_tag_values) for xml_path in xml_files]


def summarize(results: List[Dict[str, str]]) -> str:
    """Render the run results as a markdown table."""
    df = pd.DataFrame(results, columns=['name', 'root', 'status', 'error'])
    return df.to_markdown(index=False)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Transform all example XML documents.')
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH, help='YAML configuration file')
    parser.add_argument('--source', default=None, help='Directory containing example XML files')
    parser.add_argument('--output', default=None, help='Directory to write HTML and JSON-LD files to')
    parser.add_argument('--verbose', action='store_true', help='Show debug output')
    args = parser.parse_args(argv)

    config = read_build_config(args.config)
    setup_logging(config.log_dir, verbose=args.verbose)

    source_dir = args.source or config.source_dir
    output_dir = args.output or config.output_dir
    results = run_all(source_dir, output_dir, config.parse_tag_values)

    if not results:
        return 1

    logging.info("Summary:\n" + summarize(results))
    failed = sum(1 for r in results if r['status'] != 'ok')
    logging.info(f"Processed {len(results)} examples, {failed} failed")
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
