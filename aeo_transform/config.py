import logging
from dataclasses import dataclass
from typing import Optional

import yaml

DEFAULT_CONFIG_PATH = "config/aeo.yaml"


@dataclass
class BuildConfig:
    """Settings shared by the aeo-build CLI and the example runner."""
    parse_tag_values: bool = True
    default_title: str = "Page"
    source_dir: str = "examples/source"
    output_dir: str = "examples/output"
    log_dir: Optional[str] = None


def read_build_config(yaml_path=DEFAULT_CONFIG_PATH) -> BuildConfig:
    """Read the build configuration from YAML, falling back to defaults when the file is absent."""
    try:
        with open(yaml_path, 'r') as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logging.debug(f"Config file {yaml_path} not found, using defaults")
        return BuildConfig()

    if not isinstance(config, dict):
        raise ValueError(f"Config file {yaml_path} must contain a mapping, got {type(config).__name__}")

    parser =config.get('parser', {}) or {}
    page = config.get('page', {}) or {}
    examples = config.get('examples', {}) or {}
    defaults = BuildConfig()
    return BuildConfig(
        parse_tag_values=bool(parser.get('parse_tag_values', defaults.parse_tag_values)),
        default_title=str(page.get('default_title', defaults.default_title)),
        source_dir=examples.get('source_dir', defaults.source_dir),
        output_dir=examples.get('output_dir', defaults.output_dir),
        log_dir=config.get('log_dir'),
    )
