"""Pytest configuration for the AEO transform tests."""

import logging
from pathlib import Path

import pytest

from aeo_transform.tree import parse_xml

EXAMPLES_SOURCE = Path(__file__).parent / "examples" / "source"


@pytest.fixture
def examples_source():
    """Directory holding one sample XML document per root type."""
    return EXAMPLES_SOURCE


@pytest.fixture
def load_sample():
    """Parse a sample document from examples/source by file stem."""
    def _load(name):
        return parse_xml((EXAMPLES_SOURCE / f"{name}.xml").read_bytes())
    return _load


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
