"""
XML to semantic HTML, Schema.org JSON-LD and page meta.

Modules:
- tree.py: XML parsing into the generic tree, list normalization
- markup.py: HTML escaping and JSON-LD pruning
- dispatch.py: root detection and the per-type mappers it routes to
- page.py: full page shell and output files
"""

from aeo_transform.dispatch import MAPPERS, transform
from aeo_transform.errors import (
    MalformedInputError,
    MissingRootError,
    TransformError,
    UnsupportedRootError,
    XmlParseError,
)
from aeo_transform.markup import clean, esc
from aeo_transform.models import Author, TransformOutput
from aeo_transform.tree import as_list, parse_xml

__all__ = [
    "MAPPERS",
    "Author",
    "MalformedInputError",
    "MissingRootError",
    "TransformError",
    "TransformOutput",
    "UnsupportedRootError",
    "XmlParseError",
    "as_list",
    "clean",
    "esc",
    "parse_xml",
    "transform",
]
