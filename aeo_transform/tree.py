"""
Generic tree handling: XML text in, nested dicts/lists/scalars out.

The tree follows a few conventions that every mapper relies on:

- Attributes and child elements share one dict namespace (no prefix)
- A tag that repeats becomes a list, a tag that occurs once does not
- Element text is trimmed; text next to attributes/children goes to '#text'
- The XML declaration and leading processing instructions appear as
  '?xml' / '?<target>' keys ahead of the root element key
"""

import re
from typing import Any, Dict, List, Optional, Union

from lxml import etree

from aeo_transform.errors import MalformedInputError, XmlParseError

TEXT_KEY = "#text"

_XML_DECL_RE = re.compile(r"^\s*<\?xml\s+(.*?)\?>", re.DOTALL)
_PSEUDO_ATTR_RE = re.compile(r"""([\w.:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_INT_RE = re.compile(r"^[-+]?(0|[1-9]\d*)$")
_FLOAT_RE = re.compile(r"^[-+]?(0|[1-9]\d*)?\.\d+$")


def as_list(value: Any) -> List[Any]:
    """Return value as a list: [] when absent or falsy, [value] for a single node."""
    if not value:
        return []
    if isinstance(value, list):
        return value
    return [value]


def child(node: Any, *path: str) -> Any:
    """Follow path through nested mappings, returning None at the first gap."""
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
        if node is None:
            return None
    return node


def to_number(value: Any, field: str = "value") -> Union[int, float]:
    """Coerce a numeric-looking scalar to int or float."""
    if isinstance(value, bool):
        raise MalformedInputError(f"Expected a number for {field}, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip() if value is not None else ""
    try:
        number = float(text)
    except ValueError:
        raise MalformedInputError(f"Expected a number for {field}, got {value!r}") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise MalformedInputError(f"Expected a finite number for {field}, got {value!r}")
    return int(number) if number.is_integer() else number


def parse_value(text: str) -> Union[str, int, float]:
    """Convert element text that is a plain decimal number, leave anything else as is."""
    if _INT_RE.match(text):
        return int(text)
    if _FLOAT_RE.match(text):
        number = float(text)
        return int(number) if number.is_integer() else number
    return text


def _qualified_name(name: str, nsmap: Dict[Optional[str], str]) -> str:
    """Turn lxml's '{uri}local' back into the 'prefix:local' form used in the source."""
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    for prefix, ns_uri in nsmap.items():
        if ns_uri == uri and prefix:
            return f"{prefix}:{local}"
    return local


def _element_text(elem) -> str:
    parts = [elem.text or ""]
    for sub in elem:
        parts.append(sub.tail or "")
    return "".join(parts).strip()


def element_to_node(elem, parse_tag_values: bool = True) -> Any:
    """Recursively convert an lxml element into a generic tree node."""
    text = _element_text(elem)
    value = parse_value(text) if (parse_tag_values and text) else text
    children = [sub for sub in elem if isinstance(sub.tag, str)]

    if not elem.attrib and not children:
        return value

    node: Dict[str, Any] = {}
    for name, attr_value in elem.attrib.items():
        node[_qualified_name(name, elem.nsmap)] = attr_value

    for sub in children:
        tag = _qualified_name(sub.tag, sub.nsmap)
        sub_node = element_to_node(sub, parse_tag_values)
        if tag not in node:
            node[tag] = sub_node
        elif isinstance(node[tag], list):
            node[tag].append(sub_node)
        else:
            node[tag] = [node[tag], sub_node]

    if text:
        node[TEXT_KEY] = value
    return node


def _declaration(xml_text: str) -> Optional[Dict[str, str]]:
    match = _XML_DECL_RE.match(xml_text.lstrip("\ufeff"))
    if not match:
        return None
    return {m.group(1): m.group(2) if m.group(2) is not None else m.group(3)
            for m in _PSEUDO_ATTR_RE.finditer(match.group(1))}


def parse_xml(xml_text: Union[str, bytes], parse_tag_values: bool = True) -> Dict[str, Any]:
    """
    Parse raw XML into the generic tree consumed by transform().

    Args:
        xml_text: XML document as text or bytes
        parse_tag_values: Convert numeric element text to int/float

    Returns:
        dict: processing-instruction keys followed by the single root key
    """
    is_text = isinstance(xml_text, str)
    raw = xml_text.encode("utf-8") if is_text else xml_text
    # already-decoded text overrides the declared encoding
    parser = etree.XMLParser(remove_comments=True, resolve_entities=False, no_network=True,
                             encoding="utf-8" if is_text else None)
    try:
        root = etree.fromstring(raw, parser)
    except etree.XMLSyntaxError as e:
        raise XmlParseError(f"Invalid XML: {e}") from e

    doc: Dict[str, Any] = {}
    declaration = _declaration(raw.decode("utf-8", errors="replace")[:512])
    if declaration is not None:
        doc["?xml"] = declaration

    for pi in reversed(list(root.itersiblings(preceding=True))):
        if pi.tag is etree.PI:
            doc[f"?{pi.target}"] = pi.text or ""

    doc[_qualified_name(root.tag, root.nsmap)] = element_to_node(root, parse_tag_values)
    return doc
