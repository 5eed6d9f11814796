"""Shared helpers for the HTML and JSON-LD sides of every mapper."""

from typing import Any, Dict, Iterable

SCHEMA_CONTEXT = "https://schema.org"

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


def text(value: Any) -> str:
    """Render a scalar tree value as text ('' for absent values)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def esc(value: Any = "") -> str:
    """HTML-escape a value for insertion into element text or attribute values."""
    escaped = text(value)
    for char, entity in _HTML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped


def clean(obj: Dict[str, Any], keep: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Drop keys whose value is None or an empty list.

    Keys listed in keep are left alone even when empty. Returns the same dict.
    """
    for key in [k for k, v in obj.items() if k not in keep and (v is None or v == [])]:
        del obj[key]
    return obj


def typed(schema_type: str, **fields: Any) -> Dict[str, Any]:
    """Build a pruned Schema.org node of the given @type."""
    return clean({"@type": schema_type, **fields})


def root_node(schema_type: str, **fields: Any) -> Dict[str, Any]:
    """Build the top-level JSON-LD object; pruning is left to the caller."""
    return {"@context": SCHEMA_CONTEXT, "@type": schema_type, **fields}
