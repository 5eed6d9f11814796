import json
import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from aeo_transform.dispatch import transform
from aeo_transform.markup import esc
from aeo_transform.models import TransformOutput
from aeo_transform.tree import parse_xml


def jsonld_compact(json_ld) -> str:
    return json.dumps(json_ld, ensure_ascii=False, separators=(",", ":"))


def jsonld_pretty(json_ld) -> str:
    return json.dumps(json_ld, ensure_ascii=False, indent=2)


def build_page(output: TransformOutput, title_fallback="Page") -> str:
    """Wrap a transform result in a complete HTML page with its JSON-LD in the head."""
    title = output.title if output.title is not None else title_fallback
    return f"""<!doctype html>
<html><head>
<meta charset="utf-8">
<title>{esc(title)}</title>
<meta name="description" content="{esc(output.description or '')}">
<script type="application/ld+json">{jsonld_compact(output.json_ld)}</script>
</head><body><main>{output.html}</main></body></html>"""


def resolve_output_dir(input_path, out_dir=None) -> Path:
    """
    Decide where outputs for input_path go.

    An explicit out_dir wins. Inputs under .../examples/source/ go to the
    sibling .../examples/output/. Anything else is written next to the input.
    """
    if out_dir:
        return Path(out_dir)
    in_dir = Path(input_path).parent
    if in_dir.name == "source" and in_dir.parent.name == "examples":
        return in_dir.parent / "output"
    return in_dir


def write_outputs(name: str, html: str, json_ld, out_dir) -> Tuple[Path, Path]:
    """Write <name>.html and <name>.jsonld into out_dir, creating it if needed."""
    os.makedirs(out_dir, exist_ok=True)
    html_path = Path(out_dir) / f"{name}.html"
    jsonld_path = Path(out_dir) / f"{name}.jsonld"

    with open(html_path, 'w', encoding='utf-8') as f:
        f.write(html)
    with open(jsonld_path, 'w', encoding='utf-8') as f:
        f.write(jsonld_pretty(json_ld))

    logging.info(f"Built {html_path}")
    logging.info(f"Built {jsonld_path}")
    return html_path, jsonld_path


def build_file(input_path, out_dir: Optional[str] = None, parse_tag_values=True,
               title_fallback="Page") -> Tuple[Path, Path]:
    """Transform one XML file into a full .html page plus a .jsonld file."""
    with open(input_path, 'rb') as f:
        document = parse_xml(f.read(), parse_tag_values=parse_tag_values)

    output = transform(document)
    page = build_page(output, title_fallback=title_fallback)
    return write_outputs(Path(input_path).stem, page, output.json_ld,
                         resolve_output_dir(input_path, out_dir))
