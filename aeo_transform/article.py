from aeo_transform.markup import clean, esc, root_node
from aeo_transform.models import Author, TransformOutput, make_meta
from aeo_transform.tree import as_list, child


def paragraphs_html(paragraphs):
    """Render each paragraph as an escaped <p> element."""
    return "".join(f"<p>{esc(p)}</p>" for p in as_list(paragraphs))


def section_html(section):
    return f"<section><h2>{esc(child(section, 'title'))}</h2>{paragraphs_html(child(section, 'p'))}</section>"


def article(node) -> TransformOutput:
    """
    Transform an <Article> subtree.

    Expected shape:
        <Article>
          <headline/> <description/> <datePublished/>
          <author><Person|Organization><name/><url/></...></author>
          <image><ImageObject><url/></ImageObject></image>
          <body><p/>...<section><title/><p/>...</section>...</body>
        </Article>
    """
    headline = child(node, "headline")
    author = Author.from_node(child(node, "author"))

    json_ld = clean(root_node(
        "Article",
        headline=headline,
        datePublished=child(node, "datePublished"),
        author=author.to_jsonld() if author else None,
        image=child(node, "image", "ImageObject", "url"),
    ))

    body = child(node, "body")
    sections = "".join(section_html(s) for s in as_list(child(body, "section")))
    html = f"<h1>{esc(headline or 'Article')}</h1>{paragraphs_html(child(body, 'p'))}{sections}"

    return TransformOutput(html, json_ld, make_meta(headline, child(node, "description")))
