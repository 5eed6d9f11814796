from aeo_transform.markup import clean, esc, root_node, typed
from aeo_transform.models import TransformOutput, make_meta
from aeo_transform.tree import as_list, child


def contact_points(node):
    wrapper = child(node, "contactPoint")
    if not wrapper:
        return None
    return [
        typed("ContactPoint", telephone=child(c, "telephone"), contactType=child(c, "contactType"))
        for c in as_list(child(wrapper, "ContactPoint"))
    ]


def organization(node) -> TransformOutput:
    """Transform an <OrgRoot> subtree into an Organization."""
    name = child(node, "name")
    url = child(node, "url")

    json_ld = clean(root_node(
        "Organization",
        name=name,
        url=url,
        logo=child(node, "logo", "ImageObject", "url"),
        sameAs=list(as_list(child(node, "sameAs"))),
        contactPoint=contact_points(node),
    ))

    html = f"<h1>{esc(name)}</h1>"
    if url:
        html += f'<p><a href="{esc(url)}">{esc(url)}</a></p>'

    return TransformOutput(html, json_ld, make_meta(name))
