from aeo_transform.markup import clean, esc, root_node, typed
from aeo_transform.models import TransformOutput, make_meta
from aeo_transform.tree import as_list, child, to_number


def breadcrumbs(node) -> TransformOutput:
    """
    Transform a <BreadcrumbList> subtree.

    Positions are taken as declared in the source, never renumbered, and the
    page title is the last crumb in source order.
    """
    items = as_list(child(node, "itemListElement", "ListItem"))

    json_ld = clean(root_node(
        "BreadcrumbList",
        itemListElement=[
            typed(
                "ListItem",
                position=to_number(child(item, "position"), field=f"itemListElement[{i}].position"),
                name=child(item, "name"),
                item=child(item, "item"),
            )
            for i, item in enumerate(items)
        ],
    ))

    crumbs = "".join(
        f'<li><a href="{esc(child(item, "item") or "#")}">{esc(child(item, "name"))}</a></li>'
        for item in items
    )
    html = f'<nav aria-label="Breadcrumb"><ol>{crumbs}</ol></nav>'

    last = items[-1] if items else None
    return TransformOutput(html, json_ld, make_meta(child(last, "name")))
