from aeo_transform.markup import clean, esc, root_node, typed
from aeo_transform.models import TransformOutput, make_meta
from aeo_transform.tree import as_list, child

ADDRESS_FIELDS = ("streetAddress", "addressLocality", "addressRegion", "postalCode", "addressCountry")


def postal_address(address):
    if not address:
        return None
    return typed("PostalAddress", **{f: child(address, f) for f in ADDRESS_FIELDS})


def opening_hours(node):
    wrapper = child(node, "openingHoursSpecification")
    if not wrapper:
        return None
    return [
        typed(
            "OpeningHoursSpecification",
            dayOfWeek=list(as_list(child(spec, "dayOfWeek"))),
            opens=child(spec, "opens"),
            closes=child(spec, "closes"),
        )
        for spec in as_list(child(wrapper, "OpeningHoursSpecification"))
    ]


def local_business(node) -> TransformOutput:
    """Transform a <LocalBusiness> subtree, including PostalAddress and opening hours."""
    name = child(node, "name")
    telephone = child(node, "telephone")

    json_ld = clean(root_node(
        "LocalBusiness",
        name=name,
        url=child(node, "url"),
        telephone=telephone,
        address=postal_address(child(node, "address")),
        openingHoursSpecification=opening_hours(node),
        sameAs=list(as_list(child(node, "sameAs"))),
    ))

    html = f"<h1>{esc(name)}</h1>"
    if telephone:
        html += f"<p>{esc(telephone)}</p>"

    return TransformOutput(html, json_ld, make_meta(name))
