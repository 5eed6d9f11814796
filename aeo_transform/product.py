from aeo_transform.markup import clean, esc, root_node, typed
from aeo_transform.models import TransformOutput, make_meta
from aeo_transform.tree import as_list, child


def brand(node):
    name = child(node, "brand", "Brand", "name")
    return typed("Brand", name=name) if name else None


def aggregate_rating(node):
    rating = child(node, "aggregateRating")
    if not rating:
        return None
    return typed(
        "AggregateRating",
        ratingValue=child(rating, "ratingValue"),
        reviewCount=child(rating, "reviewCount"),
    )


def price_html(offers):
    """'From:' line for the first offer in source order, or nothing."""
    if not offers:
        return ""
    first = offers[0]
    return (f"<p><strong>From:</strong> {esc(child(first, 'price'))} "
            f"{esc(child(first, 'priceCurrency'))}</p>")


def product(node) -> TransformOutput:
    """
    Transform a <Product> subtree.

    offers is always emitted as a list, even when there are none, unlike
    every other empty list in the JSON-LD output.
    """
    name = child(node, "name")
    description = child(node, "description")
    offers = as_list(child(node, "offers", "Offer"))

    json_ld = clean(root_node(
        "Product",
        name=name,
        description=description,
        image=[url for url in (child(im, "ImageObject", "url") for im in as_list(child(node, "image"))) if url],
        brand=brand(node),
        sku=child(node, "sku"),
        gtin13=child(node, "gtin13"),
        offers=[
            typed(
                "Offer",
                price=child(o, "price"),
                priceCurrency=child(o, "priceCurrency"),
                availability=child(o, "availability"),
            )
            for o in offers
        ],
        aggregateRating=aggregate_rating(node),
    ), keep=("offers",))

    description_html = f"<p>{esc(description)}</p>" if description else ""
    html = f"""<article>
    <h1>{esc(name)}</h1>
    {description_html}
    {price_html(offers)}
  </article>"""

    return TransformOutput(html, json_ld, make_meta(name, description))
