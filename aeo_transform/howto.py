import logging

from aeo_transform.markup import clean, esc, root_node, typed
from aeo_transform.models import TransformOutput, make_meta
from aeo_transform.tree import as_list, child


def unwrap(wrappers, tag):
    """Flatten <wrapper><Tag/>...</wrapper> nodes into the list of inner Tag records."""
    return [item for wrapper in as_list(wrappers) for item in as_list(child(wrapper, tag)) if item]


def step_jsonld(step):
    return typed(
        "HowToStep",
        name=child(step, "name"),
        text=child(step, "text"),
        image=child(step, "image"),
    )


def collect_steps(node):
    """Flat <step> entries first, then grouped <section> entries, each in source order."""
    steps = [step_jsonld(s) for s in unwrap(child(node, "step"), "HowToStep")]
    for section in unwrap(child(node, "section"), "HowToSection"):
        steps.append(typed(
            "HowToSection",
            name=child(section, "name"),
            itemListElement=[step_jsonld(s) for s in unwrap(child(section, "step"), "HowToStep")],
        ))
    return steps


def step_item_html(step):
    html = f"<li><strong>{esc(step.get('name', ''))}</strong>"
    if step.get("text"):
        html += f"<div>{esc(step['text'])}</div>"
    if step.get("image"):
        html += f'<figure><img src="{esc(step["image"])}" alt=""></figure>'
    return html + "</li>"


def steps_html(steps):
    html = ""
    for step in steps:
        if step["@type"] == "HowToSection":
            items = "".join(step_item_html(s) for s in step.get("itemListElement", []))
            html += f"<section><h2>{esc(step.get('name'))}</h2><ol>{items}</ol></section>"
        else:
            html += step_item_html(step)
    return html


def supplies_html(supplies):
    if not supplies:
        return ""
    items = ""
    for supply in supplies:
        quantity = child(supply, "requiredQuantity")
        suffix = f" — {esc(quantity)}" if quantity else ""
        items += f"<li>{esc(child(supply, 'name'))}{suffix}</li>"
    return f"<h2>Supplies</h2><ul>{items}</ul>"


def tools_html(tools):
    if not tools:
        return ""
    items = "".join(f"<li>{esc(child(t, 'name'))}</li>" for t in tools)
    return f"<h2>Tools</h2><ul>{items}</ul>"


def howto(node) -> TransformOutput:
    """
    Transform a <HowTo> subtree.

    Supplies and tools come wrapped as <supply><HowToSupply/></supply> and
    <tool><HowToTool/></tool>. Steps may be flat (<step><HowToStep/></step>),
    grouped (<section><HowToSection>...</HowToSection></section>), or both.
    """
    name = child(node, "name")
    description = child(node, "description")
    supplies = unwrap(child(node, "supply"), "HowToSupply")
    tools = unwrap(child(node, "tool"), "HowToTool")
    steps = collect_steps(node)
    logging.debug(f"HowTo '{name}': {len(supplies)} supplies, {len(tools)} tools, {len(steps)} step entries")

    json_ld = clean(root_node(
        "HowTo",
        name=name,
        description=description,
        totalTime=child(node, "totalTime"),
        supply=[typed("HowToSupply", name=child(s, "name"), requiredQuantity=child(s, "requiredQuantity"))
                for s in supplies],
        tool=[typed("HowToTool", name=child(t, "name")) for t in tools],
        step=steps,
    ))

    html = f"<h1>{esc(name or 'HowTo')}</h1>"
    if description:
        html += f"<p>{esc(description)}</p>"
    html += supplies_html(supplies) + tools_html(tools)
    html += f"<h2>Steps</h2><ol>{steps_html(steps)}</ol>"

    return TransformOutput(html, json_ld, make_meta(name, description))
