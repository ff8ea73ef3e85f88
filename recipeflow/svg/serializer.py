"""Write standalone SVG documents from flow shapes."""

from __future__ import annotations

from collections.abc import Sequence

from recipeflow.engine.context import FlowShape


def serialize_svg(
    shapes: Sequence[FlowShape],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
) -> str:
    """One filled <path> per ribbon, in link order (later ribbons paint on top)."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w:g} {canvas_h:g}" xmlns="http://www.w3.org/2000/svg"'
        f' width="{canvas_w:g}" height="{canvas_h:g}" role="img">',
    ]

    if title:
        lines.append(f"  <title>{_escape(title)}</title>")

    for shape in shapes:
        link = shape.link
        lines.append(
            f'  <path d="{shape.d}" fill="{shape.color}" fill-opacity="{shape.opacity:.3f}"'
            f' data-ingredient="{link.ingredient_index}"'
            f' data-instruction="{link.instruction_index}"'
            f' data-step="{shape.step}" />'
        )

    lines.append("</svg>")
    return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
