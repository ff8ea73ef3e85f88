"""Flow ribbon geometry — closed curved regions between linked rows.

Each ribbon runs from an ingredient row's right edge to an instruction row's
left edge. The top boundary bows upward and the bottom boundary bows
downward, each drawn as two quadratic segments that share one control point
placed ``curve_apex_length`` above (or below) the edge midpoint.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from svgpathtools import Line, Path, QuadraticBezier

from recipeflow.engine.config import FlowConfig
from recipeflow.engine.context import FlowShape, Ingredient, Instruction, Link, Rect

logger = logging.getLogger(__name__)


class LinkIndexError(ValueError):
    """A Link references an ingredient or instruction that does not exist."""


def step_color(step: int, config: FlowConfig | None = None) -> str:
    """Hex fill color for a 1-based step number. Periodic in the palette size."""
    return _palette_entry(step, config)[1]


def step_color_name(step: int, config: FlowConfig | None = None) -> str:
    return _palette_entry(step, config)[0]


def _palette_entry(step: int, config: FlowConfig | None) -> tuple[str, str]:
    if step < 1:
        raise ValueError(f"Step numbers are 1-based, got {step}")
    palette = (config or FlowConfig()).palette
    return palette[(step - 1) % len(palette)]


def link_opacity(confidence: float, config: FlowConfig | None = None) -> float:
    cfg = config or FlowConfig()
    return confidence * cfg.opacity_scale + cfg.opacity_floor


def merge_rects(*maps: Mapping[int, Rect]) -> dict[int, Rect]:
    """Merge rectangle maps; later maps win on duplicate indices."""
    merged: dict[int, Rect] = {}
    for m in maps:
        merged.update(m)
    return merged


def _step_for(link: Link, instructions: Sequence[Instruction] | None) -> int:
    if instructions is None:
        return link.instruction_index + 1
    return instructions[link.instruction_index].step


def _check_indices(
    link: Link,
    ingredients: Sequence[Ingredient] | None,
    instructions: Sequence[Instruction] | None,
) -> None:
    if ingredients is not None and not 0 <= link.ingredient_index < len(ingredients):
        raise LinkIndexError(
            f"ingredient_index {link.ingredient_index} out of range for "
            f"{len(ingredients)} ingredients"
        )
    if instructions is not None and not 0 <= link.instruction_index < len(instructions):
        raise LinkIndexError(
            f"instruction_index {link.instruction_index} out of range for "
            f"{len(instructions)} instructions"
        )


def _bowed_curve(start: complex, end: complex, apex_offset: float) -> list[QuadraticBezier]:
    """Two quadratics start→mid→end sharing a control point offset vertically from mid."""
    mid = start + (end - start) / 2
    control = mid + complex(0, apex_offset)
    return [QuadraticBezier(start, control, mid), QuadraticBezier(mid, control, end)]


def flow_path(ingredient_rect: Rect, instruction_rect: Rect, curve_apex_length: float) -> Path:
    """Closed ribbon path between two rectangles.

    Screen coordinates: y grows downward, so "up" is a negative y offset.
    """
    top_start = complex(ingredient_rect.max_x, ingredient_rect.min_y)
    top_end = complex(instruction_rect.min_x, instruction_rect.min_y)
    bottom_start = complex(ingredient_rect.max_x, ingredient_rect.max_y)
    bottom_end = complex(instruction_rect.min_x, instruction_rect.max_y)

    segments = [
        *_bowed_curve(top_start, top_end, -curve_apex_length),
        Line(top_end, bottom_end),
        *_bowed_curve(bottom_end, bottom_start, curve_apex_length),
        Line(bottom_start, top_start),
    ]
    return Path(*segments)


def build_shapes(
    links: Sequence[Link],
    ingredient_rects: Mapping[int, Rect],
    instruction_rects: Mapping[int, Rect],
    instructions: Sequence[Instruction] | None = None,
    ingredients: Sequence[Ingredient] | None = None,
    config: FlowConfig | None = None,
) -> list[FlowShape]:
    """Build one FlowShape per link whose two rectangles are both known.

    Links with a missing rectangle are skipped; rows may not be measured yet.
    When ``instructions`` is given, colors follow each instruction's ``step``;
    otherwise the step is taken to be ``instruction_index + 1``.
    """
    cfg = config or FlowConfig()
    shapes: list[FlowShape] = []
    skipped = 0

    for link in links:
        _check_indices(link, ingredients, instructions)
        ingredient_rect = ingredient_rects.get(link.ingredient_index)
        instruction_rect = instruction_rects.get(link.instruction_index)
        if ingredient_rect is None or instruction_rect is None:
            skipped += 1
            continue

        step = _step_for(link, instructions)
        name, color = _palette_entry(step, cfg)
        shapes.append(
            FlowShape(
                link=link,
                path=flow_path(ingredient_rect, instruction_rect, cfg.curve_apex_length),
                color=color,
                color_name=name,
                opacity=link_opacity(link.confidence, cfg),
                step=step,
            )
        )

    if skipped:
        logger.debug("Flow: %d/%d links skipped (rect not measured)", skipped, len(links))
    return shapes


def connection_colors(
    ingredient_index: int,
    links: Sequence[Link],
    instructions: Sequence[Instruction] | None = None,
    config: FlowConfig | None = None,
) -> list[str]:
    """Colors of the steps an ingredient feeds, in link order. Used to tint rows."""
    return [
        step_color(_step_for(link, instructions), config)
        for link in links
        if link.ingredient_index == ingredient_index
    ]
