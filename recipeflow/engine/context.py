"""LinkageContext — the single mutable state object flowing through all transforms.

Recipe records (Ingredient, Instruction) and the derived values (Link, Rect,
FlowShape) are immutable. Per-rule confidence contributions and the running
score matrix live on LinkageContext, indexed [instruction_index, ingredient_index].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from svgpathtools import Path

from recipeflow.engine.config import FlowConfig, LinkageConfig
from recipeflow.utils.geometry import sample_path


@dataclass(frozen=True)
class Ingredient:
    quantity: str
    measure: str
    name: str


@dataclass(frozen=True)
class Instruction:
    # 1-based display number; also seeds the step color
    step: int
    description: str
    duration: str | None = None


@dataclass(frozen=True)
class Recipe:
    title: str
    ingredients: tuple[Ingredient, ...]
    instructions: tuple[Instruction, ...]
    total_time: str = ""
    servings: int = 0


@dataclass(frozen=True)
class Link:
    """An inferred "step uses ingredient" relationship."""

    ingredient_index: int
    instruction_index: int
    confidence: float


@dataclass(frozen=True)
class Rect:
    """Screen-space bounds of a rendered row. y grows downward."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float


@dataclass(frozen=True)
class FlowShape:
    """A closed ribbon between an ingredient row and an instruction row."""

    link: Link
    path: Path
    color: str
    color_name: str
    opacity: float
    step: int

    @property
    def d(self) -> str:
        """SVG path data, closed with a trailing Z."""
        return f"{self.path.d()} Z"

    def polygon(self, samples_per_segment: int = 12) -> Polygon:
        return Polygon(sample_path(self.path, samples_per_segment))

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        xmin, xmax, ymin, ymax = self.path.bbox()
        return (xmin, ymin, xmax, ymax)


@dataclass
class LinkageContext:
    """Shared state flowing through the entire pipeline."""

    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[Instruction] = field(default_factory=list)

    # Measured row bounds keyed by list index (optional; geometry layer only)
    ingredient_rects: dict[int, Rect] = field(default_factory=dict)
    instruction_rects: dict[int, Rect] = field(default_factory=dict)

    config: LinkageConfig = field(default_factory=LinkageConfig)
    flow_config: FlowConfig = field(default_factory=FlowConfig)

    # --- Layer 0: normalized text ---
    names: list[str] = field(default_factory=list)
    texts: list[str] = field(default_factory=list)
    tokens: list[list[str]] = field(default_factory=list)

    # --- Layer 1: scoring ---
    # Running sum of all rule contributions
    scores: NDArray[np.float64] | None = None
    # Per-rule contribution matrices keyed by transform ID
    contributions: dict[str, NDArray[np.float64]] = field(default_factory=dict)

    # --- Layer 2/3 outputs ---
    links: list[Link] = field(default_factory=list)
    shapes: list[FlowShape] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_ingredients(self) -> int:
        return len(self.ingredients)

    @property
    def num_instructions(self) -> int:
        return len(self.instructions)

    @property
    def has_geometry(self) -> bool:
        return bool(self.ingredient_rects) and bool(self.instruction_rects)

    def add_scores(self, transform_id: str, matrix: NDArray[np.float64]) -> None:
        """Record a rule's contribution and fold it into the running score."""
        if self.scores is None:
            self.scores = np.zeros((self.num_instructions, self.num_ingredients))
        self.contributions[transform_id] = matrix
        self.scores += matrix

    def explain(self, ingredient_index: int, instruction_index: int) -> dict[str, Any]:
        """Break a pair's unclamped score down by contributing transform."""
        parts = {
            tid: float(m[instruction_index, ingredient_index])
            for tid, m in sorted(self.contributions.items())
        }
        return {"contributions": parts, "total": sum(parts.values())}
