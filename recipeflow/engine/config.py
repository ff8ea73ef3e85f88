"""Engine configuration — scoring weights, thresholds and ribbon styling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recipeflow.config import Settings

# Ingredient-name substring -> verbs that signal the ingredient is being used.
COOKING_TERMS: dict[str, tuple[str, ...]] = {
    "flour": ("mix", "combine", "add", "sift"),
    "butter": ("cream", "beat", "mix", "melt"),
    "sugar": ("cream", "beat", "mix", "add"),
    "eggs": ("beat", "add", "mix"),
    "chocolate": ("fold", "add", "melt", "chips"),
    "vanilla": ("add", "mix"),
    "salt": ("add", "mix", "combine"),
    "baking soda": ("mix", "combine", "add"),
}

# Step colors, indexed by (step - 1) % 10. Hex values are the iOS system colors.
PALETTE: tuple[tuple[str, str], ...] = (
    ("blue", "#007AFF"),
    ("purple", "#AF52DE"),
    ("green", "#34C759"),
    ("orange", "#FF9500"),
    ("red", "#FF3B30"),
    ("cyan", "#32ADE6"),
    ("mint", "#00C7BE"),
    ("pink", "#FF2D55"),
    ("indigo", "#5856D6"),
    ("teal", "#30B0C7"),
)

APEX_PRESETS: dict[str, float] = {
    "default": 30.0,
    "bouncy": 40.0,
    "smooth": 25.0,
    "snappy": 35.0,
}


@dataclass
class LinkageConfig:
    """Tunables for ingredient/instruction confidence scoring.

    Defaults reproduce the sample-tuned heuristic for the cookie recipe;
    retune per recipe family rather than treating them as fixed.
    """

    # Links are emitted only above this confidence
    threshold: float = 0.3
    max_confidence: float = 1.0

    # Tokenization of ingredient names
    token_delimiters: str = " ,()"
    min_word_length: int = 4  # words of 3 chars or fewer are ignored

    # Text matching
    word_match_weight: float = 0.4
    stem_match_weight: float = 0.2

    # Domain term table
    cooking_terms: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(COOKING_TERMS)
    )
    cooking_term_weight: float = 0.3

    # Positional priors
    early_step_max: int = 3
    early_step_terms: tuple[str, ...] = ("flour", "salt", "baking")
    early_step_weight: float = 0.2
    late_step_min: int = 6
    late_step_terms: tuple[str, ...] = ("chocolate",)
    late_step_weight: float = 0.3

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> LinkageConfig:
        if settings is None:
            from recipeflow.config import settings
        return cls(threshold=settings.link_threshold)


@dataclass
class FlowConfig:
    """Ribbon geometry and fill styling."""

    # Control-point offset of the top/bottom curves (screen units)
    curve_apex_length: float = APEX_PRESETS["default"]

    # opacity = confidence * opacity_scale + opacity_floor
    opacity_scale: float = 0.4
    opacity_floor: float = 0.4

    palette: tuple[tuple[str, str], ...] = PALETTE

    @classmethod
    def preset(cls, name: str) -> FlowConfig:
        if name not in APEX_PRESETS:
            raise ValueError(
                f"Unknown apex preset {name!r} (expected one of {sorted(APEX_PRESETS)})"
            )
        return cls(curve_apex_length=APEX_PRESETS[name])

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> FlowConfig:
        if settings is None:
            from recipeflow.config import settings
        return cls(curve_apex_length=settings.curve_apex_length)
