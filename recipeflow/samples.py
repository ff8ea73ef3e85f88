"""Built-in demo recipe and a deterministic row layout for it."""

from __future__ import annotations

from recipeflow.engine.context import Ingredient, Instruction, Recipe, Rect

CHOCOLATE_CHIP_COOKIES = Recipe(
    title="Ultimate Chocolate Chip Cookies",
    ingredients=(
        Ingredient("2¼", "cups", "all-purpose flour"),
        Ingredient("1", "tsp", "baking soda"),
        Ingredient("1", "tsp", "salt"),
        Ingredient("1", "cup", "butter, softened"),
        Ingredient("¾", "cup", "granulated sugar"),
        Ingredient("¾", "cup", "brown sugar"),
        Ingredient("2", "large", "eggs"),
        Ingredient("2", "tsp", "vanilla extract"),
        Ingredient("2", "cups", "chocolate chips"),
    ),
    instructions=(
        Instruction(1, "Preheat oven to 375°F (190°C). Line baking sheets with parchment paper.", "2 min"),
        Instruction(2, "In a medium bowl, mix flour, baking soda, and salt until well combined.", "3 min"),
        Instruction(3, "In a large bowl, cream butter and both sugars until light and fluffy.", "5 min"),
        Instruction(4, "Beat in eggs one at a time, then add vanilla extract, mixing well.", "2 min"),
        Instruction(5, "Gradually add the flour mixture to the wet ingredients, mixing until just combined.", "3 min"),
        Instruction(6, "Fold in chocolate chips, distributing evenly throughout the dough.", "1 min"),
        Instruction(7, "Drop rounded tablespoons of dough onto prepared baking sheets, spacing 2 inches apart.", "5 min"),
        Instruction(8, "Bake for 9-11 minutes until edges are golden brown but centers still look slightly underbaked.", "10 min"),
    ),
    total_time="45 min",
    servings=24,
)


def sample_rects(
    recipe: Recipe,
    column_width: float = 220.0,
    gutter: float = 120.0,
    row_height: float = 28.0,
    instruction_row_height: float = 44.0,
) -> tuple[dict[int, Rect], dict[int, Rect]]:
    """Two-column layout: ingredients on the left, instructions on the right."""
    ingredient_rects = {
        i: Rect(0.0, i * row_height, column_width, (i + 1) * row_height)
        for i in range(len(recipe.ingredients))
    }
    left = column_width + gutter
    instruction_rects = {
        i: Rect(left, i * instruction_row_height, left + column_width, (i + 1) * instruction_row_height)
        for i in range(len(recipe.instructions))
    }
    return ingredient_rects, instruction_rects
