"""RecipeFlow — ingredient/step linkage and flow-ribbon geometry."""

__version__ = "0.1.0"
