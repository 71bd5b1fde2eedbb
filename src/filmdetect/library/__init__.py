"""Recipe library loading"""

from .loader import load_recipe, load_recipes, save_recipe

__all__ = ["load_recipe", "load_recipes", "save_recipe"]
