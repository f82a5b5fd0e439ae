"""Drink recipe book."""

from uuid import UUID

from .data_store import DataStore
from .models import Ingredient, Recipe


class RecipeManager:
    """Manages drink recipes."""

    def __init__(self, data_store: DataStore | None = None):
        self.data_store = data_store or DataStore()

    def add_recipe(
        self,
        name: str,
        ingredients: list[Ingredient] | None = None,
        instructions: str = "",
        glassware: str = "",
        category: str = "",
    ) -> Recipe:
        """Add a recipe to the book."""
        recipe = Recipe(
            name=name,
            ingredients=ingredients or [],
            instructions=instructions,
            glassware=glassware,
            category=category,
        )
        self.data_store.upsert_recipe(recipe)
        return recipe

    def remove_recipe(self, recipe_id: str | UUID) -> Recipe:
        """Remove a recipe.

        Raises:
            ValueError: If recipe not found
        """
        if isinstance(recipe_id, str):
            recipe_id = UUID(recipe_id)

        recipe = self.data_store.get_recipe(recipe_id)
        if recipe is None:
            raise ValueError(f"Recipe not found: {recipe_id}")

        self.data_store.delete_recipe(recipe_id)
        return recipe

    def update_recipe(
        self,
        recipe_id: str | UUID,
        name: str | None = None,
        ingredients: list[Ingredient] | None = None,
        instructions: str | None = None,
        glassware: str | None = None,
        category: str | None = None,
    ) -> Recipe:
        """Edit a recipe, keeping its id. None leaves a field unchanged.

        Raises:
            ValueError: If recipe not found
        """
        if isinstance(recipe_id, str):
            recipe_id = UUID(recipe_id)

        recipe = self.data_store.get_recipe(recipe_id)
        if recipe is None:
            raise ValueError(f"Recipe not found: {recipe_id}")

        changes = {
            "name": name,
            "ingredients": ingredients,
            "instructions": instructions,
            "glassware": glassware,
            "category": category,
        }
        updated = recipe.model_copy(update={k: v for k, v in changes.items() if v is not None})
        self.data_store.upsert_recipe(updated)
        return updated

    def get_recipes(self, category: str | None = None) -> list[Recipe]:
        """List recipes, optionally for one category."""
        recipes = self.data_store.load_recipes()
        if category:
            recipes = [r for r in recipes if r.category.lower() == category.lower()]
        return recipes
