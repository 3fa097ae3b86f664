"""Meal domain entity: id, category, name and the ingredients it owns (in insertion order)."""
from typing import List, Optional
from mealplanner.domain.Ingredient import Ingredient


class Meal:
    def __init__(self, meal_id: int, category: str, name: str,
                 ingredients: Optional[List[Ingredient]] = None):
        self.id = meal_id
        self.category = category
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []

    @property
    def ingredient_names(self) -> List[str]:
        return [ing.name for ing in self.ingredients]

    def __str__(self) -> str:
        return f"{self.name} ({self.category}) - Ingredients: {', '.join(self.ingredient_names)}"

    def __repr__(self) -> str:
        return f"Meal(id={self.id}, category={self.category!r}, name={self.name!r})"

    @staticmethod
    def from_dict(data, ingredients: Optional[List[Ingredient]] = None):
        return Meal(int(data["meal_id"]), data["category"], data["meal"], ingredients)

    def to_dict(self):
        '''Stored meal record; ingredients are persisted separately.'''
        return {
            "meal_id": self.id,
            "category": self.category,
            "meal": self.name,
        }

    def to_json(self):
        '''Meal with nested ingredient names, as returned by the API.'''
        return {
            "id": self.id,
            "category": self.category,
            "name": self.name,
            "ingredients": self.ingredient_names,
        }
