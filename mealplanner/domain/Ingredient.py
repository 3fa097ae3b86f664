"""Ingredient domain entity: one named ingredient owned by exactly one meal."""


class Ingredient:
    def __init__(self, ingredient_id: int, name: str, meal_id: int):
        self.id = ingredient_id
        self.name = name
        self.meal_id = meal_id

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Ingredient(id={self.id}, name={self.name!r}, meal_id={self.meal_id})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.id, self.name, self.meal_id) == (other.id, other.name, other.meal_id)

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a stored record.'''
        return Ingredient(int(data["ingredient_id"]), data["ingredient"], int(data["meal_id"]))

    def to_dict(self):
        '''Converts the Ingredient to a dictionary for JSON persistence.'''
        return {
            "ingredient_id": self.id,
            "ingredient": self.name,
            "meal_id": self.meal_id,
        }
