"""Catalogue repository: meals and their ingredients persisted as JSON tables."""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from mealplanner.domain.Ingredient import Ingredient
from mealplanner.domain.Meal import Meal
from mealplanner.infra.json_files import read_records, write_records
from mealplanner.infra.paths import DATA_DIR, MEALS_FILENAME, INGREDIENTS_FILENAME
from mealplanner.utilities.errors import StorageError
from mealplanner.utilities.validators import parse_meal_input

logger = logging.getLogger(__name__)


class IdCounter:
    """Monotonic id source seeded from the highest id already stored."""

    def __init__(self, next_id: int = 1):
        self.next_id = next_id

    @classmethod
    def seeded_from(cls, existing_ids):
        return cls(max(existing_ids, default=0) + 1)

    def take(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value


def _decode(path, from_dict, rows):
    """Decode every stored row; a malformed row raises StorageError."""
    try:
        decoded = [from_dict(row) for row in rows]
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed record in {path}: {e!r}")
        raise StorageError(f"Malformed record in {path}: {e!r}") from e
    for item in decoded:
        if not isinstance(item.name, str) or not isinstance(getattr(item, "category", ""), str):
            raise StorageError(f"Malformed record in {path}: {item!r}")
    return decoded


class CatalogueRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.meals_file = data_dir / MEALS_FILENAME
        self.ingredients_file = data_dir / INGREDIENTS_FILENAME
        self._meal_rows = read_records(self.meals_file)
        self._ingredient_rows = read_records(self.ingredients_file)
        meals = _decode(self.meals_file, Meal.from_dict, self._meal_rows)
        ingredients = _decode(self.ingredients_file, Ingredient.from_dict, self._ingredient_rows)
        self.meal_ids = IdCounter.seeded_from(meal.id for meal in meals)
        self.ingredient_ids = IdCounter.seeded_from(ing.id for ing in ingredients)
        logger.debug(f"Loaded {len(self._meal_rows)} meals and {len(self._ingredient_rows)} ingredients")

    def add_meal(self, category: str, name: str, ingredients: Sequence[str]) -> int:
        """Validate and store a meal with its ingredients, returning the new meal id."""
        data = parse_meal_input(category, name, ingredients)
        meal = Meal(self.meal_ids.take(), data.category, data.name)
        self._meal_rows.append(meal.to_dict())
        for ingredient_name in data.ingredients:
            ingredient = Ingredient(self.ingredient_ids.take(), ingredient_name, meal.id)
            self._ingredient_rows.append(ingredient.to_dict())
        write_records(self.meals_file, self._meal_rows)
        write_records(self.ingredients_file, self._ingredient_rows)
        logger.info(f"Added {data.category} meal {data.name!r} with id {meal.id}")
        return meal.id

    def _ingredients_of(self, meal_id: int) -> List[Ingredient]:
        rows = [Ingredient.from_dict(r) for r in self._ingredient_rows if int(r["meal_id"]) == meal_id]
        rows.sort(key=lambda ing: ing.id)
        return rows

    def ingredients_for_meal(self, meal_id: int) -> List[str]:
        return [ing.name for ing in self._ingredients_of(meal_id)]

    def get_meal(self, meal_id: int) -> Optional[Meal]:
        for row in self._meal_rows:
            if int(row["meal_id"]) == meal_id:
                return Meal.from_dict(row, self._ingredients_of(meal_id))
        return None

    def meals_in_category(self, category: str) -> List[Meal]:
        """Meals of a category in the order they were added."""
        rows = sorted((r for r in self._meal_rows if r["category"] == category),
                      key=lambda r: int(r["meal_id"]))
        return [Meal.from_dict(r, self._ingredients_of(int(r["meal_id"]))) for r in rows]

    def meal_options(self, category: str) -> List[Tuple[int, str]]:
        """(id, name) pairs for a category sorted by name, then id."""
        options = [(int(r["meal_id"]), r["meal"]) for r in self._meal_rows if r["category"] == category]
        options.sort(key=lambda option: (option[1], option[0]))
        return options

    def meals_by_category(self, category: str) -> List[str]:
        return [name for _, name in self.meal_options(category)]

    def meal_id_by_name(self, name: str) -> Optional[int]:
        ids = [int(r["meal_id"]) for r in self._meal_rows if r["meal"] == name]
        return min(ids) if ids else None

    def ingredient_index(self) -> Dict[int, List[str]]:
        """meal id -> ingredient names, for every meal in the catalogue."""
        index: Dict[int, List[str]] = {int(r["meal_id"]): [] for r in self._meal_rows}
        for row in sorted(self._ingredient_rows, key=lambda r: int(r["ingredient_id"])):
            meal_id = int(row["meal_id"])
            if meal_id in index:
                index[meal_id].append(row["ingredient"])
        return index
