from pathlib import Path
from mealplanner.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized data locations (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
MEALS_FILENAME = 'meals.json'
INGREDIENTS_FILENAME = 'ingredients.json'
PLAN_FILENAME = 'plan.json'

__all__ = ['DATA_DIR', 'MEALS_FILENAME', 'INGREDIENTS_FILENAME', 'PLAN_FILENAME']
