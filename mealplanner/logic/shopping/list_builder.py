"""Shopping list builder.

Provides build_shopping_list(plan, catalogue), a pure aggregation of the
ingredients of every planned meal, and write_shopping_list(lines, filename),
the file sink used by the save action.
"""
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List, Union

from mealplanner.domain.Plan import Plan
from mealplanner.infra.Catalogue_Repository import CatalogueRepository
from mealplanner.utilities.errors import ExportError, ExportPrecondition

logger = logging.getLogger(__name__)


def count_ingredients(plan: Plan, ingredient_index: Dict[int, List[str]]) -> Counter:
    """Count ingredient names over every plan slot.

    A meal planned for three slots contributes three to each of its
    ingredients. Names are matched exactly (case sensitive). Entries whose
    meal id is missing from the index contribute nothing.
    """
    counts: Counter = Counter()
    for entry in plan.entries():
        counts.update(ingredient_index.get(entry.meal_id, []))
    return counts


def format_item(name: str, count: int) -> str:
    return name if count == 1 else f"{name} x{count}"


def build_shopping_list(plan: Plan, catalogue: CatalogueRepository) -> List[str]:
    """Ordered shopping list lines for a plan.

    Raises:
        ExportPrecondition: the plan has no entries.
    """
    if plan.is_empty():
        raise ExportPrecondition("Nothing has been planned yet")
    counts = count_ingredients(plan, catalogue.ingredient_index())
    return [format_item(name, counts[name]) for name in sorted(counts)]


def write_shopping_list(lines: List[str], filename: Union[str, Path]) -> Path:
    """Write one line per item, replacing the file if it exists."""
    path = Path(filename)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        logger.error(f"Export failed for {path}: {e}")
        raise ExportError(f"Cannot write {path}: {e}") from e
    logger.info(f"Exported {len(lines)} shopping list items to {path}")
    return path

__all__ = ['count_ingredients', 'format_item', 'build_shopping_list', 'write_shopping_list']
