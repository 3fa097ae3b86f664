"""Weekly plan construction.

Walks every day and category in canonical order, shows the candidate meals,
asks for a choice and upserts the chosen meal into the plan repository.
Output and input are supplied by the caller: `show(line)` displays a line
and `choose(day, category, names)` returns one of `names`.
"""
import logging
from typing import Callable, List, Optional

from mealplanner.domain.Plan import PlanEntry
from mealplanner.infra.Catalogue_Repository import CatalogueRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.logic.planning.plan_view import render_plan
from mealplanner.utilities import constants as C
from mealplanner.utilities.errors import LookupMiss

logger = logging.getLogger(__name__)

Show = Callable[[str], None]
Choose = Callable[[str, str, List[str]], str]


def resolve_choice(catalogue: CatalogueRepository, options, choice: str) -> int:
    """Map a chosen name to a meal id using the captured (id, name) options.

    Duplicate names resolve to the first option, which has the lowest id.
    Raises LookupMiss if the meal is no longer in the catalogue.
    """
    meal_id: Optional[int] = next((mid for mid, name in options if name == choice), None)
    if meal_id is None or catalogue.get_meal(meal_id) is None:
        raise LookupMiss(f"Meal {choice!r} is not in the catalogue")
    return meal_id


def plan_slot(catalogue: CatalogueRepository, plan_repo: PlanRepository, day: str, category: str,
              choose: Choose, show: Show) -> Optional[PlanEntry]:
    """Fill one (day, category) slot. Returns the stored entry, or None if skipped."""
    options = catalogue.meal_options(category)
    if category == C.CATEGORIES[0]:
        show(day)
    names = [name for _, name in options]
    for name in names:
        show(name)
    if not names:
        show(C.NO_CANDIDATES.format(category=category))
        logger.info(f"No {category} meals, leaving {day} {category} empty")
        return None

    choice = choose(day, category, names)
    try:
        meal_id = resolve_choice(catalogue, options, choice)
    except LookupMiss as e:
        logger.debug(f"Skipping {day} {category}: {e}")
        return None
    entry = PlanEntry(day, category, choice, meal_id)
    plan_repo.save_entry(entry)
    return entry


def plan_week(catalogue: CatalogueRepository, plan_repo: PlanRepository, choose: Choose, show: Show) -> None:
    """Plan all seven days, then show the full plan."""
    for day in C.DAYS_OF_WEEK:
        for category in C.CATEGORIES:
            plan_slot(catalogue, plan_repo, day, category, choose, show)
        show(C.DAY_PLANNED.format(day=day))
    for line in render_plan(plan_repo.get_plan()):
        show(line)

__all__ = ['resolve_choice', 'plan_slot', 'plan_week']
