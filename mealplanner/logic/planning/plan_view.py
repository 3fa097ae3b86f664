"""Plan rendering: the canonical Monday..Sunday / Breakfast, Lunch, Dinner listing."""
from typing import Dict, List

from mealplanner.domain.Plan import Plan
from mealplanner.utilities.constants import DAYS_OF_WEEK, CATEGORIES, EMPTY_SLOT


def plan_rows(plan: Plan) -> List[Dict[str, str]]:
    """One row per day: {'day', 'breakfast', 'lunch', 'dinner'} with N/A for empty slots."""
    rows = []
    for day in DAYS_OF_WEEK:
        row = {"day": day}
        for category in CATEGORIES:
            entry = plan.get(day, category)
            row[category] = entry.meal_name if entry is not None else EMPTY_SLOT
        rows.append(row)
    return rows


def render_plan(plan: Plan) -> List[str]:
    lines: List[str] = []
    for row in plan_rows(plan):
        lines.append(row["day"])
        for category in CATEGORIES:
            lines.append(f"{category.capitalize()}: {row[category]}")
        lines.append("")
    return lines

__all__ = ['plan_rows', 'render_plan']
