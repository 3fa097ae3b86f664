"""Plan domain: the weekly grid of (day, category) slots, each holding at most one PlanEntry."""
from typing import Dict, Iterable, List, Optional
from mealplanner.utilities.constants import DAYS_OF_WEEK, CATEGORIES


class PlanEntry:
    def __init__(self, day: str, category: str, meal_name: str, meal_id: int):
        self.day = day
        self.category = category
        self.meal_name = meal_name
        self.meal_id = meal_id

    @property
    def slot(self):
        return self.day, self.category

    def __repr__(self) -> str:
        return f"PlanEntry({self.day}, {self.category}, {self.meal_name!r}, meal_id={self.meal_id})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlanEntry):
            return NotImplemented
        return (self.slot, self.meal_name, self.meal_id) == (other.slot, other.meal_name, other.meal_id)

    @staticmethod
    def from_dict(data):
        return PlanEntry(data["day_week"], data["meal_category"], data["meal_option"], int(data["meal_id"]))

    def to_dict(self):
        return {
            "day_week": self.day,
            "meal_option": self.meal_name,
            "meal_category": self.category,
            "meal_id": self.meal_id,
        }


class Plan:
    """Mapping day -> category -> PlanEntry.

    Setting a slot that is already filled replaces its entry, so the grid
    never holds more than one entry per (day, category).
    """

    def __init__(self, entries: Optional[Iterable[PlanEntry]] = None):
        self.meals: Dict[str, Dict[str, PlanEntry]] = {}
        for entry in entries or []:
            self.set_entry(entry)

    def set_entry(self, entry: PlanEntry):
        if entry.day not in DAYS_OF_WEEK:
            raise ValueError(f"Unknown day: {entry.day}")
        if entry.category not in CATEGORIES:
            raise ValueError(f"Unknown category: {entry.category}")
        self.meals.setdefault(entry.day, {})[entry.category] = entry

    def get(self, day: str, category: str) -> Optional[PlanEntry]:
        return self.meals.get(day, {}).get(category)

    def entries(self) -> List[PlanEntry]:
        """Entries in canonical day then category order."""
        ordered = []
        for day in DAYS_OF_WEEK:
            for category in CATEGORIES:
                entry = self.get(day, category)
                if entry is not None:
                    ordered.append(entry)
        return ordered

    def is_empty(self) -> bool:
        return not any(self.meals.values())

    def __len__(self) -> int:
        return sum(len(slots) for slots in self.meals.values())
