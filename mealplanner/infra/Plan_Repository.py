import logging
from pathlib import Path
from typing import Optional

from mealplanner.domain.Plan import Plan, PlanEntry
from mealplanner.infra.json_files import read_records, write_records
from mealplanner.infra.paths import DATA_DIR, PLAN_FILENAME
from mealplanner.utilities.errors import StorageError

logger = logging.getLogger(__name__)


class PlanRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.plan_file = data_dir / PLAN_FILENAME

    def get_plan(self) -> Plan:
        """Load the stored grid.

        Older files may hold several rows for one slot; the last row read wins.
        """
        rows = read_records(self.plan_file)
        try:
            return Plan(PlanEntry.from_dict(row) for row in rows)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed record in {self.plan_file}: {e!r}")
            raise StorageError(f"Malformed record in {self.plan_file}: {e!r}") from e

    def save_entry(self, entry: PlanEntry) -> None:
        """Upsert the entry on (day, category)."""
        plan = self.get_plan()
        previous = plan.get(entry.day, entry.category)
        plan.set_entry(entry)
        self.save_plan(plan)
        if previous is not None and previous.meal_id != entry.meal_id:
            logger.debug(f"Replaced {previous} with {entry}")

    def save_plan(self, plan: Plan) -> None:
        write_records(self.plan_file, [entry.to_dict() for entry in plan.entries()])
