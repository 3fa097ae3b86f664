"""Interactive session: one action per prompt until 'exit'."""
import logging

from mealplanner.cli.console import Console
from mealplanner.cli.prompts import ask_action, ask_category, ask_meal_name, ask_ingredients, ask_meal_choice
from mealplanner.infra.Catalogue_Repository import CatalogueRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.logic.planning.grid_builder import plan_week
from mealplanner.logic.planning.plan_view import render_plan
from mealplanner.logic.shopping.list_builder import build_shopping_list, write_shopping_list
from mealplanner.utilities import constants as C
from mealplanner.utilities.errors import ExportError, ExportPrecondition

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, console: Console, catalogue: CatalogueRepository, plan_repo: PlanRepository):
        self.console = console
        self.catalogue = catalogue
        self.plan_repo = plan_repo
        self._handlers = {
            "add": self.add_meal,
            "show": self.show_meals,
            "plan": self.plan,
            "list plan": self.list_plan,
            "save": self.save,
        }

    def run(self) -> int:
        """Process actions until 'exit' (or end of input). Returns the exit code."""
        try:
            while True:
                action = ask_action(self.console)
                if action == "exit":
                    break
                logger.debug(f"Action: {action}")
                self._handlers[action]()
        except EOFError:
            logger.debug("Input closed, ending session")
        self.console.say(C.FAREWELL)
        return 0

    def add_meal(self) -> int:
        category = ask_category(self.console, C.ADD_CATEGORY_PROMPT)
        name = ask_meal_name(self.console)
        ingredients = ask_ingredients(self.console)
        meal_id = self.catalogue.add_meal(category, name, ingredients)
        self.console.say(C.MEAL_ADDED)
        return meal_id

    def show_meals(self) -> None:
        category = ask_category(self.console, C.SHOW_CATEGORY_PROMPT)
        meals = self.catalogue.meals_in_category(category)
        if not meals:
            self.console.say(C.NO_MEALS_FOUND)
            return
        self.console.say(f"Category: {category}")
        for meal in meals:
            self.console.say(f"Name: {meal.name}")
            self.console.say("Ingredients:")
            for ingredient in meal.ingredient_names:
                self.console.say(ingredient)

    def plan(self) -> None:
        plan_week(
            self.catalogue,
            self.plan_repo,
            choose=lambda day, category, names: ask_meal_choice(self.console, category, day, names),
            show=self.console.say,
        )

    def list_plan(self) -> None:
        for line in render_plan(self.plan_repo.get_plan()):
            self.console.say(line)

    def save(self) -> bool:
        """Export the shopping list. Returns True when a file was written."""
        try:
            lines = build_shopping_list(self.plan_repo.get_plan(), self.catalogue)
        except ExportPrecondition:
            self.console.say(C.NOTHING_TO_SAVE)
            return False
        self.console.say(C.FILENAME_PROMPT)
        filename = self.console.ask()
        try:
            write_shopping_list(lines, filename)
        except ExportError:
            self.console.say(C.SAVE_FAILED.format(filename=filename))
            return False
        self.console.say(C.SAVED)
        return True
