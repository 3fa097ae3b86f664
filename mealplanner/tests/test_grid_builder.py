import pytest
from mealplanner.tests.scripted_console import ScriptedConsole
from mealplanner.cli.prompts import ask_meal_choice
from mealplanner.infra.Catalogue_Repository import CatalogueRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.logic.planning.grid_builder import plan_slot, plan_week, resolve_choice
from mealplanner.utilities import constants as C
from mealplanner.utilities.errors import LookupMiss


@pytest.fixture
def catalogue(tmp_path):
    repo = CatalogueRepository(tmp_path)
    repo.add_meal("breakfast", "Toast", ["bread", "butter"])
    repo.add_meal("breakfast", "Oatmeal", ["oats", "milk"])
    repo.add_meal("lunch", "Soup", ["water", "carrot"])
    repo.add_meal("dinner", "Stew", ["beef", "potato"])
    return repo


@pytest.fixture
def plan_repo(tmp_path):
    return PlanRepository(tmp_path)


def via(console):
    """choose/show callables backed by a scripted console."""
    return {
        "choose": lambda day, category, names: ask_meal_choice(console, category, day, names),
        "show": console.say,
    }


def test_plan_slot_lists_sorted_candidates_and_stores_choice(catalogue, plan_repo):
    console = ScriptedConsole(["Porridge", "Toast"])
    entry = plan_slot(catalogue, plan_repo, "Monday", "breakfast", **via(console))
    assert console.output == [
        "Monday",
        "Oatmeal",
        "Toast",
        "Choose the breakfast for Monday from the list above:",
        C.UNKNOWN_MEAL,
    ]
    assert (entry.meal_name, entry.meal_id) == ("Toast", 1)
    assert plan_repo.get_plan().get("Monday", "breakfast") == entry


def test_day_name_only_shown_before_breakfast(catalogue, plan_repo):
    console = ScriptedConsole(["Soup"])
    plan_slot(catalogue, plan_repo, "Monday", "lunch", **via(console))
    assert console.output[0] == "Soup"


def test_slot_without_candidates_is_skipped(tmp_path, plan_repo):
    empty = CatalogueRepository(tmp_path)
    shown = []

    def choose(day, category, names):
        raise AssertionError("no choice should be requested")

    assert plan_slot(empty, plan_repo, "Friday", "breakfast", choose, shown.append) is None
    assert shown == ["Friday", "No breakfast meals found. Add a meal first."]
    assert plan_repo.get_plan().is_empty()


def test_lookup_miss_skips_slot(catalogue, plan_repo, monkeypatch):
    monkeypatch.setattr(catalogue, "get_meal", lambda meal_id: None)
    result = plan_slot(catalogue, plan_repo, "Monday", "dinner", lambda d, c, names: "Stew", lambda line: None)
    assert result is None
    assert plan_repo.get_plan().is_empty()


def test_resolve_choice_prefers_lowest_id(tmp_path):
    repo = CatalogueRepository(tmp_path)
    repo.add_meal("lunch", "Salad", ["lettuce"])
    repo.add_meal("lunch", "Salad", ["spinach"])
    assert resolve_choice(repo, repo.meal_options("lunch"), "Salad") == 1
    with pytest.raises(LookupMiss):
        resolve_choice(repo, repo.meal_options("lunch"), "Burger")


def test_plan_week_with_plain_callables(catalogue, plan_repo):
    asked = []

    def choose(day, category, names):
        asked.append((day, category, names))
        return names[-1]

    shown = []
    plan_week(catalogue, plan_repo, choose, shown.append)
    assert len(asked) == 21
    assert asked[0] == ("Monday", "breakfast", ["Oatmeal", "Toast"])
    assert plan_repo.get_plan().get("Sunday", "breakfast").meal_name == "Toast"
    assert shown[-35:-30] == ["Monday", "Breakfast: Toast", "Lunch: Soup", "Dinner: Stew", ""]


def test_plan_week_fills_grid_and_lists_it(catalogue, plan_repo):
    choices = []
    for day in C.DAYS_OF_WEEK:
        choices += ["Oatmeal" if day == "Sunday" else "Toast", "Soup", "Stew"]
    console = ScriptedConsole(choices)
    plan_week(catalogue, plan_repo, **via(console))

    plan = plan_repo.get_plan()
    assert len(plan) == 21
    assert plan.get("Sunday", "breakfast").meal_name == "Oatmeal"
    for day in C.DAYS_OF_WEEK:
        assert f"Yeah! We planned the meals for {day}." in console.output
    # the full listing follows the last confirmation
    tail = console.output[-35:]
    assert tail[:5] == ["Monday", "Breakfast: Toast", "Lunch: Soup", "Dinner: Stew", ""]
    assert tail[30:34] == ["Sunday", "Breakfast: Oatmeal", "Lunch: Soup", "Dinner: Stew"]


def test_replanning_overwrites_slots(catalogue, plan_repo):
    plan_week(catalogue, plan_repo, **via(ScriptedConsole(["Toast", "Soup", "Stew"] * 7)))
    plan_week(catalogue, plan_repo, **via(ScriptedConsole(["Oatmeal", "Soup", "Stew"] * 7)))
    plan = plan_repo.get_plan()
    assert len(plan) == 21
    assert {e.meal_name for e in plan.entries() if e.category == "breakfast"} == {"Oatmeal"}
