from mealplanner.tests.scripted_console import ScriptedConsole
from mealplanner.cli.prompts import (
    ask_action, ask_category, ask_ingredients, ask_meal_choice, ask_meal_name, ask_until_valid
)
from mealplanner.utilities import constants as C


def test_category_loop_rejects_until_exact_match():
    console = ScriptedConsole(["lunch!", "LUNCH", "lunch"])
    assert ask_category(console) == "lunch"
    assert console.output.count(C.WRONG_CATEGORY) == 2
    # the prompt is repeated before every attempt
    assert console.output.count(C.ADD_CATEGORY_PROMPT) == 3
    assert console.pending == []


def test_category_input_is_trimmed():
    console = ScriptedConsole(["  dinner  "])
    assert ask_category(console, C.SHOW_CATEGORY_PROMPT) == "dinner"
    assert console.output == [C.SHOW_CATEGORY_PROMPT]


def test_meal_name_loop():
    console = ScriptedConsole(["Pizza 4 you", "   ", " Pizza "])
    assert ask_meal_name(console) == "Pizza"
    assert console.output.count(C.WRONG_FORMAT) == 2


def test_ingredients_loop():
    console = ScriptedConsole(["flour, 3 eggs", "flour, eggs,", "flour, eggs"])
    assert ask_ingredients(console) == ["flour", "eggs"]
    assert console.output.count(C.WRONG_FORMAT) == 2


def test_meal_choice_prompts_once_and_repeats_rejection():
    console = ScriptedConsole(["pancakes", "Waffles", "Pancakes"])
    assert ask_meal_choice(console, "breakfast", "Monday", ["Oatmeal", "Pancakes"]) == "Pancakes"
    assert console.output == [
        "Choose the breakfast for Monday from the list above:",
        C.UNKNOWN_MEAL,
        C.UNKNOWN_MEAL,
    ]


def test_action_loop():
    console = ScriptedConsole(["list", "LIST PLAN", " list plan "])
    assert ask_action(console) == "list plan"
    assert console.output.count(C.INVALID_ACTION) == 2


def test_ask_until_valid_has_no_retry_cap():
    console = ScriptedConsole(["no"] * 50 + ["yes"])
    value = ask_until_valid(console, None, lambda line: line if line == "yes" else None, "again")
    assert value == "yes"
    assert console.output == ["again"] * 50
